"""
End-to-end scenarios through the real corpus loader, classifier and router.
"""

from unittest.mock import MagicMock

import pytest

from campus_chat.chat.arbitration import ArbitrationRouter
from campus_chat.chat.config import ChatConfig
from campus_chat.chat.context import build_context
from campus_chat.chat.models import LOCAL_SOURCE, AnswerSource
from campus_chat.fallback.config import FallbackConfig
from campus_chat.fallback.gemini_client import GeminiFallbackClient
from campus_chat.fallback.models import ERROR_SOURCE, GEMINI_SOURCE
from campus_chat.fallback.prompts import ENGINE_UNAVAILABLE_MESSAGE, FALLBACK_ERROR_MESSAGE
from campus_chat.intent.config import IntentConfig
from campus_chat.intent.models import NO_INTENT, ClassificationResult
from campus_chat.shared.exceptions import ConfigurationError

from .helpers import StubClassifier


@pytest.mark.integration
class TestScenarios:

    @pytest.mark.asyncio
    async def test_fee_question_answered_locally(self, chatbot, stub_fallback):
        decision = await chatbot.router.answer("What are the fee structures?")

        assert decision.chosen_source == AnswerSource.LOCAL_BOT
        assert decision.source_label == LOCAL_SOURCE
        assert decision.intent_label == "fees"
        assert decision.effective_confidence >= 0.75
        assert decision.answer_text == chatbot.classifier.responses.get("fees")
        assert stub_fallback.calls == []

    @pytest.mark.asyncio
    async def test_gibberish_goes_to_generative_fallback(self, chatbot, stub_fallback):
        decision = await chatbot.router.answer("asdkjf qweqwe")

        assert decision.intent_label == NO_INTENT
        assert decision.effective_confidence == 0.0
        assert decision.chosen_source == AnswerSource.FALLBACK
        assert decision.source_label == GEMINI_SOURCE
        assert decision.answer_text == "Generated answer."
        assert stub_fallback.calls == [("asdkjf qweqwe", NO_INTENT)]

    @pytest.mark.asyncio
    async def test_unconfigured_fallback_reports_engine_unavailable(self):
        classifier = StubClassifier(ClassificationResult(
            intent_label="fees", confidence=0.4, canned_response="Fees text."
        ))
        fallback = GeminiFallbackClient(FallbackConfig(gemini_api_key=""))
        router = ArbitrationRouter(classifier, fallback, confidence_threshold=0.75)

        decision = await router.answer("fees maybe?")

        assert decision.answer_text == ENGINE_UNAVAILABLE_MESSAGE
        assert decision.source_label == ERROR_SOURCE

    def test_missing_corpus_directory_aborts_startup(self, tmp_path):
        config = ChatConfig(intent=IntentConfig(intents_dir=str(tmp_path / "missing")))

        with pytest.raises(ConfigurationError):
            build_context(config)


@pytest.mark.integration
def test_default_context_uses_gemini_client(chat_config):
    chatbot = build_context(chat_config)

    assert isinstance(chatbot.fallback, GeminiFallbackClient)
    assert not chatbot.fallback.is_configured
    assert chatbot.classifier.is_trained
    assert "fees" in chatbot.classifier.intents()
    assert chatbot.router.confidence_threshold == 0.75


@pytest.mark.integration
@pytest.mark.asyncio
async def test_broken_sdk_client_does_not_escape_router(monkeypatch):
    monkeypatch.setattr(
        "campus_chat.fallback.gemini_client.genai.Client",
        MagicMock(side_effect=ValueError("bad http_options")),
    )
    fallback = GeminiFallbackClient(FallbackConfig(gemini_api_key="k"))
    router = ArbitrationRouter(StubClassifier(), fallback)

    decision = await router.answer("hello?")

    assert decision.chosen_source == AnswerSource.FALLBACK
    assert decision.source_label == ERROR_SOURCE
    assert decision.answer_text == FALLBACK_ERROR_MESSAGE
