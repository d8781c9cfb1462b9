"""
Pytest fixtures for the chat service tests.
"""

import pytest
from fastapi.testclient import TestClient

from campus_chat.chat.app import create_app
from campus_chat.chat.config import ChatConfig
from campus_chat.chat.context import build_context
from campus_chat.fallback.config import FallbackConfig
from campus_chat.intent.config import DEFAULT_INTENTS_DIR, IntentConfig

from .helpers import StubFallback


@pytest.fixture
def stub_fallback():
    return StubFallback()


@pytest.fixture
def chat_config():
    """Packaged corpus, default threshold, no Gemini key."""
    return ChatConfig(
        intent=IntentConfig(intents_dir=DEFAULT_INTENTS_DIR, log_classifications=False),
        fallback=FallbackConfig(gemini_api_key=""),
    )


@pytest.fixture
def chatbot(chat_config, stub_fallback):
    return build_context(chat_config, fallback=stub_fallback)


@pytest.fixture
def client(chatbot):
    """FastAPI test client over a prebuilt context (lifespan runs)."""
    with TestClient(create_app(context=chatbot)) as test_client:
        yield test_client
