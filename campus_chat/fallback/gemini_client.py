"""
Gemini fallback client

Asks a hosted Gemini model for an answer when the local classifier cannot.
Every call is raced against a deadline; every failure mode is folded into a
fixed apology so callers never see an exception.

Reference:
    campus_chat/shared/deadline.py - Deadline race used around generate_content
"""

import time
import logging
from typing import Any, Optional, Protocol

from google import genai
from google.genai import types

from campus_chat.shared.deadline import DeadlineExceeded, run_with_deadline
from campus_chat.shared.exceptions import (
    FallbackError,
    FallbackTimeout,
    FallbackTransportError,
    FallbackUnconfigured,
)
from campus_chat.shared.observability import FALLBACK_LATENCY, record_fallback_outcome
from .config import FallbackConfig
from .models import ERROR_SOURCE, GEMINI_SOURCE, FallbackResult
from .prompts import ENGINE_UNAVAILABLE_MESSAGE, FALLBACK_ERROR_MESSAGE, build_prompt

logger = logging.getLogger(__name__)


class GenerativeFallback(Protocol):
    """Anything that can answer an utterance the classifier could not."""

    @property
    def is_configured(self) -> bool:
        ...

    async def get_answer(self, utterance: str, intent_label: Optional[str] = None) -> FallbackResult:
        ...


def extract_text(response: Any) -> str:
    """
    Pull the answer text out of a generate_content response.

    Prefers the aggregated ``text`` accessor and falls back to the first part
    of the first candidate.

    Raises:
        FallbackTransportError: If no non-empty text can be found
    """
    text = None
    try:
        text = response.text
    except (AttributeError, ValueError) as e:
        logger.debug(f"Response has no aggregated text: {e}")

    if not text:
        try:
            text = response.candidates[0].content.parts[0].text
        except (AttributeError, IndexError, KeyError, TypeError):
            text = None

    if not text or not str(text).strip():
        raise FallbackTransportError("Gemini response contained no text")
    return str(text).strip()


class GeminiFallbackClient:
    """
    Generative fallback backed by the google-genai SDK.

    The SDK client is created lazily on the first configured call. A client
    may also be injected, which is how tests replace the network.
    """

    def __init__(self, config: Optional[FallbackConfig] = None, client: Optional[Any] = None):
        self.config = config or FallbackConfig.from_env()
        self._client = client

        if self.is_configured:
            logger.info(
                f"✅ Gemini fallback configured (model={self.config.gemini_model}, "
                f"api_version={self.config.api_version}, timeout={self.config.timeout_ms}ms)"
            )
        else:
            logger.warning("⚠️ Gemini fallback not configured; answers will report the engine as unavailable")

    @property
    def is_configured(self) -> bool:
        return self.config.is_configured

    def _get_client(self) -> Any:
        if not self.is_configured:
            raise FallbackUnconfigured("GEMINI_API_KEY or GEMINI_MODEL is not set")

        if self._client is None:
            try:
                self._client = genai.Client(
                    api_key=self.config.gemini_api_key,
                    http_options=types.HttpOptions(api_version=self.config.api_version),
                )
            except Exception as e:
                raise FallbackTransportError(f"Gemini client could not be created: {e}") from e
        return self._client

    def _generate(self, client: Any, prompt: str) -> Any:
        return client.models.generate_content(
            model=self.config.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=self.config.temperature,
                top_p=self.config.top_p,
            ),
        )

    async def get_answer(self, utterance: str, intent_label: Optional[str] = None) -> FallbackResult:
        """
        Produce an answer for an utterance the classifier could not handle.

        Args:
            utterance: The user's question
            intent_label: Label the classifier produced, for logging only

        Returns:
            FallbackResult labelled "Gemini AI" on success, or "Error" with a
            fixed message on any failure. Never raises.
        """
        try:
            client = self._get_client()
        except FallbackUnconfigured as e:
            logger.warning(f"⚠️ Fallback skipped: {e}")
            record_fallback_outcome("unconfigured")
            return FallbackResult(answer_text=ENGINE_UNAVAILABLE_MESSAGE, source_label=ERROR_SOURCE)
        except FallbackError as e:
            logger.error(f"❌ Gemini fallback failed: {e}")
            record_fallback_outcome("error")
            return FallbackResult(answer_text=FALLBACK_ERROR_MESSAGE, source_label=ERROR_SOURCE)

        prompt = build_prompt(self.config.system_instruction, utterance)
        start_time = time.time()
        logger.info(f" Asking Gemini: '{utterance[:50]}' (intent={intent_label})")

        try:
            with FALLBACK_LATENCY.time():
                try:
                    response = await run_with_deadline(
                        self._generate,
                        client,
                        prompt,
                        timeout=self.config.timeout_seconds,
                        name="gemini.generate_content",
                    )
                except DeadlineExceeded as e:
                    raise FallbackTimeout(f"Gemini timeout after {self.config.timeout_ms}ms") from e
                except Exception as e:
                    raise FallbackTransportError(f"Gemini call failed: {e}") from e

                answer = extract_text(response)
        except FallbackTimeout as e:
            logger.error(f"⏱️ {e}")
            record_fallback_outcome("timeout")
            return FallbackResult(answer_text=FALLBACK_ERROR_MESSAGE, source_label=ERROR_SOURCE)
        except FallbackError as e:
            logger.error(f"❌ Gemini fallback failed: {e}")
            record_fallback_outcome("error")
            return FallbackResult(answer_text=FALLBACK_ERROR_MESSAGE, source_label=ERROR_SOURCE)

        record_fallback_outcome("success")
        logger.info(f"✅ Gemini answered in {(time.time() - start_time) * 1000:.0f}ms ({len(answer)} chars)")
        return FallbackResult(answer_text=answer, source_label=GEMINI_SOURCE)
