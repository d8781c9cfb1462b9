"""
Configuration for the Gemini fallback client.

Reference:
    campus_chat/intent/config.py - Same from_env pattern for the classifier
"""

import os
import logging
from dataclasses import dataclass

from .prompts import DEFAULT_SYSTEM_INSTRUCTION

logger = logging.getLogger(__name__)


@dataclass
class FallbackConfig:
    """
    Configuration for the generative-model fallback.

    Attributes:
        gemini_api_key: Gemini API key; empty disables the fallback (default: "")
        gemini_model: Gemini model name (default: gemini-2.5-flash)
        api_version: Gemini API version (default: v1)
        timeout_ms: Deadline for one generation call in milliseconds (default: 15000)
        temperature: Sampling temperature (default: 0.4)
        top_p: Nucleus sampling mass (default: 0.95)
        system_instruction: Domain preamble prepended to every question
    """

    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    api_version: str = "v1"
    timeout_ms: int = 15000
    temperature: float = 0.4
    top_p: float = 0.95
    system_instruction: str = DEFAULT_SYSTEM_INSTRUCTION

    @property
    def is_configured(self) -> bool:
        return bool(self.gemini_api_key and self.gemini_model)

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0

    def __post_init__(self):
        """Validate configuration after initialization"""
        if self.timeout_ms <= 0:
            raise ValueError(f"timeout_ms must be positive, got {self.timeout_ms}")

        if not 0.0 <= self.temperature <= 2.0:
            raise ValueError(f"temperature must be between 0.0 and 2.0, got {self.temperature}")

        if not 0.0 < self.top_p <= 1.0:
            raise ValueError(f"top_p must be in (0.0, 1.0], got {self.top_p}")

        if not self.gemini_api_key:
            logger.warning(
                "⚠️ GEMINI_API_KEY not set. Generative fallback will answer with the "
                "engine-unavailable message."
            )

    @staticmethod
    def from_env() -> "FallbackConfig":
        """
        Load configuration from environment variables.

        Environment Variables:
            GEMINI_API_KEY: Gemini API key (fallback disabled when empty)
            GEMINI_MODEL: Gemini model name (default: gemini-2.5-flash)
            GEMINI_API_VERSION: API version (default: v1)
            GEMINI_TIMEOUT_MS: Call deadline in milliseconds (default: 15000)
            GEMINI_TEMPERATURE: Sampling temperature (default: 0.4)
            GEMINI_TOP_P: Nucleus sampling mass (default: 0.95)
            GEMINI_SYSTEM_INSTRUCTION: Overrides the built-in domain preamble

        Returns:
            FallbackConfig instance loaded from environment
        """
        try:
            timeout_ms = int(os.getenv("GEMINI_TIMEOUT_MS", "15000"))
        except ValueError:
            logger.warning("Invalid GEMINI_TIMEOUT_MS, using default 15000")
            timeout_ms = 15000

        try:
            temperature = float(os.getenv("GEMINI_TEMPERATURE", "0.4"))
        except ValueError:
            logger.warning("Invalid GEMINI_TEMPERATURE, using default 0.4")
            temperature = 0.4

        try:
            top_p = float(os.getenv("GEMINI_TOP_P", "0.95"))
        except ValueError:
            logger.warning("Invalid GEMINI_TOP_P, using default 0.95")
            top_p = 0.95

        return FallbackConfig(
            gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
            gemini_model=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
            api_version=os.getenv("GEMINI_API_VERSION", "v1"),
            timeout_ms=timeout_ms,
            temperature=temperature,
            top_p=top_p,
            system_instruction=os.getenv("GEMINI_SYSTEM_INSTRUCTION") or DEFAULT_SYSTEM_INSTRUCTION,
        )
