"""
Generative Fallback Package for Campus Chat

Answers questions the local classifier cannot, using a hosted Gemini model
bounded by a deadline. Failures never propagate: they become a fixed
apology labelled "Error".
"""

from .config import FallbackConfig
from .gemini_client import GeminiFallbackClient, GenerativeFallback, extract_text
from .models import ERROR_SOURCE, GEMINI_SOURCE, FallbackResult
from .prompts import (
    DEFAULT_SYSTEM_INSTRUCTION,
    ENGINE_UNAVAILABLE_MESSAGE,
    FALLBACK_ERROR_MESSAGE,
    build_prompt,
)

__all__ = [
    "FallbackConfig",
    "GeminiFallbackClient",
    "GenerativeFallback",
    "extract_text",
    "FallbackResult",
    "GEMINI_SOURCE",
    "ERROR_SOURCE",
    "DEFAULT_SYSTEM_INSTRUCTION",
    "ENGINE_UNAVAILABLE_MESSAGE",
    "FALLBACK_ERROR_MESSAGE",
    "build_prompt",
]
