"""
Shared Utilities Module for Campus Chat

Common building blocks used by the intent, fallback and chat packages:
- Exception taxonomy
- Deadline race for blocking calls
- Prometheus metrics helpers
- Structured JSON logging

Usage:
    from campus_chat.shared import run_with_deadline, DeadlineExceeded

    response = await run_with_deadline(client.call, prompt, timeout=15.0)
"""

from .exceptions import (
    CampusChatError,
    ConfigurationError,
    CorpusFileError,
    NotTrainedError,
    ClassificationFailure,
    FallbackError,
    FallbackTimeout,
    FallbackTransportError,
    FallbackUnconfigured,
)

from .deadline import (
    run_with_deadline,
    DeadlineExceeded,
)

from .structured_logger import StructuredLogger

__all__ = [
    # Exceptions
    "CampusChatError",
    "ConfigurationError",
    "CorpusFileError",
    "NotTrainedError",
    "ClassificationFailure",
    "FallbackError",
    "FallbackTimeout",
    "FallbackTransportError",
    "FallbackUnconfigured",
    # Deadline race
    "run_with_deadline",
    "DeadlineExceeded",
    # Logging
    "StructuredLogger",
]
