"""
Exception taxonomy shared by the Campus Chat services.

Only ConfigurationError and NotTrainedError are allowed to reach the caller.
Everything else is absorbed at a component boundary and turned into a
degraded answer.
"""


class CampusChatError(Exception):
    """Base exception for the campus chat services."""


class ConfigurationError(CampusChatError):
    """Raised at startup when required configuration (e.g. the corpus directory) is missing."""


class CorpusFileError(CampusChatError):
    """Raised when a single intent file cannot be read or parsed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class NotTrainedError(CampusChatError):
    """Raised when classification is requested before training finished."""


class ClassificationFailure(CampusChatError):
    """Raised internally when scoring an utterance fails."""


class FallbackError(CampusChatError):
    """Base class for generative fallback failures."""


class FallbackTimeout(FallbackError):
    """The generative model did not answer before the deadline."""


class FallbackTransportError(FallbackError):
    """Network, API or response-parsing failure while calling the model."""


class FallbackUnconfigured(FallbackError):
    """No credential or model identity is available."""
