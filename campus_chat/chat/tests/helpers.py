"""
Test doubles for the classifier and generative fallback protocols.
"""

from typing import List, Optional, Tuple

from campus_chat.fallback.models import GEMINI_SOURCE, FallbackResult
from campus_chat.intent.models import ClassificationResult
from campus_chat.shared.exceptions import NotTrainedError


class StubFallback:
    """GenerativeFallback returning a fixed result and recording its calls."""

    def __init__(self, result: Optional[FallbackResult] = None, configured: bool = True):
        self.result = result or FallbackResult(answer_text="Generated answer.", source_label=GEMINI_SOURCE)
        self.configured = configured
        self.calls: List[Tuple[str, Optional[str]]] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def get_answer(self, utterance: str, intent_label: Optional[str] = None) -> FallbackResult:
        self.calls.append((utterance, intent_label))
        return self.result


class StubClassifier:
    """Classifier returning a fixed result."""

    def __init__(self, result: Optional[ClassificationResult] = None, trained: bool = True):
        self.result = result or ClassificationResult()
        self.trained = trained

    @property
    def is_trained(self) -> bool:
        return self.trained

    def train(self, corpus) -> None:
        self.trained = True

    def classify(self, text: str) -> ClassificationResult:
        if not self.trained:
            raise NotTrainedError("Classifier not trained. Call train() first.")
        return self.result

    def intents(self) -> List[str]:
        return []
