"""
Arbitration Router - picks the answer source for each utterance

Decision rule:
    1. Known intent, confidence >= threshold and a non-blank canned response
       → answer locally ("Local Bot")
    2. Anything else → ask the generative fallback exactly once
       a. usable answer → pass it through with the fallback's source label
       b. no usable answer → fixed apology, confidence 0, source "Error"

The "None" intent always goes to the fallback, whatever its confidence.

Reference:
    campus_chat/intent/classifier_engine.py - Classifier consulted first
    campus_chat/fallback/gemini_client.py - Fallback consulted second
"""

import logging

from campus_chat.fallback.gemini_client import GenerativeFallback
from campus_chat.fallback.models import ERROR_SOURCE
from campus_chat.intent.classifier_engine import Classifier
from campus_chat.intent.models import NO_INTENT, ClassificationResult
from campus_chat.shared.observability import CLASSIFICATION_LATENCY, record_answer
from campus_chat.shared.structured_logger import StructuredLogger
from .models import APOLOGY_MESSAGE, LOCAL_SOURCE, AnswerSource, ArbitrationDecision

logger = logging.getLogger(__name__)


class ArbitrationRouter:
    """
    Chooses between the local classifier's canned answer and the fallback.

    Stateless between calls; safe to share across concurrent requests.
    """

    def __init__(
        self,
        classifier: Classifier,
        fallback: GenerativeFallback,
        confidence_threshold: float = 0.75,
    ):
        if not 0.0 <= confidence_threshold <= 1.0:
            raise ValueError(
                f"confidence_threshold must be between 0.0 and 1.0, got {confidence_threshold}"
            )

        self.classifier = classifier
        self.fallback = fallback
        self.confidence_threshold = confidence_threshold
        self.structured_logger = StructuredLogger(logger)

    def accepts_locally(self, classification: ClassificationResult) -> bool:
        """True when the canned response may be served without the fallback."""
        if classification.intent_label == NO_INTENT:
            return False
        if classification.confidence < self.confidence_threshold:
            return False
        response = classification.canned_response
        return bool(response and response.strip())

    async def answer(self, utterance: str) -> ArbitrationDecision:
        """
        Classify an utterance and arbitrate the answer.

        Raises:
            NotTrainedError: If the classifier has not been trained
        """
        with CLASSIFICATION_LATENCY.time():
            classification = self.classifier.classify(utterance)
        return await self.arbitrate(utterance, classification)

    async def arbitrate(self, utterance: str, classification: ClassificationResult) -> ArbitrationDecision:
        """Apply the decision rule to an existing classification."""
        if self.accepts_locally(classification):
            decision = ArbitrationDecision(
                chosen_source=AnswerSource.LOCAL_BOT,
                answer_text=classification.canned_response,
                effective_confidence=classification.confidence,
                intent_label=classification.intent_label,
                source_label=LOCAL_SOURCE,
                entities=classification.entities,
            )
            return self._record(utterance, decision)

        logger.info(
            f" Routing to fallback: intent={classification.intent_label}, "
            f"conf={classification.confidence:.2f} (threshold={self.confidence_threshold})"
        )
        result = await self.fallback.get_answer(utterance, classification.intent_label)

        if result.has_answer:
            decision = ArbitrationDecision(
                chosen_source=AnswerSource.FALLBACK,
                answer_text=result.answer_text.strip(),
                effective_confidence=classification.confidence,
                intent_label=classification.intent_label,
                source_label=result.source_label,
                entities=classification.entities,
            )
        else:
            logger.warning("⚠️ Fallback returned no usable answer; sending apology")
            decision = ArbitrationDecision(
                chosen_source=AnswerSource.ERROR,
                answer_text=APOLOGY_MESSAGE,
                effective_confidence=0.0,
                intent_label=classification.intent_label,
                source_label=ERROR_SOURCE,
                entities=classification.entities,
            )
        return self._record(utterance, decision)

    def _record(self, utterance: str, decision: ArbitrationDecision) -> ArbitrationDecision:
        record_answer(decision.chosen_source.value, decision.source_label)
        self.structured_logger.decision(
            utterance=utterance,
            intent=decision.intent_label,
            confidence=decision.effective_confidence,
            chosen_source=decision.chosen_source.value,
            source_label=decision.source_label,
        )
        return decision
