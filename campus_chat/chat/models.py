from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple

from campus_chat.intent.models import EntityRecord

LOCAL_SOURCE = "Local Bot"

# Returned when neither the classifier nor the fallback produced an answer
APOLOGY_MESSAGE = (
    "I'm unable to generate a response right now. Please try asking about "
    "admissions, courses, or campus facilities."
)


class AnswerSource(str, Enum):
    """Which branch of the router produced the answer."""

    LOCAL_BOT = "local_bot"
    FALLBACK = "fallback"
    ERROR = "error"


@dataclass(frozen=True)
class ArbitrationDecision:
    """
    Final answer envelope handed to the transport layer.

    Attributes:
        chosen_source: Router branch that produced the answer
        answer_text: Text shown to the user
        effective_confidence: Classifier confidence, or 0 on the error branch
        intent_label: Classifier label ("None" when nothing matched)
        source_label: Human-facing source ("Local Bot", "Gemini AI" or "Error")
        entities: Entities extracted from the utterance
    """

    chosen_source: AnswerSource
    answer_text: str
    effective_confidence: float
    intent_label: str
    source_label: str
    entities: Tuple[EntityRecord, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "response": self.answer_text,
            "source": self.source_label,
            "confidence": self.effective_confidence,
            "intent": self.intent_label,
            "entities": [entity.to_dict() for entity in self.entities],
        }
