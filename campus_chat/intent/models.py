"""
Data structures for the intent classification package.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Optional, Tuple

# Sentinel label for "no intent cleared the similarity bar"
NO_INTENT = "None"


@dataclass(frozen=True)
class IntentExample:
    """One training utterance labelled with its intent."""
    intent_label: str
    utterance_text: str


@dataclass(frozen=True)
class IntentCorpus:
    """
    Everything the classifier is trained from.

    Attributes:
        examples: Training utterances in load order
        responses: intent label -> canned response ("" when the intent has none)
        skipped_intents: Reserved intents (fallback/welcome) left out of training
        warnings: Per-file problems encountered while loading
    """
    examples: Tuple[IntentExample, ...] = ()
    responses: Dict[str, str] = field(default_factory=dict)
    skipped_intents: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()

    @property
    def trainable_intents(self) -> Tuple[str, ...]:
        """Labels that have at least one training example, in first-seen order."""
        return tuple(dict.fromkeys(example.intent_label for example in self.examples))


@dataclass(frozen=True)
class EntityRecord:
    """An entity found in an utterance."""
    entity: str
    source_text: str
    start: int
    end: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return asdict(self)


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of classifying one utterance."""
    intent_label: str = NO_INTENT
    confidence: float = 0.0
    canned_response: Optional[str] = None
    entities: Tuple[EntityRecord, ...] = ()

    @property
    def is_match(self) -> bool:
        return self.intent_label != NO_INTENT
