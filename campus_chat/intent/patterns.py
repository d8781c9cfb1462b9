"""
Corpus naming conventions and entity patterns for intent classification.

Pattern Categories:
    - reserved markers: intent identifiers that are never trained
    - corpus file naming: how definition and example files are paired
    - entities: regexes for entities attached to every classification
"""

from typing import Dict, List, Pattern, Tuple
import re

from .models import EntityRecord

# Identifiers containing these markers are "no-intent" / "greeting" intents
RESERVED_INTENT_MARKERS: Tuple[str, ...] = ("fallback", "welcome")

DEFINITION_SUFFIX = ".json"
EXAMPLES_INFIX = "_usersays_"


def examples_suffix(language: str) -> str:
    """File suffix of the example-utterance file for a language, e.g. "_usersays_en.json"."""
    return f"{EXAMPLES_INFIX}{language}{DEFINITION_SUFFIX}"


def is_reserved_intent(intent_name: str, markers: Tuple[str, ...] = RESERVED_INTENT_MARKERS) -> bool:
    """True if the intent identifier contains any reserved marker (case-insensitive)."""
    lowered = intent_name.lower()
    return any(marker.lower() in lowered for marker in markers)


# Order matters: earlier patterns claim their span first, so a phone number
# is not also reported as two numbers.
ENTITY_PATTERNS: Dict[str, str] = {
    "email": r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b",
    "url": r"\b(?:https?://|www\.)[^\s<>\"']+[^\s<>\"'.,;:!?)]",
    "phone_number": r"(?<![\w+])\+?\d[\d\s-]{6,}\d\b",
    "number": r"(?<![\w.])\d+(?:[.,]\d+)?(?![\w])",
}


def compile_entity_patterns(patterns: Dict[str, str] = ENTITY_PATTERNS) -> List[Tuple[str, Pattern[str]]]:
    """Compile entity patterns preserving their priority order."""
    return [(name, re.compile(pattern, re.IGNORECASE)) for name, pattern in patterns.items()]


_COMPILED_ENTITY_PATTERNS = compile_entity_patterns()


def extract_entities(text: str) -> Tuple[EntityRecord, ...]:
    """
    Extract non-overlapping entities from text, ordered by position.

    Args:
        text: Raw user utterance

    Returns:
        Tuple of EntityRecord sorted by start offset
    """
    claimed: List[Tuple[int, int]] = []
    found: List[EntityRecord] = []

    for name, pattern in _COMPILED_ENTITY_PATTERNS:
        for match in pattern.finditer(text):
            start, end = match.span()
            if any(start < c_end and end > c_start for c_start, c_end in claimed):
                continue
            claimed.append((start, end))
            found.append(EntityRecord(entity=name, source_text=match.group(0), start=start, end=end))

    return tuple(sorted(found, key=lambda record: record.start))
