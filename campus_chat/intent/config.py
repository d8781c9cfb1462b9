"""
Configuration for the intent classification engine.

Reference:
    campus_chat/fallback/config.py - Same from_env pattern for the fallback client
"""

import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from .patterns import RESERVED_INTENT_MARKERS

logger = logging.getLogger(__name__)

# Sample Dialogflow export shipped with the package
DEFAULT_INTENTS_DIR = str(Path(__file__).resolve().parent.parent / "data" / "intents")


@dataclass
class IntentConfig:
    """
    Configuration for corpus loading and the classifier engine.

    Attributes:
        intents_dir: Directory holding the per-intent Dialogflow JSON files
        language: Language code of the example-utterance files (default: en)
        min_similarity: Below this cosine score the engine answers "None" (default: 0.3)
        reserved_markers: Intent identifier markers excluded from training
        log_classifications: Log every classification at INFO level (default: True)
    """

    intents_dir: str = DEFAULT_INTENTS_DIR
    language: str = "en"
    min_similarity: float = 0.3
    reserved_markers: Tuple[str, ...] = RESERVED_INTENT_MARKERS
    log_classifications: bool = True

    def __post_init__(self):
        """Validate configuration after initialization"""
        if not 0.0 <= self.min_similarity <= 1.0:
            raise ValueError(
                f"min_similarity must be between 0.0 and 1.0, got {self.min_similarity}"
            )

        if not self.language or not self.language.strip():
            raise ValueError("language must be a non-empty language code")

    @staticmethod
    def from_env() -> "IntentConfig":
        """
        Load configuration from environment variables.

        Environment Variables:
            INTENTS_DIR: Corpus directory (default: packaged sample corpus)
            NLP_LANGUAGE: Language code of the usersays files (default: en)
            NLP_MIN_SIMILARITY: Minimum similarity for a match (default: 0.3)
            NLP_LOG_CLASSIFICATIONS: Log classifications (default: true)

        Returns:
            IntentConfig instance loaded from environment
        """
        try:
            min_similarity = float(os.getenv("NLP_MIN_SIMILARITY", "0.3"))
        except ValueError:
            logger.warning("Invalid NLP_MIN_SIMILARITY, using default 0.3")
            min_similarity = 0.3

        log_classifications = os.getenv(
            "NLP_LOG_CLASSIFICATIONS", "true"
        ).lower() in ("true", "1", "yes")

        return IntentConfig(
            intents_dir=os.getenv("INTENTS_DIR", DEFAULT_INTENTS_DIR),
            language=os.getenv("NLP_LANGUAGE", "en"),
            min_similarity=min_similarity,
            log_classifications=log_classifications,
        )
