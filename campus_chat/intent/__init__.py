"""
Intent Classification Package for Campus Chat

Loads a Dialogflow-style intent corpus, trains a local classifier on it and
classifies user utterances with a confidence score.

Components:
    - CorpusLoader: Reads per-intent definition and example files
    - IntentClassifierEngine: TF-IDF nearest-example classifier
    - ResponseRepository: Canned answers by intent label
    - IntentConfig: Configuration dataclass with environment variable loading
"""

from .config import IntentConfig
from .corpus_loader import CorpusLoader, load_corpus
from .classifier_engine import Classifier, IntentClassifierEngine
from .response_repository import ResponseRepository
from .models import (
    NO_INTENT,
    ClassificationResult,
    EntityRecord,
    IntentCorpus,
    IntentExample,
)

__all__ = [
    "IntentConfig",
    "CorpusLoader",
    "load_corpus",
    "Classifier",
    "IntentClassifierEngine",
    "ResponseRepository",
    "NO_INTENT",
    "ClassificationResult",
    "EntityRecord",
    "IntentCorpus",
    "IntentExample",
]
