"""
Pytest fixtures for intent classification tests.
"""

import pytest

from campus_chat.intent.classifier_engine import IntentClassifierEngine
from campus_chat.intent.config import DEFAULT_INTENTS_DIR
from campus_chat.intent.corpus_loader import CorpusLoader

from .helpers import write_intent


@pytest.fixture
def corpus_dir(tmp_path):
    """Small corpus with two trainable intents and two reserved ones."""
    write_intent(
        tmp_path, "fees", "Fees are listed on the admissions portal.",
        ["What are the fee structures?", "How much is the fee?", "tuition fee amount"],
    )
    write_intent(
        tmp_path, "hostel", "Hostel rooms are available for boys.",
        ["Is hostel available?", "hostel accommodation"],
    )
    write_intent(tmp_path, "Default Fallback Intent", "Sorry?", ["blah blah"])
    write_intent(tmp_path, "Default Welcome Intent", "Hello!", ["hello", "hi there"])
    return tmp_path


@pytest.fixture
def corpus(corpus_dir):
    return CorpusLoader(str(corpus_dir)).load()


@pytest.fixture
def engine(corpus):
    """Classifier trained on the small corpus."""
    engine = IntentClassifierEngine(min_similarity=0.3, log_classifications=False)
    engine.train(corpus)
    return engine


@pytest.fixture
def packaged_corpus():
    """Sample corpus shipped with the package."""
    return CorpusLoader(DEFAULT_INTENTS_DIR).load()
