"""
Intent Classifier Engine - TF-IDF nearest-example matching

Trained once from an IntentCorpus, then answers every request read-only:
- Utterances are vectorised with a TF-IDF model (word unigrams + bigrams)
- A query is scored against every training example by cosine similarity
- Each intent scores as its best example; the best intent wins
- Below the minimum similarity bar the answer is the "None" intent

Reference:
    campus_chat/intent/corpus_loader.py - Produces the IntentCorpus consumed here
"""

import time
import logging
from typing import List, Optional, Protocol

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer

from campus_chat.shared.exceptions import ClassificationFailure, NotTrainedError
from .models import ClassificationResult, IntentCorpus
from .patterns import extract_entities
from .response_repository import ResponseRepository

logger = logging.getLogger(__name__)


class Classifier(Protocol):
    """
    Interface of a trainable intent classifier.

    Methods:
        train: Build the model from a corpus (once per process)
        classify: Map an utterance to a ClassificationResult
    """

    @property
    def is_trained(self) -> bool:
        ...

    def train(self, corpus: IntentCorpus) -> None:
        ...

    def classify(self, text: str) -> ClassificationResult:
        ...

    def intents(self) -> List[str]:
        ...


class IntentClassifierEngine:
    """
    Short-text intent classifier with confidence scoring.

    Confidence is the cosine similarity between the query and the closest
    training example of the winning intent, so it always lies in [0, 1].
    Ties are broken by intent label order, which keeps repeated calls
    deterministic.
    """

    def __init__(self, min_similarity: float = 0.3, log_classifications: bool = True):
        """
        Args:
            min_similarity: Best-match score below which the result is "None"
            log_classifications: Log every classification at INFO level
        """
        if not 0.0 <= min_similarity <= 1.0:
            raise ValueError(f"min_similarity must be between 0.0 and 1.0, got {min_similarity}")

        self.min_similarity = min_similarity
        self.log_classifications = log_classifications

        self._vectorizer: Optional[TfidfVectorizer] = None
        self._example_matrix = None
        self._example_labels: Optional[np.ndarray] = None
        self._label_names: List[str] = []
        self._responses = ResponseRepository({})
        self._trained = False

    @property
    def is_trained(self) -> bool:
        return self._trained

    @property
    def responses(self) -> ResponseRepository:
        return self._responses

    def train(self, corpus: IntentCorpus) -> None:
        """
        Fit the model on every (utterance, label) pair of the corpus.

        Training happens once per process; later calls are ignored.

        Args:
            corpus: Loaded intent corpus
        """
        if self._trained:
            logger.warning("⚠️ Classifier already trained; ignoring repeated train() call")
            return

        start_time = time.time()
        self._responses = ResponseRepository(corpus.responses)

        texts = [example.utterance_text for example in corpus.examples]
        labels = [example.intent_label for example in corpus.examples]

        if texts:
            vectorizer = TfidfVectorizer(
                lowercase=True,
                strip_accents="unicode",
                token_pattern=r"(?u)\b\w+\b",
                ngram_range=(1, 2),
                sublinear_tf=True,
            )
            try:
                # rows come back L2-normalised, so a dot product is a cosine
                matrix = vectorizer.fit_transform(texts)
            except ValueError as e:
                logger.warning(f"⚠️ No usable vocabulary in corpus ({e}); every query will classify as None")
            else:
                self._label_names = sorted(set(labels))
                label_ids = {name: idx for idx, name in enumerate(self._label_names)}
                self._vectorizer = vectorizer
                self._example_matrix = matrix.tocsr()
                self._example_labels = np.array([label_ids[label] for label in labels], dtype=np.intp)
        else:
            logger.warning("⚠️ Corpus has no training examples; every query will classify as None")

        self._trained = True
        logger.info(
            f"✅ Classifier trained: {len(self._label_names)} intents, {len(texts)} examples, "
            f"vocabulary={len(self._vectorizer.vocabulary_) if self._vectorizer else 0}, "
            f"time={(time.time() - start_time) * 1000:.1f}ms"
        )

    def classify(self, text: str) -> ClassificationResult:
        """
        Classify an utterance.

        Args:
            text: User utterance

        Returns:
            ClassificationResult; scoring failures degrade to the "None" result

        Raises:
            NotTrainedError: If train() has not completed
        """
        if not self._trained:
            raise NotTrainedError("Classifier not trained. Call train() first.")

        start_time = time.time()
        try:
            result = self._score(text)
        except ClassificationFailure as e:
            logger.error(f"❌ Classification error: {e}", exc_info=True)
            return ClassificationResult()

        if self.log_classifications:
            logger.info(
                f" Classified: '{text[:50]}' → {result.intent_label} "
                f"(conf={result.confidence:.2f}, time={(time.time() - start_time) * 1000:.1f}ms)"
            )
        return result

    def intents(self) -> List[str]:
        """Trained intent labels, sorted."""
        return list(self._label_names)

    def _score(self, text: str) -> ClassificationResult:
        try:
            return self._nearest_intent(text)
        except Exception as e:
            raise ClassificationFailure(f"scoring failed for '{str(text)[:50]}': {e}") from e

    def _nearest_intent(self, text: str) -> ClassificationResult:
        entities = extract_entities(text)
        no_match = ClassificationResult(entities=entities)

        if self._vectorizer is None or not text or not text.strip():
            return no_match

        query = self._vectorizer.transform([text])
        if query.nnz == 0:
            return no_match

        similarities = np.asarray((self._example_matrix @ query.T).todense()).ravel()
        label_scores = np.zeros(len(self._label_names), dtype=float)
        np.maximum.at(label_scores, self._example_labels, similarities)

        # argmax returns the first maximum, i.e. the alphabetically first label on ties
        best = int(np.argmax(label_scores))
        confidence = float(np.clip(label_scores[best], 0.0, 1.0))
        if confidence < self.min_similarity:
            return no_match

        intent_label = self._label_names[best]
        return ClassificationResult(
            intent_label=intent_label,
            confidence=confidence,
            canned_response=self._responses.get(intent_label),
            entities=entities,
        )
