"""
Process-scoped chatbot state.

Built once at startup: load the corpus, train the classifier, wire the
router. Request handlers only ever read from it.
"""

import time
import logging
from dataclasses import dataclass
from typing import Optional

from campus_chat.fallback.gemini_client import GeminiFallbackClient, GenerativeFallback
from campus_chat.intent.classifier_engine import IntentClassifierEngine
from campus_chat.intent.corpus_loader import CorpusLoader
from campus_chat.intent.models import IntentCorpus
from .arbitration import ArbitrationRouter
from .config import ChatConfig

logger = logging.getLogger(__name__)


@dataclass
class ChatbotContext:
    config: ChatConfig
    corpus: IntentCorpus
    classifier: IntentClassifierEngine
    fallback: GenerativeFallback
    router: ArbitrationRouter


def build_context(
    config: Optional[ChatConfig] = None,
    fallback: Optional[GenerativeFallback] = None,
) -> ChatbotContext:
    """
    Load, train and wire everything the chat service needs.

    Args:
        config: Service configuration (defaults to ChatConfig.from_env())
        fallback: Fallback override; a GeminiFallbackClient is built otherwise

    Raises:
        ConfigurationError: If the corpus directory is missing
    """
    config = config or ChatConfig.from_env()
    start_time = time.time()

    corpus = CorpusLoader(
        config.intent.intents_dir,
        language=config.intent.language,
        reserved_markers=config.intent.reserved_markers,
    ).load()

    classifier = IntentClassifierEngine(
        min_similarity=config.intent.min_similarity,
        log_classifications=config.intent.log_classifications,
    )
    classifier.train(corpus)

    if fallback is None:
        fallback = GeminiFallbackClient(config.fallback)

    router = ArbitrationRouter(classifier, fallback, config.confidence_threshold)

    logger.info(
        f"✅ Chatbot ready: {len(classifier.intents())} intents, "
        f"threshold={config.confidence_threshold}, "
        f"fallback={'configured' if fallback.is_configured else 'not configured'}, "
        f"startup={(time.time() - start_time) * 1000:.0f}ms"
    )
    return ChatbotContext(
        config=config,
        corpus=corpus,
        classifier=classifier,
        fallback=fallback,
        router=router,
    )
