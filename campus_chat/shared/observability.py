"""
Prometheus metrics for Campus Chat

Tracks where answers come from, how long classification takes and how the
generative fallback behaves. Latencies are recorded with ``Histogram.time()``.

Usage:
    from campus_chat.shared.observability import CLASSIFICATION_LATENCY, record_answer

    with CLASSIFICATION_LATENCY.time():
        result = engine.classify(text)
    record_answer("local_bot", "Local Bot")
"""

import os
import logging

from prometheus_client import (
    Counter, Histogram, Info,
    generate_latest, CONTENT_TYPE_LATEST, REGISTRY
)

logger = logging.getLogger(__name__)

_service_info_published = False

ANSWERS_TOTAL = Counter(
    'campus_chat_answers_total',
    'Answers returned to users, by router branch and visible source',
    ['chosen_source', 'source_label']
)

CLASSIFICATION_LATENCY = Histogram(
    'campus_chat_classification_latency_seconds',
    'Local intent classification latency',
    buckets=(0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25)
)

FALLBACK_LATENCY = Histogram(
    'campus_chat_fallback_latency_seconds',
    'Generative fallback latency, timeouts included',
    buckets=(0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 15.0, 30.0)
)

FALLBACK_OUTCOMES = Counter(
    'campus_chat_fallback_outcomes_total',
    'Generative fallback calls by outcome (success, timeout, error, unconfigured)',
    ['outcome']
)

SERVICE_INFO = Info(
    'campus_chat_service',
    'Campus Chat build and environment'
)


def setup_metrics(service_name: str, service_version: str = "1.0.0"):
    """Publish service info once per process."""
    global _service_info_published

    if _service_info_published:
        return

    SERVICE_INFO.info({
        'service': service_name,
        'version': service_version,
        'environment': os.getenv('APP_ENV', 'development')
    })
    _service_info_published = True
    logger.info(f"✅ Prometheus metrics initialized for {service_name}")


def get_metrics_response():
    """
    Returns:
        Tuple of (content_bytes, content_type) for the /metrics endpoint
    """
    return generate_latest(REGISTRY), CONTENT_TYPE_LATEST


def record_answer(chosen_source: str, source_label: str):
    ANSWERS_TOTAL.labels(chosen_source=chosen_source, source_label=source_label).inc()


def record_fallback_outcome(outcome: str):
    FALLBACK_OUTCOMES.labels(outcome=outcome).inc()
