"""
JSON event logging for chat decisions.

Events ride on an ordinary ``logging.Logger``, so handlers configured by the
application still apply; only the message body is a JSON document.
"""

import json
import logging
import time
from typing import Any, Dict, Optional

UTTERANCE_LOG_LIMIT = 200


class StructuredLogger:
    """Writes one JSON object per event through a stdlib logger."""

    def __init__(self, logger: Optional[logging.Logger] = None, component: str = "campus_chat") -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.component = component

    def event(
        self,
        event_type: str,
        message: str,
        level: int = logging.INFO,
        data: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Emit a named event with optional payload."""
        if not self.logger.isEnabledFor(level):
            return

        record: Dict[str, Any] = {
            "ts": round(time.time(), 3),
            "component": self.component,
            "event_type": event_type,
            "message": message,
        }
        if data:
            record["data"] = dict(data)
        self.logger.log(level, json.dumps(record, default=str, ensure_ascii=False))

    def decision(
        self,
        utterance: str,
        intent: str,
        confidence: float,
        chosen_source: str,
        source_label: str,
    ) -> None:
        """Record which source answered an utterance."""
        self.event(
            "arbitration_decision",
            f"{intent} ({confidence:.2f}) -> {chosen_source}",
            data={
                "utterance": utterance[:UTTERANCE_LOG_LIMIT],
                "intent": intent,
                "confidence": round(confidence, 4),
                "chosen_source": chosen_source,
                "source_label": source_label,
            },
        )
