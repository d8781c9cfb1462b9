"""
Tests for JSON event logging.
"""

import json
import logging

import pytest

from campus_chat.shared.structured_logger import StructuredLogger


@pytest.mark.unit
class TestStructuredLogger:

    def test_decision_emits_json_line(self, caplog):
        logger = logging.getLogger("test.structured")
        structured = StructuredLogger(logger)

        with caplog.at_level(logging.INFO, logger="test.structured"):
            structured.decision(
                utterance="What are the fees?",
                intent="fees",
                confidence=0.91234,
                chosen_source="local_bot",
                source_label="Local Bot",
            )

        entry = json.loads(caplog.records[-1].getMessage())
        assert entry["event_type"] == "arbitration_decision"
        assert entry["data"]["intent"] == "fees"
        assert entry["data"]["confidence"] == 0.9123
        assert entry["data"]["source_label"] == "Local Bot"

    def test_event_level_and_data_copy(self, caplog):
        logger = logging.getLogger("test.structured")
        structured = StructuredLogger(logger)
        data = {"count": 3}

        with caplog.at_level(logging.WARNING, logger="test.structured"):
            structured.event("corpus_warning", "bad file", level=logging.WARNING, data=data)

        record = caplog.records[-1]
        entry = json.loads(record.getMessage())
        assert record.levelno == logging.WARNING
        assert entry["data"] == {"count": 3}
        assert entry["component"] == "campus_chat"

    def test_disabled_level_emits_nothing(self, caplog):
        logger = logging.getLogger("test.structured.quiet")
        structured = StructuredLogger(logger)

        with caplog.at_level(logging.ERROR, logger="test.structured.quiet"):
            structured.event("noise", "ignored")

        assert caplog.records == []
