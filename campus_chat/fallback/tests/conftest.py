"""
Pytest fixtures for the generative fallback tests.
"""

import threading
from unittest.mock import MagicMock

import pytest

from campus_chat.fallback.config import FallbackConfig

from .helpers import gemini_response


@pytest.fixture
def fallback_config():
    return FallbackConfig(gemini_api_key="test-key", timeout_ms=2000)


@pytest.fixture
def mock_genai_client():
    """Mock google-genai client answering every call with a fixed text."""
    client = MagicMock()
    client.models.generate_content.return_value = gemini_response(text="Hostel fee is 65,000 per year.")
    return client


@pytest.fixture
def release_event():
    event = threading.Event()
    yield event
    event.set()
