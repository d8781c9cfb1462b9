"""
Pytest fixtures for shared module tests.
"""

import threading

import pytest


@pytest.fixture
def release_event():
    """Event that blocked worker threads wait on; always released at teardown."""
    event = threading.Event()
    yield event
    event.set()
