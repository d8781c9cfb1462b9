"""
Tests for the chat service configuration.
"""

import pytest

from campus_chat.chat.config import ChatConfig


@pytest.mark.unit
class TestChatConfig:

    def test_defaults(self):
        config = ChatConfig()
        assert config.confidence_threshold == 0.75
        assert config.port == 5000
        assert config.cors_origins == ["http://localhost:3000", "http://localhost:5173", "*"]

    def test_frontend_url_trailing_slashes_stripped(self):
        config = ChatConfig(frontend_url="https://chat.example.edu//")
        assert config.cors_origins[-1] == "https://chat.example.edu"

    @pytest.mark.parametrize("threshold", [-0.1, 1.5])
    def test_threshold_validated(self, threshold):
        with pytest.raises(ValueError, match="confidence_threshold must be between"):
            ChatConfig(confidence_threshold=threshold)

    def test_port_validated(self):
        with pytest.raises(ValueError, match="port"):
            ChatConfig(port=0)

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("NLP_CONFIDENCE_THRESHOLD", "0.6")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("FRONTEND_URL", "http://localhost:4000/")
        monkeypatch.setenv("INTENTS_DIR", str(tmp_path))
        monkeypatch.setenv("GEMINI_API_KEY", "abc")

        config = ChatConfig.from_env()
        assert config.confidence_threshold == 0.6
        assert config.port == 8080
        assert config.cors_origins[-1] == "http://localhost:4000"
        assert config.intent.intents_dir == str(tmp_path)
        assert config.fallback.is_configured

    def test_from_env_invalid_values_use_defaults(self, monkeypatch):
        monkeypatch.setenv("NLP_CONFIDENCE_THRESHOLD", "very")
        monkeypatch.setenv("PORT", "http")

        config = ChatConfig.from_env()
        assert config.confidence_threshold == 0.75
        assert config.port == 5000
