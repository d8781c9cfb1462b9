"""
Configuration for the chat service.

Groups the router threshold, HTTP settings and the nested intent and
fallback configurations.
"""

import os
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from campus_chat.fallback.config import FallbackConfig
from campus_chat.intent.config import IntentConfig

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = ("http://localhost:3000", "http://localhost:5173")


@dataclass
class ChatConfig:
    """
    Configuration for the chat service.

    Attributes:
        confidence_threshold: Minimum classifier confidence for a local answer (default: 0.75)
        frontend_url: Extra CORS origin; "*" is used when unset
        app_env: Deployment environment name (default: development)
        host: Bind address for uvicorn (default: 0.0.0.0)
        port: HTTP port (default: 5000)
        intent: Corpus and classifier configuration
        fallback: Gemini fallback configuration
    """

    confidence_threshold: float = 0.75
    frontend_url: Optional[str] = None
    app_env: str = "development"
    host: str = "0.0.0.0"
    port: int = 5000
    intent: IntentConfig = field(default_factory=IntentConfig)
    fallback: FallbackConfig = field(default_factory=FallbackConfig)

    def __post_init__(self):
        """Validate configuration after initialization"""
        if not 0.0 <= self.confidence_threshold <= 1.0:
            raise ValueError(
                f"confidence_threshold must be between 0.0 and 1.0, got {self.confidence_threshold}"
            )

        if not 0 < self.port < 65536:
            raise ValueError(f"port must be between 1 and 65535, got {self.port}")

    @property
    def cors_origins(self) -> List[str]:
        frontend = (self.frontend_url or "").rstrip("/")
        return [*DEFAULT_CORS_ORIGINS, frontend or "*"]

    @staticmethod
    def from_env() -> "ChatConfig":
        """
        Load configuration from environment variables.

        Environment Variables:
            NLP_CONFIDENCE_THRESHOLD: Local-answer threshold (default: 0.75)
            FRONTEND_URL: Frontend origin allowed by CORS
            APP_ENV: Deployment environment (default: development)
            HOST: Bind address (default: 0.0.0.0)
            PORT: HTTP port (default: 5000)

        Nested IntentConfig and FallbackConfig read their own variables.

        Returns:
            ChatConfig instance loaded from environment
        """
        try:
            confidence_threshold = float(os.getenv("NLP_CONFIDENCE_THRESHOLD", "0.75"))
        except ValueError:
            logger.warning("Invalid NLP_CONFIDENCE_THRESHOLD, using default 0.75")
            confidence_threshold = 0.75

        try:
            port = int(os.getenv("PORT", "5000"))
        except ValueError:
            logger.warning("Invalid PORT, using default 5000")
            port = 5000

        return ChatConfig(
            confidence_threshold=confidence_threshold,
            frontend_url=os.getenv("FRONTEND_URL"),
            app_env=os.getenv("APP_ENV", "development"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=port,
            intent=IntentConfig.from_env(),
            fallback=FallbackConfig.from_env(),
        )
