"""
Chat Service Package for Campus Chat

Arbitrates between the local intent classifier and the generative fallback
and serves the result over HTTP (campus_chat.chat.app).
"""

from .arbitration import ArbitrationRouter
from .config import ChatConfig
from .context import ChatbotContext, build_context
from .models import APOLOGY_MESSAGE, LOCAL_SOURCE, AnswerSource, ArbitrationDecision

__all__ = [
    "ArbitrationRouter",
    "ChatConfig",
    "ChatbotContext",
    "build_context",
    "APOLOGY_MESSAGE",
    "LOCAL_SOURCE",
    "AnswerSource",
    "ArbitrationDecision",
]
