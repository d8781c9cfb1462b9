"""
Campus Chat Service - FastAPI Application

HTTP front end for the chatbot: validates the message, runs it through the
arbitration router and returns the answer with its source and confidence.

Reference:
    campus_chat/chat/context.py - Startup wiring stored on app.state
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from campus_chat.shared.exceptions import ConfigurationError
from campus_chat.shared.observability import get_metrics_response, setup_metrics
from .config import ChatConfig
from .context import ChatbotContext, build_context

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

SERVICE_NAME = "campus-chat"
SERVICE_VERSION = "1.0.0"


# ============================================================================
# Pydantic Models
# ============================================================================

class ChatRequest(BaseModel):
    """Request model for a chat message"""
    message: Optional[str] = Field(None, description="User message")

    class Config:
        json_schema_extra = {
            "example": {"message": "What are the fee structures?"}
        }


class EntityModel(BaseModel):
    entity: str
    source_text: str
    start: int
    end: int


class ChatResponse(BaseModel):
    """Response model for a chat message"""
    message: str = Field(..., description="Echo of the user message")
    response: str = Field(..., description="Answer shown to the user")
    source: str = Field(..., description="Local Bot, Gemini AI or Error")
    confidence: float = Field(..., ge=0.0, le=1.0, description="Classifier confidence")
    intent: str = Field(..., description="Classified intent, or None")
    entities: List[EntityModel] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "message": "What are the fee structures?",
                "response": "MCA costs about 1.40 lakh for two years.",
                "source": "Local Bot",
                "confidence": 0.97,
                "intent": "fees.structure",
                "entities": []
            }
        }


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def _error(status_code: int, error: str, details: Optional[str] = None) -> JSONResponse:
    body: Dict[str, Any] = {"error": error}
    if details is not None:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=body)


# ============================================================================
# Application Factory
# ============================================================================

def create_app(context: Optional[ChatbotContext] = None, config: Optional[ChatConfig] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        context: Prebuilt chatbot state; built during startup when omitted
        config: Configuration used to build the state (defaults to the environment)
    """
    config = config or (context.config if context else ChatConfig.from_env())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Manage service lifecycle (startup/shutdown)
        """
        logger.info(" Starting Campus Chat service...")
        setup_metrics(SERVICE_NAME, SERVICE_VERSION)

        if context is not None:
            app.state.context = context
        else:
            try:
                app.state.context = build_context(config)
            except ConfigurationError as e:
                logger.error(f"❌ Startup aborted: {e}")
                raise

        logger.info(" Campus Chat service ready")

        yield

        logger.info(" Campus Chat service stopped")

    app = FastAPI(
        title="Campus Chat Service",
        description="Intent classification with generative fallback for institution questions",
        version=SERVICE_VERSION,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # ========================================================================
    # API Endpoints
    # ========================================================================

    @app.post("/api/chat", response_model=ChatResponse)
    async def chat_endpoint(body: ChatRequest, request: Request):
        """
        Answer a chat message.

        Process:
            1. Reject empty messages
            2. Classify locally; answer from the corpus when confident
            3. Otherwise ask the generative fallback
        """
        message = body.message or ""
        if not message.strip():
            return _error(400, "Message cannot be empty")

        chatbot: ChatbotContext = request.app.state.context
        try:
            decision = await chatbot.router.answer(message)
        except Exception as e:
            logger.error(f"❌ Error in /api/chat: {e}", exc_info=True)
            return _error(500, "An error occurred while processing your message", str(e))

        return ChatResponse(message=message, **decision.to_dict())

    @app.get("/")
    async def root():
        """Service information"""
        return {
            "name": "Campus Chat API",
            "version": SERVICE_VERSION,
            "status": "online",
            "endpoints": {
                "health": "/health",
                "chat": "/api/chat",
                "intents": "/api/intents",
                "metrics": "/metrics",
            },
        }

    @app.get("/health")
    async def health_check(request: Request):
        """Health check with classifier and fallback status"""
        chatbot: ChatbotContext = request.app.state.context
        return {
            "status": "ok",
            "timestamp": _timestamp(),
            "nlpTrained": chatbot.classifier.is_trained,
            "geminiConfigured": chatbot.fallback.is_configured,
        }

    @app.get("/api/health")
    async def api_health_check(request: Request):
        chatbot: ChatbotContext = request.app.state.context
        return {
            "status": "ok",
            "nlpTrained": chatbot.classifier.is_trained,
            "timestamp": _timestamp(),
        }

    @app.get("/api/intents")
    async def list_intents(request: Request):
        """Intents that have a canned response, in corpus order"""
        chatbot: ChatbotContext = request.app.state.context
        intents = chatbot.classifier.responses.intents()
        return {"intents": intents, "count": len(intents)}

    @app.get("/metrics")
    async def metrics():
        """Prometheus metrics"""
        content, content_type = get_metrics_response()
        return Response(content=content, media_type=content_type)

    return app


app = create_app()


def main():
    config = ChatConfig.from_env()
    logger.info(f" Serving Campus Chat on {config.host}:{config.port} ({config.app_env})")
    uvicorn.run(
        "campus_chat.chat.app:app",
        host=config.host,
        port=config.port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
