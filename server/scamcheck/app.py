from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from .api.routes import analyze, logs
from scamcheck.core.config import Settings
from scamcheck.core.errors import GatewayError
from scamcheck.core.gateway import ClassificationGateway
from scamcheck.core.logger import add_log
from scamcheck.core.security import get_api_key
from scamcheck.middleware.cors import PreflightCORSMiddleware
from scamcheck.middleware.input_validation import validation_exception_handler
from scamcheck.middleware.time_log import log_process_time
from scamcheck.services.llm import Classifier, GeminiClassifier


def create_app(settings: Settings, classifier: Optional[Classifier] = None) -> FastAPI:
    """
    Build the API around an explicit configuration.

    Args:
        settings: Service configuration
        classifier: Completion backend; a GeminiClassifier is built from the
            settings when omitted

    Returns:
        The FastAPI application
    """
    if classifier is None:
        classifier = GeminiClassifier(
            api_key=settings.gemini_api_key,
            model_name=settings.model_name,
            generation_config=settings.generation_config(),
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events."""
        add_log(f"[STARTUP] Starting {settings.service_name}...")
        add_log(f"[STARTUP] Gemini API key loaded: {'yes' if settings.gemini_api_key else 'no'}")
        add_log(f"[STARTUP] Model: {settings.model_name}, normalization: {settings.normalization.value}")
        add_log(f"[STARTUP] Allowed origins: {', '.join(settings.allowed_origins) or 'none'}")
        yield
        add_log("[SHUTDOWN] Server shutdown complete.")

    app = FastAPI(title="ScamCheck API", lifespan=lifespan)
    app.state.settings = settings
    app.state.gateway = ClassificationGateway(classifier, settings.normalization)

    app.add_middleware(BaseHTTPMiddleware, dispatch=log_process_time)
    # Added last so it wraps everything, including preflight requests and crash responses
    app.add_middleware(
        PreflightCORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(GatewayError)
    async def gateway_exception_handler(request: Request, exc: GatewayError):
        add_log(f"[{exc.error_type.value.upper()}_ERROR] {exc.message} details={exc.details}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(analyze.router, prefix="/api", tags=["analyze"])
    # Also expose the path the Netlify frontend calls
    app.include_router(analyze.router, prefix="/.netlify/functions", tags=["netlify"])

    if settings.admin_api_key:
        app.include_router(logs.router, prefix="/api", tags=["logs"], dependencies=[Depends(get_api_key)])

    @app.get("/health")
    async def health_check():
        """Health check endpoint for Docker and monitoring (no auth required)."""
        return {
            "status": "healthy",
            "service": settings.service_name,
            "model": settings.model_name,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return app
