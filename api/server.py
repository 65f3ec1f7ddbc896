#!/usr/bin/env python3
"""
FastAPI backend for the BFHL service.

Exposes a health check and the single multiplexed /bfhl endpoint.

Usage:
    python -m api.server
    uvicorn api.server:build_app --factory --port 3000
"""

import asyncio
import json
import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from bfhl import __version__
from bfhl.dispatch import AskFn, RequestError, dispatch_request
from bfhl.ask_ai import ask_ai
from bfhl.utils.config import Settings, load_settings

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
INVALID_JSON_MESSAGE = "Request body must be valid JSON"


# ===== Models =====

class HealthResponse(BaseModel):
    is_success: bool = True
    official_email: str


class SuccessResponse(BaseModel):
    is_success: bool = True
    official_email: str
    data: Any


class ErrorResponse(BaseModel):
    is_success: bool = False
    official_email: str
    error: str


def is_json_content_type(content_type: str) -> bool:
    """True for application/json, with or without parameters such as charset."""
    return content_type.split(";", 1)[0].strip().lower() == "application/json"


def error_response(settings: Settings, status_code: int, message: str) -> JSONResponse:
    body = ErrorResponse(official_email=settings.official_email, error=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


# ===== App Setup =====

def create_app(settings: Settings, ask_fn: Optional[AskFn] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Service settings shared by every request
        ask_fn: AI delegate override (default: bfhl.ask_ai.ask_ai)

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="BFHL API",
        description="Fibonacci, prime filter, LCM, HCF and one-word AI answers",
        version=__version__,
    )
    app.state.settings = settings
    app.state.ask_fn = ask_fn or ask_ai

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestError)
    async def request_error_handler(request: Request, exc: RequestError):
        return error_response(settings, exc.status_code, exc.message)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
        return error_response(settings, 500, INTERNAL_ERROR_MESSAGE)

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(official_email=settings.official_email)

    @app.post("/bfhl")
    async def bfhl(request: Request):
        """
        Run the operation selected by the single key of the request body.

        Returns:
            Success envelope with the operation result as data
        """
        # Only JSON bodies are parsed; anything else counts as an empty object
        body: Any = {}
        if is_json_content_type(request.headers.get("content-type", "")):
            raw = await request.body()
            try:
                body = json.loads(raw) if raw.strip() else {}
            except ValueError:
                return error_response(settings, 400, INVALID_JSON_MESSAGE)

        # The AI delegate blocks on network I/O, keep it off the event loop
        loop = asyncio.get_event_loop()
        try:
            data = await loop.run_in_executor(
                None, dispatch_request, body, settings, app.state.ask_fn
            )
        except RequestError as e:
            logger.info(f"Rejected /bfhl request ({e.kind}): {e.message}")
            return error_response(settings, e.status_code, e.message)
        except Exception:
            logger.exception("BFHL ERROR")
            return error_response(settings, 500, INTERNAL_ERROR_MESSAGE)

        return SuccessResponse(official_email=settings.official_email, data=data)

    return app


def build_app() -> FastAPI:
    """
    Load settings from .env / the environment and build the app.

    Settings are read here rather than at import time, so importing this
    module never touches os.environ.
    """
    settings = load_settings()
    logger.info(f"Gemini key loaded: {settings.has_gemini_key}")
    return create_app(settings)


if __name__ == "__main__":
    import uvicorn

    app = build_app()
    settings = app.state.settings
    logger.info(f"Server running on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)
