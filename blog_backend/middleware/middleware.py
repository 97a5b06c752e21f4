"""
Middleware components for the blog backend.

This module contains request logging and CORS handling, plus the lifespan
event handler that creates and disposes of the database.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from blog_backend.configs import settings
from blog_backend.db import Database
from blog_backend.errors.database import DatabaseInitializationError
from blog_backend.monitoring import bind_request_id, clear_context, get_logger
from blog_backend.utils.helpers import host

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Create the database on startup and dispose of it on shutdown."""
    logger.info(f"Starting {app.title}...")

    try:
        database = Database()
        await database.create_all()
        app.state.database = database
    except Exception as e:
        logger.exception("Failed to initialize database")
        raise DatabaseInitializationError from e

    logger.info("Services initialized successfully")
    logger.info(f"  - Backend API: http://{settings.HOST}:{settings.PORT}")
    logger.info(f"  - API Documentation: http://{settings.HOST}:{settings.PORT}/docs")

    yield

    logger.info(f"Shutting down {app.title}...")

    try:
        await app.state.database.dispose()
    except Exception:
        logger.exception("Error during service cleanup")


def configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware for the application."""
    allowed_origins = settings.CORS_ORIGINS

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials="*" not in allowed_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Bind a request id, then log request summary and timing information."""

        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        clear_context()
        bind_request_id(request_id)

        start_time = perf_counter()
        logger.info(f"Request: {request.method} {request.url.path}, from ip: {host(request)}")

        response = await call_next(request)
        duration = perf_counter() - start_time

        logger.info(
            f"Response: {response.status_code} for {request.method} {request.url.path} "
            f"in {duration:.2f}s",
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
