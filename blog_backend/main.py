"""Blog Backend - REST API for a multi-author blog."""

from fastapi import FastAPI
from fastapi.responses import ORJSONResponse, PlainTextResponse
from uvicorn import run as uvicorn_run

from blog_backend.configs import ROOT_MESSAGE, settings
from blog_backend.errors import (
    BaseAppError,
    UserAuthenticationError,
    auth_exception_handler,
    request_exception_handler,
)
from blog_backend.middleware import LoggingMiddleware, configure_cors, lifespan
from blog_backend.monitoring import configure_logging
from blog_backend.routes import auth_router, blog_post_router, comment_router

configure_logging()

app = FastAPI(
    title=settings.APP_NAME,
    description="Multi-author blog API: users, posts, moderated comments and reports",
    version="1.0.0",
    lifespan=lifespan,
    default_response_class=ORJSONResponse,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)

routes = [
    auth_router,
    blog_post_router,
    comment_router,
]

_ = [app.include_router(router) for router in routes]

errors = [
    (UserAuthenticationError, auth_exception_handler),
    (BaseAppError, request_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]


@app.get(
    "/",
    tags=["🩺 Health"],
    summary="Root endpoint",
    response_class=PlainTextResponse,
    responses={200: {"content": {"text/plain": {"example": ROOT_MESSAGE}}}},
    operation_id="root",
)
async def root() -> str:
    """Liveness check returning a fixed plain-text message."""
    return ROOT_MESSAGE


def run() -> None:
    """Serve the application with uvicorn on the configured address."""
    uvicorn_run(
        "blog_backend.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
