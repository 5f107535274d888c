"""
FastAPI application for the bloglist service.

    uvicorn bloglist.api.app:app --reload
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bloglist.api import blogs, users
from bloglist.auth import CredentialStore, TokenService, auth_router
from bloglist.config import Settings, get_settings
from bloglist.core import BloglistError
from bloglist.integrations.sentry import init_sentry
from bloglist.services import AccountService, PostService
from bloglist.storage import DocumentStore, create_storage

logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect the store on startup, close it on shutdown."""
    settings: Settings = app.state.settings

    if init_sentry(settings):
        logger.info("Sentry error tracking enabled")

    await app.state.storage.connect()
    logger.info(f"Bloglist API starting in {settings.environment} mode")

    yield

    await app.state.storage.close()
    logger.info("Bloglist API shut down")


# =============================================================================
# Error Handlers
# =============================================================================


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def handle_bloglist_error(request: Request, exc: BloglistError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return _error(exc.status_code, exc.message)


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Body validation failures are plain 400s, like any other bad input."""
    parts = []
    for err in exc.errors():
        # Drop the leading "body"/"path" segment
        loc = ".".join(str(p) for p in err.get("loc", ())[1:])
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return _error(400, "; ".join(parts) or "invalid request")


async def handle_http_error(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == 404:
        return _error(404, "unknown endpoint")
    return _error(exc.status_code, str(exc.detail))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    # Sentry's FastAPI integration reports the re-raised exception itself.
    logger.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return _error(500, "internal server error")


# =============================================================================
# App Factory
# =============================================================================


def create_app(
    settings: Settings | None = None,
    storage: DocumentStore | None = None,
) -> FastAPI:
    """
    Build the application.

    `storage` overrides the store derived from `settings.database_url`
    (tests pass a fresh in-memory store).
    """
    settings = settings or get_settings()
    storage = storage or create_storage(settings.database_url)

    app = FastAPI(
        title="Bloglist API",
        description="Posts, their authors, and token-based auth",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Services live on app.state; routes reach them through dependencies.
    credentials = CredentialStore.from_settings(storage, settings)
    app.state.settings = settings
    app.state.storage = storage
    app.state.credentials = credentials
    app.state.tokens = TokenService.from_settings(settings)
    app.state.posts = PostService(storage)
    app.state.accounts = AccountService(storage, credentials)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(blogs.router)
    app.include_router(users.router)
    app.include_router(auth_router)

    # Errors
    app.add_exception_handler(BloglistError, handle_bloglist_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "bloglist-api"}

    return app


app = create_app()
