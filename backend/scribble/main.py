"""
Scribble Backend — FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() builds the Store and AuthService, attaches
       them to `app.state`, registers middleware, exception handlers and routes.
Who:   uvicorn (`uvicorn scribble.main:app`), the `scribble-api` console
       script, and the test suite (one fresh app per test).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Logging → GZip → CORS    │
    │                                                     │
    │  State:       app.state.store  (Store)              │
    │               app.state.auth   (AuthService)        │
    │                                                     │
    │  Routes:      users · blogs · health (· debug)      │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐  │
    │  │ Validation→400 │ Auth→401 │ Creds→403 │ 404  │  │
    │  │ malformed body→400 │ anything else→500       │  │
    │  └──────────────────────────────────────────────┘  │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from scribble import __version__
from scribble.config import Settings, settings as default_settings
from scribble.exceptions import (
    AuthenticationError,
    InvalidCredentialsError,
    NotFoundError,
    ScribbleError,
    ValidationError,
)
from scribble.middleware.logging import RequestLoggingMiddleware
from scribble.middleware.request_id import RequestIDMiddleware, request_id_var
from scribble.routes import blogs, health, users
from scribble.services.auth_service import AuthService
from scribble.store import Store

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    When:   Called once during app startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # uvicorn's own access log duplicates RequestLoggingMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup:
        1. Setup logging
        2. Validate critical configuration (logged, not fatal)
        3. Log store contents and listen address

    Shutdown:
        Log the in-memory data being discarded.
    """
    app_settings: Settings = app.state.settings
    store: Store = app.state.store

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(app_settings.log_level)
    logger.info("=" * 60)
    logger.info("Scribble Backend starting up...")

    try:
        app_settings.validate_required_for_production()
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))

    logger.info("Store ready: %d users, %d blogs", store.user_count, store.blog_count)
    logger.info(
        "Server ready at http://%s:%d", app_settings.backend_host, app_settings.backend_port
    )
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info(
        "Scribble Backend shutting down, discarding %d users and %d blogs",
        store.user_count,
        store.blog_count,
    )


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(
    status_code: int,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    content: Dict[str, Any] = {"error": message}
    if details:
        content["details"] = details
    content["request_id"] = request_id_var.get("")
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to JSON error responses.

    Handler hierarchy:
        ValidationError (+ DuplicateEmailError)     → 400 Bad Request
        RequestValidationError (malformed body)     → 400 Bad Request
        AuthenticationError (+ InvalidTokenError)   → 401 Unauthorized
        InvalidCredentialsError                     → 403 Forbidden
        NotFoundError                               → 404 Not Found
        StarletteHTTPException (unknown route, 405) → its own status
        ScribbleError (base)                        → 500
        Exception (fallback)                        → 500

    Every body has the shape {"error": <message>, "details"?, "request_id"}.
    Stack traces are logged, never returned.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _error_response(400, exc.message, exc.context)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        fields = [".".join(str(part) for part in err.get("loc", ())) for err in exc.errors()]
        logger.warning("[%s] Malformed request body: %s", request_id_var.get(""), fields)
        return _error_response(400, "Invalid request body", {"fields": fields})

    @app.exception_handler(AuthenticationError)
    async def handle_authentication_error(request: Request, exc: AuthenticationError):
        logger.warning("[%s] Authentication failed: %s", request_id_var.get(""), exc.message)
        return _error_response(401, exc.message, headers={"WWW-Authenticate": "Bearer"})

    @app.exception_handler(InvalidCredentialsError)
    async def handle_invalid_credentials(request: Request, exc: InvalidCredentialsError):
        return _error_response(403, exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(ScribbleError)
    async def handle_scribble_error(request: Request, exc: ScribbleError):
        logger.error(
            "[%s] Application error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return _error_response(500, "An unexpected error occurred")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to build the app with. Defaults to the
                      environment-loaded singleton.

    Returns:
        A configured app owning a brand-new Store.
    """
    app_settings = app_settings or default_settings

    app = FastAPI(
        title="Scribble API",
        description=(
            "Minimal blogging backend: signup/signin with signed session tokens, "
            "and published blog posts held in memory."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── State ─────────────────────────────────────────────────────────────
    store = Store()
    if app_settings.seed_demo_data:
        store.seed_demo_data()

    legacy_user_id = None
    if app_settings.legacy_token_enabled:
        legacy_user_id = store.demo_user_id
        if legacy_user_id is None:
            logger.warning("Legacy token enabled without demo data; it will be rejected")

    app.state.settings = app_settings
    app.state.store = store
    app.state.auth = AuthService(
        secret=app_settings.jwt_secret,
        algorithm=app_settings.jwt_algorithm,
        legacy_user_id=legacy_user_id,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        expose_headers=["Content-Length", "X-Kuma-Revision", "X-Request-ID"],
        max_age=600,
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(blogs.router)
    if app_settings.debug_endpoint_enabled:
        app.include_router(health.debug_router)

    return app


app = create_app()


def run() -> None:
    """Entry point for the `scribble-api` console script."""
    uvicorn.run(
        "scribble.main:app",
        host=default_settings.backend_host,
        port=default_settings.backend_port,
        log_level=default_settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
