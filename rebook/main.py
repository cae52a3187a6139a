"""FastAPI application entrypoint."""

import logging
import secrets
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from rebook.config import Settings, configure_logging, get_settings
from rebook.database import create_tables, dispose_engine, initialize_database
from rebook.exceptions import RebookError
from rebook.infrastructure.board.routers import board
from rebook.infrastructure.identity.routers import session

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application for the given settings."""
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        initialize_database(settings)
        create_tables()
        yield
        dispose_engine()

    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)

    session_secret = settings.session_secret
    if not session_secret:
        # Sessions will not survive a restart
        logger.warning("No SESSION_SECRET_KEY or SECRET_KEY set, using a random session secret")
        session_secret = secrets.token_urlsafe(32)

    app.add_middleware(
        SessionMiddleware,
        secret_key=session_secret,
        session_cookie=settings.SESSION_COOKIE_NAME,
        max_age=settings.SESSION_MAX_AGE_SECONDS,
        same_site="lax",
        https_only=settings.COOKIE_SECURE,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RebookError)
    async def rebook_error_handler(_: Request, exc: RebookError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message},
            headers=exc.headers,
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "healthy"}

    app.include_router(board.router)
    app.include_router(session.router)

    return app


app = create_app()
