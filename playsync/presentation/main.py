"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..infrastructure.config.settings import get_settings
from ..infrastructure.logging_config import configure_logging
from ..infrastructure.services import get_password_hasher
from .api.exception_handlers import register_exception_handlers
from .api.v1 import v1_router
from .middleware import log_requests

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """アプリケーションのライフサイクル管理。

    Args:
        app: FastAPIアプリケーション

    Yields:
        None
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    # 設定不備をリクエスト受付前に検出する
    get_password_hasher()
    logger.info("PlaySync API started (environment=%s)", settings.environment)

    yield


app = FastAPI(
    title="PlaySync API",
    description="PlaySync web-application support API",
    version=__version__,
    lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allowed_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)
app.middleware("http")(log_requests)
register_exception_handlers(app)

app.include_router(v1_router, prefix="/api")


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "PlaySync API", "version": __version__}


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
