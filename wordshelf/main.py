"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from wordshelf import models  # noqa: F401
from wordshelf.config import configure_logging, get_settings
from wordshelf.database import Base, dispose_engine, get_engine, initialize_database
from wordshelf.infrastructure.common.exception_handlers import register_exception_handlers
from wordshelf.infrastructure.common.routers import settings as settings_router
from wordshelf.infrastructure.identity.routers import auth, users
from wordshelf.infrastructure.identity.routers.auth import limiter
from wordshelf.infrastructure.learning.routers import mastery, quiz, review
from wordshelf.infrastructure.library.routers import word_books
from wordshelf.infrastructure.vocabulary.routers import vocab_items, word_info

settings = get_settings()
configure_logging(settings.ENVIRONMENT, settings.LOG_LEVEL)
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    initialize_database(settings)
    if settings.DATABASE_URL.startswith("sqlite"):
        # Local databases are created on first start; others go through alembic
        Base.metadata.create_all(bind=get_engine())
    logger.info(
        "application_started",
        environment=settings.ENVIRONMENT,
        ai_enabled=settings.ai_enabled,
    )
    yield
    dispose_engine()
    logger.info("application_stopped")


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        docs_url=f"{settings.API_V1_PREFIX}/docs",
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
        lifespan=lifespan,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]
    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # word_info declares /vocab-items/word-info ahead of the /{vocab_item_id} routes
    for router in (
        auth.router,
        users.router,
        settings_router.router,
        word_info.router,
        vocab_items.router,
        mastery.router,
        word_books.router,
        quiz.router,
        review.router,
    ):
        app.include_router(router, prefix=settings.API_V1_PREFIX)

    @app.get("/")
    async def root() -> dict[str, str]:
        return {"message": f"Welcome to {settings.PROJECT_NAME}"}

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "healthy"}

    @app.get(f"{settings.API_V1_PREFIX}/")
    async def api_root() -> dict[str, str]:
        return {
            "message": f"{settings.PROJECT_NAME} v1",
            "version": settings.VERSION,
            "docs": f"{settings.API_V1_PREFIX}/docs",
        }

    return app


app = create_app()
