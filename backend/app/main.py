"""FastAPI application factory and main entry point."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from app.core.config import get_settings
from app.core.logging import get_logger, setup_logging
from app.rfc822.presentation.api import emails, health

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown events."""
    # Startup
    setup_logging(level="DEBUG" if settings.debug else settings.log_level)
    logger.info("RFC 822 email validation service starting up...")
    logger.info(f"Environment: {settings.app_env}")
    logger.info(
        f"Email length bounds: {settings.email_min_length}..{settings.email_max_length}"
    )

    yield

    # Shutdown
    logger.info("RFC 822 email validation service shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="RFC 822 Email Validator",
        description="Syntax and length validation of email addresses per the RFC 822 grammar",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/api/docs" if settings.is_development else None,
        redoc_url="/api/redoc" if settings.is_development else None,
    )

    app.include_router(health.router, prefix="/api", tags=["Health"])
    app.include_router(emails.router, prefix="/api", tags=["Emails"])

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )
