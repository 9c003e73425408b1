"""FastAPI entrypoint for the Game Sanpi illustration feed."""

from fastapi import FastAPI

from sanpi.api.routes_health import router as health_router
from sanpi.api.routes_news import router as news_router
from sanpi.config import configure_logging, get_settings


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="Game Sanpi Illustration Feed",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    application.include_router(health_router)
    application.include_router(news_router)

    application.state.settings = settings
    return application


app = create_app()
