"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from dealflip.config import settings
from dealflip.database import engine, Base
from dealflip.errors import register_error_handlers
from dealflip.routes import routers
from dealflip.seeds import seed_database

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info("Starting DealFlip API...")
    logger.info(f"Environment: {settings.environment}")

    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY is not set; AI endpoints will fail")

    # Create tables (for development; use Alembic migrations in production)
    if settings.environment == "development":
        Base.metadata.create_all(bind=engine)
        if settings.seed_demo_data:
            seed_database()

    yield

    # Shutdown
    logger.info("Shutting down DealFlip API...")


# Create FastAPI app
app = FastAPI(
    title="DealFlip",
    description="Reseller operations API: deals, inventory, sales and AI-assisted analysis",
    version="1.0.0",
    lifespan=lifespan,
)

register_error_handlers(app)

for router in routers:
    app.include_router(router, prefix=settings.api_prefix)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": "DealFlip",
        "version": "1.0.0",
        "environment": settings.environment,
        "ai_configured": bool(settings.openai_api_key),
    }
