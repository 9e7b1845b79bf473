"""LineageGate main application."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from lineagegate.api import router
from lineagegate.api.deps import get_collector_id, validate_auth_config
from lineagegate.config import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("lineagegate")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting LineageGate server...")

    # Validate authentication configuration (fail fast if insecure)
    validate_auth_config()

    logger.info(f"Environment: {settings.env.value}")
    logger.info(f"Collector ID: {get_collector_id()}")
    logger.info(f"Sensitive key patterns: {settings.sensitive_key_patterns}")

    yield

    logger.info("LineageGate server stopped")


# Create FastAPI application
app = FastAPI(
    title="LineageGate",
    description="Lineage event construction, redaction and validation preview service",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(router)


def main():
    """Entry point for the application."""
    uvicorn.run(
        "lineagegate.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
