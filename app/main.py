"""Main FastAPI application."""
import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import ConfigurationError, settings
from app.routers import photos, restaurants
from app.utils.request_logging import RequestLoggingMiddleware

logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Fail fast: no request is served without a Places API key
    settings.require_api_key()
    logger.info(f"API listening on http://localhost:{settings.port}")
    yield


# Create FastAPI app
app = FastAPI(
    title="Stockholm Restaurants API",
    description="Proxy for restaurant search, details and photos in Stockholm",
    version="1.0.0",
    docs_url="/docs" if settings.environment == "development" else None,
    redoc_url="/redoc" if settings.environment == "development" else None,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

# Include routers
app.include_router(restaurants.router)
app.include_router(photos.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn

    try:
        settings.require_api_key()
    except ConfigurationError as exc:
        logger.error(f"{exc} (set it in the environment or .env)")
        sys.exit(1)

    uvicorn.run(
        "app.main:app",
        host=settings.api_host,
        port=settings.port,
        reload=settings.api_reload,
    )
