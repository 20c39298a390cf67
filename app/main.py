"""
GameTracker FastAPI Application
Main entry point for the game and review tracking API
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import router
from .core.config import settings
from .core.error_handling import register_exception_handlers
from .core.logging import get_logger, setup_logging
from .database import mongo_connection

# Setup logging
setup_logging(debug=settings.DEBUG, json_logs=settings.is_production)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager
    Opens the MongoDB client on startup and closes it on shutdown
    """
    logger.info(
        "gametracker_starting",
        service_name=settings.SERVICE_NAME,
        environment=settings.ENVIRONMENT,
        port=settings.PORT
    )

    try:
        await mongo_connection.connect()
    except Exception as e:
        logger.error("startup_failed", error=str(e))
        raise

    logger.info("gametracker_started_successfully")

    yield

    logger.info("gametracker_shutting_down")
    await mongo_connection.disconnect()
    logger.info("gametracker_shutdown_complete")


def create_app() -> FastAPI:
    app = FastAPI(
        title="GameTracker API",
        description="Track video games, reviews and play statistics",
        version=settings.SERVICE_VERSION,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(router)

    @app.get("/")
    async def root():
        """Welcome message"""
        return {
            "message": "GameTracker API is running",
            "service": settings.SERVICE_NAME,
            "version": settings.SERVICE_VERSION
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        mongodb_healthy = await mongo_connection.ping()
        return {
            "status": "healthy" if mongodb_healthy else "degraded",
            "service": settings.SERVICE_NAME,
            "mongodb": "connected" if mongodb_healthy else "disconnected"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info"
    )
