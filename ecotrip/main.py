"""
Trip Emissions Estimator API - Entry Point

This module initializes the FastAPI application with strict configuration
validation and collaborator checks on startup.
"""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import load_config, get_yaml_setting, ConfigurationError
from .processing.pipeline import EstimationPipeline
from .api.routes import router, set_pipeline

# Configure logging
logging.basicConfig(
    level=str(get_yaml_setting("logging", "level", default="INFO")).upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown."""
    # Startup
    logger.info("=" * 60)
    logger.info("TRIP EMISSIONS ESTIMATOR API - STARTING")
    logger.info("=" * 60)

    try:
        # Load configuration (will fail fast if env vars missing)
        config = load_config()
        logger.info("Configuration loaded successfully")

        # Log which collaborators are configured
        api_status = config.validate_apis()
        for api, available in api_status.items():
            status = "CONFIGURED" if available else "NOT CONFIGURED"
            logger.info(f"  {api}: {status}")

        pipeline = EstimationPipeline.from_config(config)
        set_pipeline(pipeline)
        logger.info(f"Pipeline initialized ({pipeline.history.count()} history entries)")

        # Geocoding is optional: a failure only means the city is typed by hand
        logger.info("Testing API connectivity...")
        test_results = await pipeline.test_all_apis()
        for api, ok in test_results.items():
            status = "OK" if ok else "FAILED"
            logger.info(f"  {api}: {status}")

        logger.info("=" * 60)
        logger.info(f"Server ready on {config.backend_host}:{config.backend_port}")
        logger.info("=" * 60)

        # Store config and pipeline in app state
        app.state.config = config
        app.state.pipeline = pipeline

        yield

    except ConfigurationError as e:
        logger.error("=" * 60)
        logger.error("CONFIGURATION ERROR")
        logger.error("=" * 60)
        logger.error(str(e))
        logger.error("")
        logger.error("Please ensure all required environment variables are set.")
        logger.error("See .env.example for required variables.")
        logger.error("=" * 60)
        sys.exit(1)

    # Shutdown
    logger.info("Shutting down...")
    if hasattr(app.state, "pipeline"):
        await app.state.pipeline.close()
    set_pipeline(None)
    logger.info("Shutdown complete")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    # Load config early to get CORS origins
    try:
        config = load_config()
    except ConfigurationError:
        # Let lifespan handle the error with better messaging
        config = None

    app = FastAPI(
        title="Trip Emissions Estimator API",
        description="Per-kilometer emissions, sustainability score and eco tips",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins if config else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    # Load config to get port
    config = load_config()

    uvicorn.run(
        "ecotrip.main:app",
        host=config.backend_host,
        port=config.backend_port,
        reload=False,
    )
