"""Main application entry point."""

import logging
import sys
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.docs import DOCS_PATH, OPENAPI_PATH, publish_api_description
from .api.errors import register_exception_handlers
from .api.router import router
from .config import AppConfig, get_config_path, load_config
from .state.spot_store import SpotStore

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def load_app_config(path: Optional[str | Path] = None) -> AppConfig:
    """
    Load configuration, falling back to defaults when no file exists.

    Args:
        path: Explicit config file. Defaults to config/config.yaml.
    """
    config_path = Path(path) if path else get_config_path()

    if not config_path.exists():
        if path:
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        logger.info(f"No configuration at {config_path}, using defaults")
        return AppConfig()

    config = load_config(config_path)
    logger.info(f"Loaded configuration from {config_path}")
    return config


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    config: AppConfig = app.state.config

    # Stores are seeded at startup, never at import
    if app.state.spot_store is None:
        app.state.spot_store = SpotStore.from_seed(config.spots)
    total, occupied, available = app.state.spot_store.counts()

    logger.info(f"Park-Smart server listening at http://{config.api.host}:{config.api.port}")
    logger.info(f"API Docs available at {config.server_url}{DOCS_PATH}")
    logger.info(f"Tracking {total} spots ({occupied} occupied, {available} free)")

    yield  # Application runs here

    logger.info("Shutdown complete")


def create_app(config: Optional[AppConfig] = None, store: Optional[SpotStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Application configuration; defaults are used when omitted
        store: Spot store to serve; when omitted a fresh one is seeded
            from ``config.spots`` on application startup

    Returns:
        Configured FastAPI instance with the store on ``app.state.spot_store``
    """
    config = config or AppConfig()
    logging.getLogger().setLevel(config.logging.level.upper())

    app = FastAPI(
        title=config.docs.title,
        description=config.docs.description,
        version=config.docs.version,
        lifespan=lifespan,
        docs_url=DOCS_PATH,
        openapi_url=OPENAPI_PATH,
        redoc_url=None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(router)
    publish_api_description(app, config)

    app.state.config = config
    app.state.spot_store = store
    app.state.started_at = datetime.now()

    return app


# Create FastAPI app
app = create_app(load_app_config())


def main():
    """Run the application."""
    config_path = sys.argv[1] if len(sys.argv) > 1 else None
    if config_path:
        config = load_app_config(config_path)
        served = create_app(config)
    else:
        config = app.state.config
        served = app

    uvicorn.run(
        served,
        host=config.api.host,
        port=config.api.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
