"""FastAPI application initialization."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

import logfire
import sentry_sdk
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from sentry_sdk.integrations.fastapi import FastApiIntegration

from src.api import authorize, health, webhook
from src.config import ConfigurationError, get_settings
from src.constants import STATIC_ASSETS_DIR
from src.logging_config import mask_pii, setup_logfire

logger = logging.getLogger(__name__)

_project_root = Path(__file__).resolve().parent.parent


def static_assets_directory() -> Path:
    """Static assets directory, resolved against the project root."""
    return _project_root / STATIC_ASSETS_DIR


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager.

    Configuration is validated here; a missing value aborts startup.
    """
    try:
        settings = get_settings()
    except ConfigurationError as e:
        logger.error("%s", e)
        raise

    setup_logfire(app, settings)

    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            traces_sample_rate=settings.sentry_traces_sample_rate,
            send_default_pii=False,
            integrations=[FastApiIntegration()],
        )

    logfire.info(
        "Application startup complete",
        environment=settings.env,
        server_url=settings.server_url,
        page_access_token=mask_pii(settings.messenger_page_access_token),
        graph_api_version=settings.graph_api_version,
    )

    yield

    logfire.info("Application shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Messenger Webhook Relay",
    description="Messenger platform webhook that answers events through the Send API",
    version="0.1.0",
    lifespan=lifespan,
)

# Register routers
app.include_router(health.router, tags=["health"])
app.include_router(webhook.router, prefix="/webhook", tags=["webhook"])
app.include_router(authorize.router, prefix="/authorize", tags=["account-linking"])

# Static assets referenced by outbound attachments (<server_url>/assets/...)
app.mount(
    "/assets",
    StaticFiles(
        directory=static_assets_directory(),
        check_dir=False,
    ),
    name="assets",
)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Messenger Webhook Relay",
        "version": "0.1.0",
    }


if __name__ == "__main__":
    import uvicorn

    try:
        settings = get_settings()
    except ConfigurationError as e:
        logger.error("%s", e)
        raise SystemExit(1)

    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.env == "local",
    )
