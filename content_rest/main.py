# content_rest/main.py
from typing import Optional
from fastapi import FastAPI
import logging

from content_rest import __version__
from content_rest.api.errors import content_item_error_handler
from content_rest.api.response_factory import ContentRestResponseFactory
from content_rest.api.routes import build_router
from content_rest.core.config import Settings, settings as default_settings
from content_rest.core.errors import ContentItemError
from content_rest.services.content_item_data import ContentItemDataGateway
from content_rest.services.content_items import InMemoryContentItemRegistry
from content_rest.services.content_store import FileSystemContentStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    gateway: Optional[ContentItemDataGateway] = None,
    registry: Optional[InMemoryContentItemRegistry] = None,
) -> FastAPI:
    """
    Build the API application.

    Collaborators not passed in are built from settings: an in-memory item
    registry and a filesystem content store under CONTENT_STORE_ROOT.
    """
    settings = settings or default_settings
    registry = registry if registry is not None else InMemoryContentItemRegistry()
    response_factory = ContentRestResponseFactory(settings.API_PREFIX)

    if gateway is None:
        store = FileSystemContentStore(settings.CONTENT_STORE_ROOT, chunk_size=settings.STREAM_CHUNK_SIZE)
        gateway = ContentItemDataGateway(lookup=registry, store=store, formatter=response_factory)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=__version__,
        openapi_url=f"{settings.API_PREFIX}/openapi.json"
    )
    app.state.settings = settings
    app.state.content_item_registry = registry
    app.state.response_factory = response_factory
    app.state.content_gateway = gateway

    app.add_exception_handler(ContentItemError, content_item_error_handler)
    app.include_router(build_router(), prefix=settings.API_PREFIX)

    @app.get("/", summary="Health Check", tags=["default"])
    def read_root():
        """ Basic health check endpoint. """
        return {"status": "ok", "message": f"Welcome to {settings.PROJECT_NAME}"}

    return app


# Configure basic logging
logging.basicConfig(level=default_settings.LOG_LEVEL.upper())

app = create_app()
