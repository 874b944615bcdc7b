# tests/conftest.py
import io
from typing import Optional
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from content_rest.api.models.content_item import ContentItem
from content_rest.api.response_factory import ContentRestResponseFactory
from content_rest.core.config import Settings
from content_rest.main import create_app
from content_rest.services.content_item_data import ContentItemDataGateway
from content_rest.services.content_items import InMemoryContentItemRegistry
from content_rest.services.content_store import InMemoryContentStore

API_PREFIX = "/content-service"
PDF_BYTES = b"\x25\x50\x44\x46"


class TrackingContentStore(InMemoryContentStore):
    """In-memory store that remembers every stream it hands out."""

    def __init__(self):
        super().__init__()
        self.opened = []

    def read_stream(self, content_item_id: str):
        stream = super().read_stream(content_item_id)
        if stream is not None:
            self.opened.append(stream)
        return stream


def add_item(
    registry: InMemoryContentItemRegistry,
    store: InMemoryContentStore,
    content_item_id: str,
    mime_type: Optional[str] = None,
    data: Optional[bytes] = None,
) -> ContentItem:
    """Register an item and, when data is given, store it (marking the item available)."""
    item = registry.create_content_item(content_item_id=content_item_id, mime_type=mime_type)
    if data is not None:
        store.write_stream(item, io.BytesIO(data))
    return item


@pytest.fixture
def settings() -> Settings:
    return Settings(API_PREFIX=API_PREFIX, STREAM_CHUNK_SIZE=2)


@pytest.fixture
def registry() -> InMemoryContentItemRegistry:
    return InMemoryContentItemRegistry()


@pytest.fixture
def store() -> TrackingContentStore:
    return TrackingContentStore()


@pytest.fixture
def spy_store(store) -> MagicMock:
    """The real in-memory store wrapped so calls can be asserted."""
    return MagicMock(wraps=store)


@pytest.fixture
def response_factory() -> ContentRestResponseFactory:
    return ContentRestResponseFactory(API_PREFIX)


@pytest.fixture
def gateway(registry, spy_store, response_factory) -> ContentItemDataGateway:
    return ContentItemDataGateway(lookup=registry, store=spy_store, formatter=response_factory)


@pytest.fixture
def app(settings, gateway, registry) -> FastAPI:
    return create_app(settings=settings, gateway=gateway, registry=registry)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
