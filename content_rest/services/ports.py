# content_rest/services/ports.py
"""
Collaborators consumed by the content item data gateway.

Implementations are shared across concurrent requests and are expected to be
thread-safe; the gateway adds no locking of its own.
"""
from typing import BinaryIO, Optional, Protocol

from content_rest.api.models.content_item import ContentItem, ContentItemResponse


class ContentItemLookup(Protocol):
    def get_content_item(self, content_item_id: str) -> Optional[ContentItem]:
        """Return the content item, or None when the id is unknown."""
        ...


class ContentStore(Protocol):
    def read_stream(self, content_item_id: str) -> Optional[BinaryIO]:
        """Open the stored data for reading; None when nothing is stored. Caller closes the stream."""
        ...

    def write_stream(self, content_item: ContentItem, stream: BinaryIO) -> None:
        """
        Store the stream as the item's data, replacing any previous data.

        On success the item is marked content_available with its new size.
        """
        ...


class ContentItemResponseFormatter(Protocol):
    def create_content_item_response(self, content_item: ContentItem) -> ContentItemResponse: ...
