# content_rest/services/content_items.py
import datetime
import logging
import threading
import uuid
from typing import Dict, Optional

from content_rest.api.models.content_item import ContentItem

logger = logging.getLogger(__name__)


class InMemoryContentItemRegistry:
    """
    Thread-safe registry of content item records.

    get_content_item() returns the live record, so updates made by a content
    store after saving data are visible to later lookups.
    """

    def __init__(self):
        self._items: Dict[str, ContentItem] = {}
        self._lock = threading.Lock()

    def get_content_item(self, content_item_id: str) -> Optional[ContentItem]:
        with self._lock:
            return self._items.get(content_item_id)

    def create_content_item(
        self,
        content_item_id: Optional[str] = None,
        name: Optional[str] = None,
        mime_type: Optional[str] = None,
        task_id: Optional[str] = None,
        process_instance_id: Optional[str] = None,
        tenant_id: Optional[str] = None,
    ) -> ContentItem:
        """
        Register a new content item without data.

        Args:
            content_item_id: Id to use; a UUID is generated when omitted

        Returns:
            The new ContentItem, with content_available False

        Raises:
            ValueError: If an item with the same id already exists
        """
        item = ContentItem(
            id=content_item_id or str(uuid.uuid4()),
            name=name,
            mime_type=mime_type,
            task_id=task_id,
            process_instance_id=process_instance_id,
            tenant_id=tenant_id,
            created=datetime.datetime.now(datetime.timezone.utc),
        )
        with self._lock:
            if item.id in self._items:
                raise ValueError(f"Content item with id '{item.id}' already exists")
            self._items[item.id] = item

        logger.info(f"Registered content item {item.id}")
        return item
