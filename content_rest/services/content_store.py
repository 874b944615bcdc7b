# content_rest/services/content_store.py
import datetime
import hashlib
import io
import logging
import os
import shutil
import tempfile
import threading
from pathlib import Path
from typing import BinaryIO, Dict, Optional, Union

from content_rest.api.models.content_item import ContentItem

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024


def content_store_key(content_item_id: str) -> str:
    """
    Derive the storage key for a content item.

    Ids are external input, so they are hashed rather than used as file names.
    """
    return hashlib.sha256(content_item_id.encode("utf-8")).hexdigest()


def _mark_content_saved(content_item: ContentItem, store_key: str, size: int) -> None:
    content_item.content_store_id = store_key
    content_item.content_available = True
    content_item.content_size = size
    content_item.last_modified = datetime.datetime.now(datetime.timezone.utc)


class FileSystemContentStore:
    """
    Stores each content item's data as a single file under a root directory.

    Writes go to a temporary file in the same directory and are moved into
    place with os.replace, so readers see either the old or the new payload.
    """

    def __init__(self, root: Union[str, Path], chunk_size: int = DEFAULT_CHUNK_SIZE):
        self.root = Path(root)
        self.chunk_size = chunk_size

    def path_for(self, content_item_id: str) -> Path:
        return self.root / content_store_key(content_item_id)

    def read_stream(self, content_item_id: str) -> Optional[BinaryIO]:
        path = self.path_for(content_item_id)
        try:
            return open(path, "rb")
        except FileNotFoundError:
            logger.warning(f"No stored data file for content item {content_item_id} ({path})")
            return None

    def write_stream(self, content_item: ContentItem, stream: BinaryIO) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        target = self.path_for(content_item.id)

        fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=".upload-")
        try:
            with os.fdopen(fd, "wb") as out:
                shutil.copyfileobj(stream, out, self.chunk_size)
                size = out.tell()
            os.replace(tmp_name, target)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise

        _mark_content_saved(content_item, target.name, size)
        logger.info(f"Stored {size} bytes for content item {content_item.id}")


class InMemoryContentStore:
    """Keeps content item data in a dict; for tests and local runs."""

    def __init__(self):
        self._data: Dict[str, bytes] = {}
        self._lock = threading.Lock()

    def read_stream(self, content_item_id: str) -> Optional[BinaryIO]:
        with self._lock:
            data = self._data.get(content_item_id)
        if data is None:
            return None
        return io.BytesIO(data)

    def write_stream(self, content_item: ContentItem, stream: BinaryIO) -> None:
        data = stream.read()
        with self._lock:
            self._data[content_item.id] = data
        _mark_content_saved(content_item, content_store_key(content_item.id), len(data))
