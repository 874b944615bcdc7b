# content_rest/services/content_item_data.py
"""
Gateway for reading and saving the binary data of content items.

Both operations resolve the item through the lookup first, apply the domain
rules, then talk to the content store. Failures are raised as
ContentItemError; the gateway knows nothing about HTTP.
"""
import logging
from contextlib import closing
from dataclasses import dataclass
from typing import BinaryIO, Callable, Optional

from content_rest.api.models.content_item import ContentItem, ContentItemResponse
from content_rest.core.errors import ContentItemError
from content_rest.services.media_types import resolve_media_type
from content_rest.services.ports import ContentItemLookup, ContentItemResponseFormatter, ContentStore
from content_rest.services.uploads import UploadSubmission

logger = logging.getLogger(__name__)

GET_DATA = "get_data"
SAVE_DATA = "save_data"


@dataclass
class ContentItemData:
    """Stored data of a content item, ready to be sent. The receiver owns and closes the stream."""
    stream: BinaryIO
    media_type: str


class ContentItemDataGateway:
    """
    Reads and saves content item data through injected collaborators.

    Holds no per-request state, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        lookup: ContentItemLookup,
        store: ContentStore,
        formatter: ContentItemResponseFormatter,
        media_type_resolver: Callable[[Optional[str]], str] = resolve_media_type,
    ):
        self.lookup = lookup
        self.store = store
        self.formatter = formatter
        self.media_type_resolver = media_type_resolver

    def _get_content_item(self, content_item_id: str, operation: str) -> ContentItem:
        try:
            content_item = self.lookup.get_content_item(content_item_id)
        except Exception as e:
            logger.error(f"Content item lookup failed for {content_item_id}: {e}")
            raise ContentItemError.internal_failure(operation, content_item_id) from e

        if content_item is None:
            raise ContentItemError.not_found(content_item_id)
        return content_item

    def get_data(self, content_item_id: str) -> ContentItemData:
        """
        Fetch the stored data of a content item.

        Args:
            content_item_id: Id of the content item

        Returns:
            ContentItemData with the open stream and the media type to serve it as

        Raises:
            ContentItemError: NOT_FOUND if the item is unknown or its data is
                missing from the store, NO_CONTENT if the item has no data,
                INTERNAL_FAILURE if a collaborator fails
        """
        content_item = self._get_content_item(content_item_id, GET_DATA)
        if not content_item.content_available:
            raise ContentItemError.no_content(content_item_id)

        try:
            data_stream = self.store.read_stream(content_item_id)
        except Exception as e:
            logger.error(f"Content store read failed for {content_item_id}: {e}")
            raise ContentItemError.internal_failure(GET_DATA, content_item_id) from e

        if data_stream is None:
            logger.warning(f"Content item {content_item_id} claims data but the store has none")
            raise ContentItemError.missing_stream(content_item_id)

        try:
            media_type = self.media_type_resolver(content_item.mime_type)
        except Exception as e:
            data_stream.close()
            raise ContentItemError.internal_failure(GET_DATA, content_item_id) from e

        logger.info(f"Serving data of content item {content_item_id} as {media_type}")
        return ContentItemData(stream=data_stream, media_type=media_type)

    def save_data(self, content_item_id: str, submission: UploadSubmission) -> ContentItemResponse:
        """
        Store the uploaded file as the content item's data.

        The submission must be multipart. Only its first file part is used; any
        others are ignored. Existing data for the item is replaced.

        Raises:
            ContentItemError: INVALID_REQUEST if the submission is not multipart
                or has no readable file part, NOT_FOUND if the item is unknown,
                INTERNAL_FAILURE if storing or formatting fails
        """
        if not submission.is_multipart:
            raise ContentItemError.multipart_required(content_item_id)

        content_item = self._get_content_item(content_item_id, SAVE_DATA)

        part = submission.first_part()
        if len(submission.parts) > 1:
            logger.info(
                f"Save request for content item {content_item_id} has {len(submission.parts)} file parts; "
                f"using '{part.field_name}'"
            )

        stream = part.open() if part is not None else None
        if stream is None:
            raise ContentItemError.file_required(content_item_id)

        with closing(stream):
            try:
                self.store.write_stream(content_item, stream)
                response = self.formatter.create_content_item_response(content_item)
            except Exception as e:
                logger.error(f"Saving data failed for content item {content_item_id}: {e}")
                raise ContentItemError.internal_failure(SAVE_DATA, content_item_id) from e

        logger.info(f"Saved data for content item {content_item_id}")
        return response
