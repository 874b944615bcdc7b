# content_rest/api/endpoints/content_items.py
import logging

from fastapi import Depends, HTTPException, Path, status

from content_rest.api.dependencies import get_content_item_registry, get_response_factory
from content_rest.api.models.content_item import ContentItemCreateRequest, ContentItemResponse
from content_rest.api.response_factory import ContentRestResponseFactory
from content_rest.core.errors import ContentItemError
from content_rest.services.content_items import InMemoryContentItemRegistry

logger = logging.getLogger(__name__)


async def create_content_item(
    payload: ContentItemCreateRequest,
    registry: InMemoryContentItemRegistry = Depends(get_content_item_registry),
    response_factory: ContentRestResponseFactory = Depends(get_response_factory),
) -> ContentItemResponse:
    """
    Create a content item without data.

    Upload the data afterwards with POST /content-items/{contentItemId}/data.
    """
    try:
        content_item = registry.create_content_item(
            content_item_id=payload.id,
            name=payload.name,
            mime_type=payload.mime_type,
            task_id=payload.task_id,
            process_instance_id=payload.process_instance_id,
            tenant_id=payload.tenant_id,
        )
    except ValueError as e:
        logger.info(f"Rejected content item creation: {e}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    return response_factory.create_content_item_response(content_item)


async def get_content_item(
    content_item_id: str = Path(..., description="The id of the content item to get."),
    registry: InMemoryContentItemRegistry = Depends(get_content_item_registry),
    response_factory: ContentRestResponseFactory = Depends(get_response_factory),
) -> ContentItemResponse:
    """Get a single content item's metadata."""
    content_item = registry.get_content_item(content_item_id)
    if content_item is None:
        raise ContentItemError.not_found(content_item_id)
    return response_factory.create_content_item_response(content_item)
