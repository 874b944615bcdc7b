# content_rest/api/endpoints/content_item_data.py
import logging
from typing import BinaryIO, Iterator

from fastapi import Depends, Path, Request
from fastapi.responses import StreamingResponse
from starlette.background import BackgroundTask
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException

from content_rest.api.dependencies import get_app_settings, get_content_gateway
from content_rest.api.models.content_item import ContentItemResponse
from content_rest.core.config import Settings
from content_rest.core.errors import ContentItemError
from content_rest.services.content_item_data import ContentItemDataGateway
from content_rest.services.uploads import UploadPart, UploadSubmission

logger = logging.getLogger(__name__)


def iter_content(stream: BinaryIO, chunk_size: int) -> Iterator[bytes]:
    """Yield the stream in chunks and close it however iteration ends."""
    try:
        while True:
            chunk = stream.read(chunk_size)
            if not chunk:
                break
            yield chunk
    finally:
        stream.close()


def is_multipart_request(request: Request) -> bool:
    content_type = request.headers.get("content-type", "")
    return content_type.strip().lower().startswith("multipart/")


def collect_upload_parts(form) -> list:
    """File parts of a parsed form, in the order they were sent."""
    return [
        UploadPart(
            field_name=name,
            filename=value.filename,
            content_type=value.content_type,
            file=value.file,
        )
        for name, value in form.multi_items()
        if isinstance(value, UploadFile)
    ]


async def get_content_item_data(
    content_item_id: str = Path(..., description="The id of the content item to get the data for."),
    gateway: ContentItemDataGateway = Depends(get_content_gateway),
    settings: Settings = Depends(get_app_settings),
):
    """
    Get the data of a content item.

    The response body contains the binary content. The content-type of the
    response is application/octet-stream unless the content item has a valid
    mime type.
    """
    data = await run_in_threadpool(gateway.get_data, content_item_id)

    try:
        return StreamingResponse(
            iter_content(data.stream, settings.STREAM_CHUNK_SIZE),
            headers={"Content-Type": data.media_type},
            # Covers responses that end before the body iterator runs
            background=BackgroundTask(data.stream.close),
        )
    except BaseException:
        data.stream.close()
        raise


async def save_content_item_data(
    request: Request,
    content_item_id: str = Path(..., description="The id of the content item to save the data for."),
    gateway: ContentItemDataGateway = Depends(get_content_gateway),
) -> ContentItemResponse:
    """
    Save the content item data with an attached file.

    The request should be of type multipart/form-data. There should be a single
    file part included with the binary value of the content item.
    """
    if not is_multipart_request(request):
        return await run_in_threadpool(
            gateway.save_data, content_item_id, UploadSubmission(is_multipart=False)
        )

    try:
        form = await request.form()
    except (HTTPException, MultiPartException) as e:
        logger.info(f"Unreadable multipart body for content item {content_item_id}: {e}")
        raise ContentItemError.file_required(content_item_id) from e

    try:
        submission = UploadSubmission(is_multipart=True, parts=collect_upload_parts(form))
        return await run_in_threadpool(gateway.save_data, content_item_id, submission)
    finally:
        await form.close()
