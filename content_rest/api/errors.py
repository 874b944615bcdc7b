# content_rest/api/errors.py
"""
Translation of content item errors into HTTP responses.

NOT_FOUND and NO_CONTENT share 404; the message tells them apart.
"""
import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

from content_rest.core.errors import ContentItemError, ContentItemErrorKind

logger = logging.getLogger(__name__)

STATUS_CODES = {
    ContentItemErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ContentItemErrorKind.NO_CONTENT: status.HTTP_404_NOT_FOUND,
    ContentItemErrorKind.INVALID_REQUEST: status.HTTP_400_BAD_REQUEST,
    ContentItemErrorKind.INTERNAL_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_code_for(kind: ContentItemErrorKind) -> int:
    return STATUS_CODES.get(kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


async def content_item_error_handler(request: Request, exc: ContentItemError) -> JSONResponse:
    status_code = status_code_for(exc.kind)

    if exc.is_internal:
        cause = exc.__cause__
        logger.error(
            f"{request.method} {request.url.path} failed: {exc.message}",
            exc_info=(type(cause), cause, cause.__traceback__) if cause is not None else None,
        )
    else:
        # Expected client-visible conditions, not server errors
        logger.info(f"{request.method} {request.url.path} -> {status_code}: {exc.message}")

    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "error": exc.kind.value},
    )
