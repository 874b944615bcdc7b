# content_rest/core/errors.py
"""
Error taxonomy for content item data operations.

The gateway raises ContentItemError with one of four kinds. It never deals in
HTTP status codes; content_rest.api.errors maps kinds to responses.

- NOT_FOUND: the id is unknown, or the store has nothing despite the item
  claiming content
- NO_CONTENT: the item exists but no payload was ever stored
- INVALID_REQUEST: the save request is not multipart or carries no file part
- INTERNAL_FAILURE: a collaborator failed during an otherwise valid operation;
  the original exception is chained as __cause__
"""
from enum import Enum
from typing import Optional


# Verb used in internal failure messages, keyed by gateway operation
_OPERATION_VERBS = {
    "get_data": "getting",
    "save_data": "saving",
}


class ContentItemErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    NO_CONTENT = "no_content"
    INVALID_REQUEST = "invalid_request"
    INTERNAL_FAILURE = "internal_failure"


class ContentItemError(Exception):
    """A failed content item data operation."""

    def __init__(
        self,
        kind: ContentItemErrorKind,
        message: str,
        content_item_id: Optional[str] = None,
        operation: Optional[str] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.content_item_id = content_item_id
        self.operation = operation

    @property
    def is_internal(self) -> bool:
        return self.kind is ContentItemErrorKind.INTERNAL_FAILURE

    @classmethod
    def not_found(cls, content_item_id: str) -> "ContentItemError":
        return cls(
            ContentItemErrorKind.NOT_FOUND,
            f"Could not find a content item with id '{content_item_id}'.",
            content_item_id=content_item_id,
        )

    @classmethod
    def missing_stream(cls, content_item_id: str) -> "ContentItemError":
        return cls(
            ContentItemErrorKind.NOT_FOUND,
            f"Content item with id '{content_item_id}' doesn't have content associated with it.",
            content_item_id=content_item_id,
        )

    @classmethod
    def no_content(cls, content_item_id: str) -> "ContentItemError":
        return cls(
            ContentItemErrorKind.NO_CONTENT,
            f"No data available for content item {content_item_id}",
            content_item_id=content_item_id,
        )

    @classmethod
    def multipart_required(cls, content_item_id: Optional[str] = None) -> "ContentItemError":
        return cls(
            ContentItemErrorKind.INVALID_REQUEST,
            "Multipart request required to save content item data",
            content_item_id=content_item_id,
        )

    @classmethod
    def file_required(cls, content_item_id: Optional[str] = None) -> "ContentItemError":
        return cls(
            ContentItemErrorKind.INVALID_REQUEST,
            "Content item file is required.",
            content_item_id=content_item_id,
        )

    @classmethod
    def internal_failure(cls, operation: str, content_item_id: str) -> "ContentItemError":
        """Build the wrapper for an unexpected fault; chain the cause with ``raise ... from``."""
        return cls(
            ContentItemErrorKind.INTERNAL_FAILURE,
            f"Error {_OPERATION_VERBS.get(operation, operation)} content item data {content_item_id}",
            content_item_id=content_item_id,
            operation=operation,
        )
