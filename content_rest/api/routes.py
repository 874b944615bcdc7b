# content_rest/api/routes.py
"""
Routing table for the content item API.

Each entry maps an HTTP method and path to its handler. Handlers do their own
parameter extraction (path variables, multipart parts) before calling into
the services.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from fastapi import APIRouter, status
from fastapi.responses import StreamingResponse

from content_rest.api.endpoints import content_item_data, content_items
from content_rest.api.models.content_item import ContentItemResponse

CONTENT_ITEM_TAG = "Content item"

_ERROR_BODY = {
    "application/json": {
        "example": {"detail": "Could not find a content item with id 'doc-1'.", "error": "not_found"}
    }
}

_MULTIPART_FILE_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "multipart/form-data": {
                "schema": {
                    "type": "object",
                    "properties": {"file": {"type": "string", "format": "binary"}},
                    "required": ["file"],
                }
            }
        },
    }
}


@dataclass
class Route:
    method: str
    path: str
    endpoint: Callable[..., Any]
    options: Dict[str, Any] = field(default_factory=dict)


ROUTES: List[Route] = [
    Route(
        "POST",
        "/content-items",
        content_items.create_content_item,
        {
            "summary": "Create a content item",
            "response_model": ContentItemResponse,
            "status_code": status.HTTP_201_CREATED,
            "responses": {
                201: {"description": "Indicates the content item was created and the result is returned."},
                409: {"description": "Indicates a content item with the given id already exists."},
            },
        },
    ),
    Route(
        "GET",
        "/content-items/{content_item_id}",
        content_items.get_content_item,
        {
            "summary": "Get a content item",
            "response_model": ContentItemResponse,
            "responses": {
                200: {"description": "Indicates the content item was found and returned."},
                404: {"description": "Indicates the requested content item was not found.", "content": _ERROR_BODY},
            },
        },
    ),
    Route(
        "GET",
        "/content-items/{content_item_id}/data",
        content_item_data.get_content_item_data,
        {
            "summary": "Get the data of a content item",
            "response_class": StreamingResponse,
            "responses": {
                200: {
                    "description": "Indicates the content item was found and the requested content is returned.",
                    "content": {"application/octet-stream": {}},
                },
                404: {
                    "description": (
                        "Indicates the content item was not found or the content item does not have "
                        "a binary stream available. Status message provides additional information."
                    ),
                    "content": _ERROR_BODY,
                },
            },
        },
    ),
    Route(
        "POST",
        "/content-items/{content_item_id}/data",
        content_item_data.save_content_item_data,
        {
            "summary": "Save the content item data",
            "response_model": ContentItemResponse,
            "status_code": status.HTTP_201_CREATED,
            "openapi_extra": _MULTIPART_FILE_BODY,
            "responses": {
                201: {"description": "Indicates the content item data was saved and the result is returned."},
                400: {"description": "Indicates required content item data is missing from the request.", "content": _ERROR_BODY},
                404: {"description": "Indicates the requested content item was not found.", "content": _ERROR_BODY},
            },
        },
    ),
]


def build_router(routes: List[Route] = ROUTES) -> APIRouter:
    router = APIRouter(tags=[CONTENT_ITEM_TAG])
    for route in routes:
        router.add_api_route(route.path, route.endpoint, methods=[route.method], **route.options)
    return router
