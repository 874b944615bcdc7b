# content_rest/api/response_factory.py
from content_rest.api.models.content_item import ContentItem, ContentItemResponse


class ContentRestResponseFactory:
    """Builds the JSON representation of content items."""

    def __init__(self, api_prefix: str = ""):
        self.api_prefix = api_prefix.rstrip("/")

    def content_item_url(self, content_item_id: str) -> str:
        return f"{self.api_prefix}/content-items/{content_item_id}"

    def create_content_item_response(self, content_item: ContentItem) -> ContentItemResponse:
        return ContentItemResponse(
            **content_item.model_dump(),
            url=self.content_item_url(content_item.id),
        )
