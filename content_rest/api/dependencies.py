# content_rest/api/dependencies.py
from fastapi import Request

from content_rest.api.response_factory import ContentRestResponseFactory
from content_rest.core.config import Settings
from content_rest.services.content_item_data import ContentItemDataGateway
from content_rest.services.content_items import InMemoryContentItemRegistry


# Collaborators are attached to app.state by content_rest.main.create_app

def get_content_gateway(request: Request) -> ContentItemDataGateway:
    return request.app.state.content_gateway


def get_content_item_registry(request: Request) -> InMemoryContentItemRegistry:
    return request.app.state.content_item_registry


def get_response_factory(request: Request) -> ContentRestResponseFactory:
    return request.app.state.response_factory


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
