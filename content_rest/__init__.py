# content_rest/__init__.py
"""
Content item data service.

Serves and stores the binary payload ("data") of content items over HTTP.

Key components:
- services.content_item_data: the gateway that reads and saves item data
- services.media_types: media type negotiation for served bytes
- services.content_store: filesystem and in-memory payload stores
- api: routing table, endpoints and error translation

Configuration is loaded from environment variables via content_rest.core.config.
"""

__version__ = "0.1.0"
