# content_rest/api/models/content_item.py
from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional


class ContentItem(BaseModel):
    """Content item record as held by the item registry."""
    id: str = Field(..., description="Unique, externally assigned content item id")
    name: Optional[str] = Field(default=None, description="Display name of the content item")
    mime_type: Optional[str] = Field(
        default=None,
        description="Hint for serving the data; may be missing or malformed"
    )
    task_id: Optional[str] = None
    process_instance_id: Optional[str] = None
    tenant_id: Optional[str] = None
    content_store_id: Optional[str] = Field(default=None, description="Key of the payload inside the content store")
    content_available: bool = Field(default=False, description="True once data has been stored for the item")
    content_size: Optional[int] = Field(default=None, description="Size of the stored data in bytes")
    created: Optional[datetime] = None
    last_modified: Optional[datetime] = None


class ContentItemCreateRequest(BaseModel):
    """Request model for registering a new content item (metadata only, no data)."""
    id: Optional[str] = Field(
        default=None,
        description="Id to assign; generated when omitted",
        examples=["doc-1"]
    )
    name: Optional[str] = Field(default=None, examples=["contract.pdf"])
    mime_type: Optional[str] = Field(default=None, examples=["application/pdf"])
    task_id: Optional[str] = None
    process_instance_id: Optional[str] = None
    tenant_id: Optional[str] = None


class ContentItemResponse(BaseModel):
    """Response model describing a content item."""
    id: str = Field(..., description="Content item id")
    name: Optional[str] = None
    mime_type: Optional[str] = None
    task_id: Optional[str] = None
    process_instance_id: Optional[str] = None
    tenant_id: Optional[str] = None
    content_store_id: Optional[str] = None
    content_available: bool = Field(..., description="Whether data can be fetched for this item")
    content_size: Optional[int] = None
    created: Optional[datetime] = None
    last_modified: Optional[datetime] = None
    url: str = Field(..., description="Path of the content item resource")
