"""Tag schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from larder.models.tag import DEFAULT_TAG_COLOR


class TagCreate(BaseModel):
    """Create a tag."""

    name: str = Field(..., max_length=100)
    color: str = Field(DEFAULT_TAG_COLOR, max_length=20)


class TagUpdate(BaseModel):
    """Update a tag."""

    name: str = Field(..., max_length=100)
    color: str = Field(..., max_length=20)


class TagResponse(BaseModel):
    """Tag response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    color: str
    created_at: datetime
