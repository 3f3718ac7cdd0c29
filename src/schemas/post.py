"""Post schemas."""

from datetime import datetime

from pydantic import Field, field_validator

from src.schemas.base import CamelModel


class PostAuthor(CamelModel):
    """Author summary embedded in a post."""

    id: int
    username: str
    email: str


class PostCreate(CamelModel):
    """Create a post."""

    title: str = Field(..., min_length=1, max_length=255)
    content: str | None = Field(None, max_length=20000)
    published: bool = False


class PostUpdate(CamelModel):
    """Partially update a post."""

    title: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = Field(None, max_length=20000)
    published: bool | None = None

    @field_validator("title", "published")
    @classmethod
    def not_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value


class PostResponse(CamelModel):
    """Post response with its author."""

    id: int
    title: str
    content: str | None
    published: bool
    author_id: int
    created_at: datetime
    updated_at: datetime
    author: PostAuthor
