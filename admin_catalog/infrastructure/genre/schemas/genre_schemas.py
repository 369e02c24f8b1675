"""Pydantic schemas for Genre API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field


class GenreRequest(BaseModel):
    """Body for creating or replacing a genre."""

    name: str | None = Field(None, description="Genre name, 1 to 255 characters")
    is_active: bool = Field(True, description="Whether the genre is active")
    categories_id: list[str] = Field(
        default_factory=list, description="Ids of the categories the genre belongs to"
    )


class CreateGenreRequest(GenreRequest):
    """Schema for creating a Genre."""


class UpdateGenreRequest(GenreRequest):
    """Schema for updating a Genre."""


class GenreIdResponse(BaseModel):
    id: str


class GenreResponse(BaseModel):
    """Schema for Genre response."""

    id: str
    name: str | None
    is_active: bool
    categories_id: list[str]
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None


class GenreListResponse(BaseModel):
    """Schema for one row of a genre page."""

    id: str
    name: str | None
    is_active: bool
    categories_id: list[str]
    created_at: datetime
    deleted_at: datetime | None = None
