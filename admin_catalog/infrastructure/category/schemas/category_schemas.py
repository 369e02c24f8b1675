"""Pydantic schemas for Category API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field


class CategoryRequest(BaseModel):
    """
    Body for creating or replacing a category.

    Name rules are enforced by the domain so that every violation is
    reported together; a missing name is accepted here.
    """

    name: str | None = Field(None, description="Category name, 3 to 255 characters")
    description: str | None = Field(None, description="Free text description")
    is_active: bool = Field(True, description="Whether the category is active")


class CreateCategoryRequest(CategoryRequest):
    """Schema for creating a Category."""


class UpdateCategoryRequest(CategoryRequest):
    """Schema for updating a Category."""


class CategoryIdResponse(BaseModel):
    """Id of the created or updated category."""

    id: str


class CategoryResponse(BaseModel):
    """Schema for Category response."""

    id: str
    name: str | None
    description: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None

    model_config = {"from_attributes": True}


class CategoryListResponse(BaseModel):
    """Schema for one row of a category page."""

    id: str
    name: str | None
    description: str | None
    is_active: bool
    created_at: datetime
    deleted_at: datetime | None = None

    model_config = {"from_attributes": True}
