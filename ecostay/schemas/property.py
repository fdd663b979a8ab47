"""Pydantic v2 input schemas for property operations."""

from pydantic import BaseModel, Field

from ecostay.models.category import PropertyCategory


class PropertyCreate(BaseModel):
    """Schema for creating a new property.

    Days outside the calendar are not rejected here; the registry skips them
    and only fails if nothing valid is left.
    """

    name: str = Field(..., min_length=1, max_length=255)
    category: PropertyCategory
    days: list[int] = Field(..., min_length=1)


class PropertyRename(BaseModel):
    """Schema for renaming a property."""

    name: str = Field(..., min_length=1, max_length=255)
