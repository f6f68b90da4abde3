"""
Input validation schemas using Pydantic for catalog data integrity.
"""
from pydantic import BaseModel, Field, field_validator


class MenuItemInput(BaseModel):
    """Schema for one master menu record."""
    item_name: str = Field(..., min_length=1, max_length=200)
    category: str = Field(..., min_length=1, max_length=50)
    calories: int = Field(..., ge=0)
    taste_profile: str
    popularity_score: float

    @field_validator('item_name', 'taste_profile')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('category')
    @classmethod
    def normalize_category(cls, v):
        """Categories are matched case-insensitively against main/side/drink."""
        return v.strip().lower()

    @field_validator('item_name')
    @classmethod
    def validate_name(cls, v):
        if not v:
            raise ValueError('Menu item name cannot be empty')
        return v
