"""
Pydantic schemas for property reviews.
Reviews are written when seeding and only read back as averaged ratings.
"""

from pydantic import BaseModel, Field
from typing import Optional


class PropertyReviewCreate(BaseModel):
    """Schema for inserting a property review."""

    guest_id: int = Field(..., gt=0)
    property_id: int = Field(..., gt=0)
    reservation_id: Optional[int] = Field(None, gt=0)
    rating: int = Field(..., ge=1, le=5, description="Star rating from 1 to 5")
    message: str = Field("", max_length=5000)
