"""
Pydantic schemas for reservation records.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator
from datetime import date


class ReservationBase(BaseModel):
    """Base reservation schema with common fields."""

    start_date: date = Field(..., description="First night of the stay")
    end_date: date = Field(..., description="Checkout date")
    property_id: int = Field(..., gt=0)
    guest_id: int = Field(..., gt=0)

    @model_validator(mode='after')
    def validate_dates(self):
        """Checkout cannot come before check-in."""
        if self.end_date < self.start_date:
            raise ValueError("end_date must be on or after start_date")
        return self


class ReservationCreate(ReservationBase):
    """Schema for inserting a reservation."""


class ReservationRecord(BaseModel):
    """A reservation row as stored."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    start_date: date
    end_date: date
    property_id: int
    guest_id: int
