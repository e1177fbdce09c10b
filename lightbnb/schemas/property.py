"""
Pydantic schemas for property records and property search options.
Handles property creation input, the searched record shape and filter validation.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional


class PropertyBase(BaseModel):
    """Base property schema with common fields."""

    owner_id: int = Field(..., gt=0, description="ID of the owning user")

    title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Listing title",
        examples=["Speed lamp"]
    )

    description: str = Field("", max_length=5000, description="Listing description")

    thumbnail_photo_url: str = Field("", max_length=255)
    cover_photo_url: str = Field("", max_length=255)

    cost_per_night: int = Field(
        ...,
        ge=0,
        description="Nightly price in cents",
        examples=[93061]
    )

    parking_spaces: int = Field(0, ge=0)
    number_of_bathrooms: int = Field(0, ge=0)
    number_of_bedrooms: int = Field(0, ge=0)

    country: str = Field(..., min_length=1, max_length=255)
    street: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=255)
    province: str = Field(..., min_length=1, max_length=255)
    post_code: str = Field(..., min_length=1, max_length=255)

    active: bool = True

    @field_validator('title', 'city', 'street', 'country', 'province', 'post_code')
    @classmethod
    def strip_text(cls, v):
        """Validate and clean required text fields."""
        if not v or not v.strip():
            raise ValueError("Field cannot be empty")
        return v.strip()


class PropertyCreate(PropertyBase):
    """Schema for creating a new property listing."""


class PropertyRecord(BaseModel):
    """
    A property row as returned by lookups and searches.
    Stored values are read back as they are, without the input checks of
    PropertyCreate. average_rating is only populated by searches, which
    aggregate reviews.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: int
    title: str
    description: str
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: int
    parking_spaces: int
    number_of_bathrooms: int
    number_of_bedrooms: int
    country: str
    street: str
    city: str
    province: str
    post_code: str
    active: bool
    average_rating: Optional[float] = None

    @property
    def price_per_night(self) -> float:
        return self.cost_per_night / 100


class PropertySearchOptions(BaseModel):
    """
    Optional filter criteria for property search.
    Prices are in dollars; the store keeps cents.
    """

    city: Optional[str] = Field(
        None,
        max_length=255,
        description="LIKE pattern matched against the city, e.g. '%Van%'"
    )

    owner_id: Optional[int] = Field(None, gt=0, description="Only properties owned by this user")

    minimum_price_per_night: Optional[float] = Field(None, ge=0)
    maximum_price_per_night: Optional[float] = Field(None, ge=0)

    minimum_rating: Optional[float] = Field(
        None,
        ge=0,
        le=5,
        description="Only properties whose average rating is above this value"
    )

    @field_validator('*', mode='before')
    @classmethod
    def blank_to_none(cls, v):
        """Search forms submit untouched fields as empty strings."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode='after')
    def validate_price_range(self):
        """Validate that the price range is not inverted."""
        if (
            self.minimum_price_per_night is not None
            and self.maximum_price_per_night is not None
            and self.minimum_price_per_night > self.maximum_price_per_night
        ):
            raise ValueError("minimum_price_per_night cannot exceed maximum_price_per_night")
        return self
