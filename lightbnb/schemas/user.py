"""
Pydantic schemas for user records.
Handles user creation input and the record shape returned by lookups.

Emails are stored and matched exactly as given. Input is checked for a
valid address but never rewritten, so a lookup with the same string always
finds the row.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from email_validator import validate_email, EmailNotValidError


class UserCreate(BaseModel):
    """
    Schema for inserting a user.
    The password is stored exactly as given; hash it first with
    lightbnb.utils.auth.hash_password or use services.accounts.register_user.
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="User's display name",
        examples=["Devin Sanders"]
    )

    email: str = Field(
        ...,
        max_length=255,
        description="User's email address",
        examples=["tristanjacobs@gmail.com"]
    )

    password: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Password to store"
    )

    @field_validator('email')
    @classmethod
    def validate_email_address(cls, v):
        """Reject malformed addresses without changing the stored value."""
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email format: {e}")
        return v

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate and clean name."""
        if not v or not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()


class UserRecord(BaseModel):
    """A user row as stored. Read back without input validation."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    password: str = Field(..., repr=False)
