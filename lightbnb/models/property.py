"""
Property model for vacation rental listings.
Handles listing details, nightly pricing and the owning user.
"""

from sqlalchemy import String, Text, Integer, Boolean, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from lightbnb.database import Base
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from lightbnb.models.user import User
    from lightbnb.models.reservation import Reservation
    from lightbnb.models.review import PropertyReview


class Property(Base):
    """
    Property model for rental listings.
    Prices are stored in cents.
    """

    __tablename__ = "properties"

    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="ID of the user who owns this property"
    )

    # Listing details
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Listing title"
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        comment="Listing description"
    )

    thumbnail_photo_url: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
    )

    cover_photo_url: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
    )

    # Pricing information
    cost_per_night: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        index=True,
        comment="Nightly price in cents"
    )

    # Layout
    parking_spaces: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    number_of_bathrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    number_of_bedrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Location information
    country: Mapped[str] = mapped_column(String(255), nullable=False)
    street: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    province: Mapped[str] = mapped_column(String(255), nullable=False)
    post_code: Mapped[str] = mapped_column(String(255), nullable=False)

    active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        comment="Whether the listing is bookable"
    )

    # Relationships
    owner: Mapped["User"] = relationship(
        "User",
        back_populates="properties",
        lazy="raise"
    )

    reservations: Mapped[List["Reservation"]] = relationship(
        "Reservation",
        back_populates="property",
        cascade="all, delete-orphan",
        lazy="raise"
    )

    reviews: Mapped[List["PropertyReview"]] = relationship(
        "PropertyReview",
        back_populates="property",
        cascade="all, delete-orphan",
        lazy="raise"
    )

    def __repr__(self) -> str:
        """String representation of the property."""
        return f"<Property(id={self.id}, title={self.title[:30]}, cost_per_night={self.cost_per_night})>"
