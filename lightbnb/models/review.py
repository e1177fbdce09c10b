"""
Property review model. Reviews are only read back as an averaged rating.
"""

from sqlalchemy import Integer, Text, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from lightbnb.database import Base
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from lightbnb.models.property import Property


class PropertyReview(Base):
    """A guest's rating of a stay."""

    __tablename__ = "property_reviews"

    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_property_reviews_rating"),
    )

    guest_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False
    )

    property_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    reservation_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("reservations.id", ondelete="CASCADE"),
        nullable=True
    )

    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False, default="")

    property: Mapped["Property"] = relationship(
        "Property",
        back_populates="reviews",
        lazy="raise"
    )

    def __repr__(self) -> str:
        return f"<PropertyReview(id={self.id}, property_id={self.property_id}, rating={self.rating})>"
