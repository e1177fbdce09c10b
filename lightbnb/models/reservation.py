"""
Reservation model linking a guest to a property for a date range.
"""

from sqlalchemy import Date, Integer, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from lightbnb.database import Base
from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lightbnb.models.user import User
    from lightbnb.models.property import Property


class Reservation(Base):
    """A guest's booking of a property."""

    __tablename__ = "reservations"

    __table_args__ = (
        CheckConstraint("end_date >= start_date", name="ck_reservations_date_order"),
    )

    start_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)

    property_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    guest_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    property: Mapped["Property"] = relationship(
        "Property",
        back_populates="reservations",
        lazy="raise"
    )

    guest: Mapped["User"] = relationship(
        "User",
        back_populates="reservations",
        lazy="raise"
    )

    def __repr__(self) -> str:
        return f"<Reservation(id={self.id}, guest_id={self.guest_id}, property_id={self.property_id})>"
