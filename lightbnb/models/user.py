"""
User model for guests and property owners.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from lightbnb.database import Base
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from lightbnb.models.property import Property
    from lightbnb.models.reservation import Reservation


class User(Base):
    """
    A LightBnB account. The same user can own properties and book them.
    The password column stores whatever the caller hands in, normally a bcrypt hash.
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name"
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="Login email address - must be unique"
    )

    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Password as stored by the caller"
    )

    # Relationships
    properties: Mapped[List["Property"]] = relationship(
        "Property",
        back_populates="owner",
        cascade="all, delete-orphan",
        lazy="raise"
    )

    reservations: Mapped[List["Reservation"]] = relationship(
        "Reservation",
        back_populates="guest",
        cascade="all, delete-orphan",
        lazy="raise"
    )

    def __repr__(self) -> str:
        """String representation of the user."""
        return f"<User(id={self.id}, email={self.email})>"
