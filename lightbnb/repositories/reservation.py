"""
Reservation repository for listing a guest's bookings.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.reservation import Reservation
from typing import List, Dict, Any
import logging

logger = logging.getLogger(__name__)


class ReservationRepository(BaseRepository[Reservation]):
    """Repository for reservation rows."""

    def __init__(self, db: AsyncSession):
        super().__init__(Reservation, db)

    async def create_reservation(self, reservation_data: Dict[str, Any]) -> Reservation:
        try:
            reservation = await self.create(reservation_data)
            logger.info(
                f"Created reservation {reservation.id} for guest {reservation.guest_id} "
                f"at property {reservation.property_id}"
            )
            return reservation
        except Exception as e:
            logger.error(f"Failed to create reservation: {e}")
            raise

    async def get_reservations_for_guest(self, guest_id: int, limit: int = 10) -> List[Reservation]:
        """
        Get up to `limit` reservations belonging to a guest.

        Args:
            guest_id: ID of the guest
            limit: Maximum number of reservations to return

        Returns:
            Reservations ordered by start date, then id
        """
        try:
            query = (
                select(Reservation)
                .where(Reservation.guest_id == guest_id)
                .order_by(Reservation.start_date, Reservation.id)
                .limit(limit)
            )

            result = await self.db.execute(query)
            reservations = result.scalars().all()

            logger.debug(f"Retrieved {len(reservations)} reservations for guest {guest_id}")
            return list(reservations)
        except Exception as e:
            logger.error(f"Failed to get reservations for guest {guest_id}: {e}")
            raise
