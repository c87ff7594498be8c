import logging
from datetime import date, datetime

from sqlalchemy.ext.asyncio import AsyncSession

from hotel.bookings.repository import BookingRepository
from hotel.database.engine import as_datetime
from hotel.exceptions import CapacityExceededException, InvalidRangeException
from hotel.rooms.models import Room
from hotel.rooms.repository import RoomRepository

logger = logging.getLogger(__name__)


def stay_range(check_in: date | datetime, check_out: date | datetime) -> tuple[datetime, datetime]:
    check_in, check_out = as_datetime(check_in), as_datetime(check_out)
    if check_out <= check_in:
        raise InvalidRangeException()
    return check_in, check_out


class AvailabilityCalculator:
    """Decides whether a room still has a free unit for a stay.

    A booking holds one unit for ``[check_in, check_out)`` unless it is
    cancelled, so a stay ending on a day never collides with one starting on
    that day.
    """

    def __init__(self, db: AsyncSession):
        self.rooms = RoomRepository(db)
        self.bookings = BookingRepository(db)

    async def ensure_available(self, room_id: int, check_in: date | datetime, check_out: date | datetime,
                               exclude_booking_id: int | None = None, lock_room: bool = False) -> Room:
        """Return the room, or raise if the range is invalid, the room is unknown or it is full.

        ``exclude_booking_id`` keeps a booking that is being moved from
        blocking itself. ``lock_room`` holds the room row until the caller's
        transaction ends.
        """
        check_in, check_out = stay_range(check_in, check_out)
        room = await self.rooms.get_room(room_id, lock=lock_room)

        overlapping = await self.bookings.count_overlapping(
            room.room_id, check_in, check_out, exclude_id=exclude_booking_id
        )
        if overlapping >= room.inventory:
            logger.warning(
                "Room %s is full for %s - %s (%s of %s units taken)",
                room_id, check_in, check_out, overlapping, room.inventory,
            )
            raise CapacityExceededException()
        return room

    async def is_available(self, room_id: int, check_in: date | datetime, check_out: date | datetime,
                           exclude_booking_id: int | None = None) -> bool:
        try:
            await self.ensure_available(room_id, check_in, check_out, exclude_booking_id)
        except CapacityExceededException:
            return False
        return True
