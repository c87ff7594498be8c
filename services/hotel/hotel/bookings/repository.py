from datetime import datetime

from sqlalchemy import select, func, and_, or_
from sqlalchemy.ext.asyncio import AsyncSession

from hotel.bookings.models import Booking
from hotel.bookings.status import BookingStatus
from hotel.exceptions import BookingNotFoundException
from hotel.rooms.models import Room
from hotel.users.models import User


class BookingRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def count_overlapping(self, room_id: int, check_in: datetime, check_out: datetime,
                                exclude_id: int | None = None) -> int:
        """Non-cancelled bookings of the room whose stay intersects [check_in, check_out)."""
        query = (
            select(func.count())
            .select_from(Booking)
            .where(
                Booking.room_id == room_id,
                Booking.status != BookingStatus.CANCELLED.value,
                Booking.check_in < check_out,
                Booking.check_out > check_in,
            )
        )
        if exclude_id is not None:
            query = query.where(Booking.booking_id != exclude_id)

        result = await self.db.execute(query)
        return result.scalar_one()

    async def insert(self, booking: Booking) -> Booking:
        self.db.add(booking)
        await self.db.flush()
        return booking

    async def update(self, booking: Booking, **fields) -> Booking:
        for field, value in fields.items():
            setattr(booking, field, value)
        await self.db.flush()
        return booking

    async def find_by_id(self, booking_id: int, lock: bool = False) -> Booking:
        query = select(Booking).where(Booking.booking_id == booking_id)
        if lock:
            query = query.with_for_update()
        result = await self.db.execute(query)
        booking = result.scalar_one_or_none()
        if booking is None:
            raise BookingNotFoundException()
        return booking

    def _with_room_and_user(self):
        return (
            select(Booking, Room, User)
            .join(Room, Room.room_id == Booking.room_id, isouter=True)
            .join(User, User.user_id == Booking.user_id, isouter=True)
        )

    async def find_detail(self, booking_id: int):
        query = self._with_room_and_user().where(Booking.booking_id == booking_id)
        result = await self.db.execute(query)
        row = result.one_or_none()
        if row is None:
            raise BookingNotFoundException()
        return row

    async def find_upcoming(self, since: datetime):
        query = (
            self._with_room_and_user()
            .where(Booking.check_in >= since)
            .order_by(Booking.check_in.asc())
        )
        result = await self.db.execute(query)
        return result.all()

    async def find_check_ins(self, day_start: datetime, day_end: datetime):
        query = (
            self._with_room_and_user()
            .where(
                Booking.check_in >= day_start,
                Booking.check_in < day_end,
                Booking.status != BookingStatus.CANCELLED.value,
            )
            .order_by(Booking.check_in.asc())
        )
        result = await self.db.execute(query)
        return result.all()

    async def find_check_outs(self, day_start: datetime, day_end: datetime):
        """Departures due today plus overstays that never checked out."""
        query = (
            self._with_room_and_user()
            .where(
                or_(
                    and_(Booking.check_out >= day_start, Booking.check_out < day_end),
                    and_(
                        Booking.check_out < day_start,
                        Booking.status != BookingStatus.CHECKED_OUT.value,
                    ),
                ),
                Booking.status != BookingStatus.CANCELLED.value,
            )
            .order_by(Booking.check_out.asc())
        )
        result = await self.db.execute(query)
        return result.all()
