import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hotel.bookings.availability import AvailabilityCalculator, stay_range
from hotel.bookings.models import Booking
from hotel.bookings.pricing import PricingCalculator
from hotel.bookings.repository import BookingRepository
from hotel.bookings.status import BookingStatus, can_transition
from hotel.config import settings
from hotel.database.engine import get_async_session, utcnow
from hotel.exceptions import (
    CapacityExceededException,
    HotelException,
    InvalidRangeException,
    InvalidStateException,
    NotFoundException,
    PaymentAmountExceededException,
)
from hotel.payments.repository import PaymentRepository
from hotel.users.repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass
class GuestInfo:
    name: str
    whatsapp: str
    email: str | None = None


@dataclass
class AvailabilityResult:
    available: bool
    message: str | None = None


class BookingService:
    """Create, reschedule and move bookings through their statuses.

    Every write runs in one transaction on the injected session. The room row
    is locked before overlaps are counted, so two requests for the last unit
    of a room cannot both succeed.
    """

    def __init__(self, db: AsyncSession, currency: str | None = None):
        self.db = db
        self.currency = currency or settings.default_currency
        self.availability = AvailabilityCalculator(db)
        self.pricing = PricingCalculator(db)
        self.bookings = BookingRepository(db)
        self.users = UserRepository(db)
        self.payments = PaymentRepository(db)

    @asynccontextmanager
    async def _transaction(self, operation: str):
        try:
            yield
            await self.db.commit()
        except HotelException as e:
            await self.db.rollback()
            logger.warning("%s rejected: %s", operation, e.detail)
            raise
        except Exception:
            await self.db.rollback()
            raise

    async def check_room_availability(self, room_id: int, check_in: date | datetime,
                                      check_out: date | datetime) -> AvailabilityResult:
        try:
            await self.availability.ensure_available(room_id, check_in, check_out)
        except (NotFoundException, CapacityExceededException, InvalidRangeException) as e:
            return AvailabilityResult(available=False, message=e.detail)
        return AvailabilityResult(available=True)

    async def create_booking(self, room_id: int, check_in: date | datetime, check_out: date | datetime,
                             adults: int, payment_method: str, guest: GuestInfo | None = None,
                             user_id: int | None = None, children: int = 0) -> Booking:
        if user_id is None and guest is None:
            raise ValueError("create_booking needs either user_id or guest")

        async with self._transaction("Create booking"):
            check_in, check_out = stay_range(check_in, check_out)

            if user_id is not None:
                user = await self.users.find_by_id(user_id)
            else:
                user = await self.users.create(guest.name, guest.email, guest.whatsapp)

            room = await self.availability.ensure_available(room_id, check_in, check_out, lock_room=True)
            bill = await self.pricing.compute_bill(room_id, check_in, check_out, room=room)

            booking = await self.bookings.insert(Booking(
                room_id=room.room_id,
                user_id=user.user_id,
                check_in=check_in,
                check_out=check_out,
                status=BookingStatus.CONFIRMED.value,
                adults=adults,
                children=children or 0,
            ))
            await self.payments.create(
                booking_id=booking.booking_id,
                user_id=user.user_id,
                method=payment_method,
                bill_amount=bill.bill_amount,
                currency=self.currency,
            )

        logger.info(
            "Created booking %s: room %s, %s night(s), bill %s %s",
            booking.booking_id, room_id, bill.nights, bill.bill_amount, self.currency,
        )
        return booking

    async def reschedule_booking(self, booking_id: int, room_id: int, check_in: date | datetime,
                                 check_out: date | datetime, guest: GuestInfo, adults: int,
                                 payment_method: str, children: int = 0) -> Booking:
        async with self._transaction(f"Reschedule booking {booking_id}"):
            booking = await self.bookings.find_by_id(booking_id, lock=True)
            if booking.status == BookingStatus.CANCELLED.value:
                raise InvalidStateException("Cannot reschedule a cancelled booking")

            check_in, check_out = stay_range(check_in, check_out)
            room = await self.availability.ensure_available(
                room_id, check_in, check_out, exclude_booking_id=booking.booking_id, lock_room=True
            )
            bill = await self.pricing.compute_bill(room_id, check_in, check_out, room=room)

            payment = await self.payments.find_latest_by_booking(booking.booking_id, lock=True)
            if payment is not None and payment.bill_paid_amount > bill.bill_amount:
                raise PaymentAmountExceededException(
                    "New bill would be lower than the amount already paid"
                )

            # The guest row is shared by reference; this rewrites it for every booking it owns
            await self.users.update(booking.user_id, guest.name, guest.email, guest.whatsapp)

            await self.bookings.update(
                booking,
                room_id=room.room_id,
                check_in=check_in,
                check_out=check_out,
                status=BookingStatus.RESCHEDULED.value,
                adults=adults,
                children=children or 0,
            )

            if payment is not None:
                await self.payments.update(payment, method=payment_method, bill_amount=bill.bill_amount)
            else:
                logger.warning("Booking %s has no payment row to reprice", booking_id)

        logger.info(
            "Rescheduled booking %s: room %s, %s - %s, bill %s",
            booking_id, room_id, check_in, check_out, bill.bill_amount,
        )
        return booking

    async def update_booking_status(self, booking_id: int, status: BookingStatus) -> Booking:
        status = BookingStatus(status)
        async with self._transaction(f"Status update of booking {booking_id}"):
            booking = await self.bookings.find_by_id(booking_id, lock=True)
            try:
                current = BookingStatus(booking.status)
            except ValueError:
                raise InvalidStateException(
                    f"Booking {booking_id} has an unrecognised status '{booking.status}'"
                ) from None
            if not can_transition(current, status):
                raise InvalidStateException(
                    f"Cannot change booking status from '{current.value}' to '{status.value}'"
                )
            await self.bookings.update(booking, status=status.value)

        logger.info("Booking %s: %s -> %s", booking_id, current.value, status.value)
        return booking

    async def get_booking(self, booking_id: int) -> dict:
        booking, room, user = await self.bookings.find_detail(booking_id)
        payment = await self.payments.find_latest_by_booking(booking_id)
        return {"booking": booking, "room": room, "user": user, "payment": payment}

    async def upcoming(self):
        return await self.bookings.find_upcoming(self._today())

    async def today_check_ins(self):
        today = self._today()
        return await self.bookings.find_check_ins(today, today + timedelta(days=1))

    async def today_check_outs(self):
        today = self._today()
        return await self.bookings.find_check_outs(today, today + timedelta(days=1))

    @staticmethod
    def _today() -> datetime:
        return utcnow().replace(hour=0, minute=0, second=0, microsecond=0)


async def get_booking_service(db: AsyncSession = Depends(get_async_session)):
    return BookingService(db)
