from datetime import datetime
from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient

from hotel.bookings.models import Booking
from hotel.bookings.status import BookingStatus
from hotel.database.engine import Database
from hotel.main import create_app
from hotel.offers.models import Offer
from hotel.payments.models import Payment
from hotel.rooms.models import Room
from hotel.users.models import User


@pytest.fixture
async def database(tmp_path):
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'hotel.db'}")
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
async def session(database):
    async with database.session_maker() as session:
        yield session


@pytest.fixture
async def client(database):
    app = create_app(database)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def make_room(session):
    async def _make_room(price="100.00", total_rooms=1, room_name="Deluxe", room_type="double", **kwargs):
        room = Room(
            room_name=room_name,
            room_type=room_type,
            price=Decimal(price),
            total_rooms=total_rooms,
            **kwargs,
        )
        session.add(room)
        await session.commit()
        return room
    return _make_room


@pytest.fixture
def make_user(session):
    async def _make_user(name="Asha Rao", email="asha@example.com", whatsapp_number="919876543210"):
        user = User(name=name, email=email, whatsapp_number=whatsapp_number)
        session.add(user)
        await session.commit()
        return user
    return _make_user


@pytest.fixture
def make_offer(session):
    async def _make_offer(room, offer_price="80.00", start_date=None, end_date=None, is_active=True,
                          discount_percent="20", **kwargs):
        offer = Offer(
            room_id=room.room_id,
            discount_percent=Decimal(discount_percent),
            offer_price=Decimal(offer_price) if offer_price is not None else None,
            start_date=start_date,
            end_date=end_date,
            is_active=is_active,
            **kwargs,
        )
        session.add(offer)
        await session.commit()
        return offer
    return _make_offer


@pytest.fixture
def make_booking(session, make_user):
    """Insert a booking row directly, bypassing availability checks."""
    async def _make_booking(room, check_in: datetime, check_out: datetime,
                            status=BookingStatus.CONFIRMED, user=None, bill_amount=None):
        if user is None:
            user = await make_user()
        booking = Booking(
            room_id=room.room_id,
            user_id=user.user_id,
            check_in=check_in,
            check_out=check_out,
            status=BookingStatus(status).value,
            adults=2,
            children=0,
        )
        session.add(booking)
        await session.flush()
        if bill_amount is not None:
            session.add(Payment(
                booking_id=booking.booking_id,
                user_id=user.user_id,
                method="offline",
                status="pending",
                currency="INR",
                bill_amount=Decimal(bill_amount),
                bill_paid_amount=Decimal("0"),
            ))
        await session.commit()
        return booking
    return _make_booking
