import math
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from hotel.bookings.availability import stay_range
from hotel.offers.repository import OfferRepository
from hotel.rooms.models import Room
from hotel.rooms.repository import RoomRepository

SECONDS_PER_NIGHT = 24 * 60 * 60


@dataclass
class Bill:
    nights: int
    price_per_night: Decimal
    bill_amount: Decimal
    offer_id: int | None = None


def count_nights(check_in: datetime, check_out: datetime) -> int:
    # A started day is billed as a full night
    return math.ceil((check_out - check_in).total_seconds() / SECONDS_PER_NIGHT)


class PricingCalculator:
    def __init__(self, db: AsyncSession):
        self.rooms = RoomRepository(db)
        self.offers = OfferRepository(db)

    async def compute_bill(self, room_id: int, check_in: date | datetime, check_out: date | datetime,
                           room: Room | None = None) -> Bill:
        """Price a stay at the winning offer's rate, or the room's own price without one."""
        check_in, check_out = stay_range(check_in, check_out)
        if room is None:
            room = await self.rooms.get_room(room_id)

        nights = count_nights(check_in, check_out)
        offer = await self.offers.find_winning_offer(room.room_id, check_in, check_out)
        if offer is not None:
            price_per_night = Decimal(offer.offer_price)
        else:
            price_per_night = Decimal(room.price)

        return Bill(
            nights=nights,
            price_per_night=price_per_night,
            bill_amount=price_per_night * nights,
            offer_id=offer.offer_id if offer is not None else None,
        )
