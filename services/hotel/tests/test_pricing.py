from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from hotel.bookings.pricing import PricingCalculator, count_nights
from hotel.exceptions import RoomNotFoundException
from hotel.rooms.models import Room


def test_count_nights_rounds_partial_days_up():
    check_in = datetime(2024, 3, 1, 14, 0)
    assert count_nights(check_in, datetime(2024, 3, 2, 11, 0)) == 1
    assert count_nights(check_in, datetime(2024, 3, 2, 14, 0)) == 1
    assert count_nights(check_in, datetime(2024, 3, 3, 15, 0)) == 3
    assert count_nights(check_in, check_in + timedelta(minutes=5)) == 1


def test_unset_inventory_counts_as_one_unit():
    assert Room(total_rooms=None).inventory == 1
    assert Room(total_rooms=4).inventory == 4


class TestPricingCalculator:
    async def test_base_price_without_offers(self, session, make_room):
        room = await make_room(price="100.00")
        bill = await PricingCalculator(session).compute_bill(
            room.room_id, datetime(2024, 1, 1), datetime(2024, 1, 3)
        )
        assert bill.nights == 2
        assert bill.price_per_night == Decimal("100")
        assert bill.bill_amount == Decimal("200")
        assert bill.offer_id is None

    async def test_doubling_the_stay_doubles_the_bill(self, session, make_room):
        room = await make_room(price="120.50")
        pricing = PricingCalculator(session)

        short = await pricing.compute_bill(room.room_id, datetime(2024, 2, 1), datetime(2024, 2, 4))
        long = await pricing.compute_bill(room.room_id, datetime(2024, 2, 1), datetime(2024, 2, 7))
        assert long.bill_amount == short.bill_amount * 2

    async def test_offer_covering_the_stay(self, session, make_room, make_offer):
        room = await make_room(price="1000")
        offer = await make_offer(
            room, offer_price="800",
            start_date=datetime(2024, 5, 25), end_date=datetime(2024, 6, 10),
        )
        bill = await PricingCalculator(session).compute_bill(
            room.room_id, datetime(2024, 6, 1), datetime(2024, 6, 3)
        )
        assert bill.nights == 2
        assert bill.price_per_night == Decimal("800")
        assert bill.bill_amount == Decimal("1600")
        assert bill.offer_id == offer.offer_id

    async def test_window_bounds_are_inclusive(self, session, make_room, make_offer):
        room = await make_room(price="1000")
        await make_offer(room, offer_price="800", start_date=datetime(2024, 6, 1), end_date=datetime(2024, 6, 3))
        bill = await PricingCalculator(session).compute_bill(
            room.room_id, datetime(2024, 6, 1), datetime(2024, 6, 3)
        )
        assert bill.bill_amount == Decimal("1600")

    async def test_offer_partially_covering_the_stay_is_ignored(self, session, make_room, make_offer):
        room = await make_room(price="1000")
        await make_offer(room, offer_price="800", start_date=datetime(2024, 6, 2), end_date=datetime(2024, 6, 10))
        bill = await PricingCalculator(session).compute_bill(
            room.room_id, datetime(2024, 6, 1), datetime(2024, 6, 3)
        )
        assert bill.bill_amount == Decimal("2000")

    @pytest.mark.parametrize("start_date, end_date", [
        (None, datetime(2020, 1, 1)),
        (datetime(2030, 1, 1), None),
        (None, None),
    ])
    async def test_open_ended_offers_always_apply(self, session, make_room, make_offer, start_date, end_date):
        room = await make_room(price="1000")
        await make_offer(room, offer_price="750", start_date=start_date, end_date=end_date)
        bill = await PricingCalculator(session).compute_bill(
            room.room_id, datetime(2024, 6, 1), datetime(2024, 6, 2)
        )
        assert bill.price_per_night == Decimal("750")

    async def test_inactive_or_unpriced_offers_are_ignored(self, session, make_room, make_offer):
        room = await make_room(price="1000")
        await make_offer(room, offer_price="500", is_active=False)
        await make_offer(room, offer_price=None)
        bill = await PricingCalculator(session).compute_bill(
            room.room_id, datetime(2024, 6, 1), datetime(2024, 6, 2)
        )
        assert bill.price_per_night == Decimal("1000")
        assert bill.offer_id is None

    async def test_most_recent_offer_wins(self, session, make_room, make_offer):
        room = await make_room(price="1000")
        await make_offer(room, offer_price="900", created_at=datetime(2024, 1, 1))
        newest = await make_offer(room, offer_price="700", created_at=datetime(2024, 3, 1))
        await make_offer(room, offer_price="800", created_at=datetime(2024, 2, 1))

        bill = await PricingCalculator(session).compute_bill(
            room.room_id, datetime(2024, 6, 1), datetime(2024, 6, 2)
        )
        assert bill.offer_id == newest.offer_id
        assert bill.price_per_night == Decimal("700")

    async def test_offers_of_other_rooms_do_not_leak(self, session, make_room, make_offer):
        room = await make_room(price="1000")
        other = await make_room(room_name="Suite", price="3000")
        await make_offer(other, offer_price="10")
        bill = await PricingCalculator(session).compute_bill(
            room.room_id, datetime(2024, 6, 1), datetime(2024, 6, 2)
        )
        assert bill.price_per_night == Decimal("1000")

    async def test_unknown_room(self, session):
        with pytest.raises(RoomNotFoundException):
            await PricingCalculator(session).compute_bill(42, datetime(2024, 6, 1), datetime(2024, 6, 2))
