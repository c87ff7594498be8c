from datetime import date, datetime

import pytest

from hotel.bookings.availability import AvailabilityCalculator, as_datetime, stay_range
from hotel.bookings.status import BookingStatus
from hotel.exceptions import CapacityExceededException, InvalidRangeException, RoomNotFoundException


def d(day, month=1, year=2024):
    return datetime(year, month, day)


class TestStayRange:
    def test_dates_become_midnight(self):
        assert as_datetime(date(2024, 1, 2)) == datetime(2024, 1, 2, 0, 0)

    def test_check_out_must_follow_check_in(self):
        with pytest.raises(InvalidRangeException):
            stay_range(d(3), d(3))
        with pytest.raises(InvalidRangeException):
            stay_range(d(4), d(3))


class TestAvailabilityCalculator:
    async def test_single_unit_room_scenario(self, session, make_room, make_booking):
        room = await make_room(price="100", total_rooms=1)
        await make_booking(room, d(1), d(3))
        calc = AvailabilityCalculator(session)

        assert await calc.is_available(room.room_id, d(2), d(4)) is False
        assert await calc.is_available(room.room_id, d(3), d(5)) is True

    async def test_back_to_back_stays_do_not_overlap(self, session, make_room, make_booking):
        room = await make_room(total_rooms=1)
        await make_booking(room, d(1), d(5))
        calc = AvailabilityCalculator(session)

        assert await calc.is_available(room.room_id, d(5), d(8)) is True
        # and the other way round
        assert await calc.is_available(room.room_id, date(2023, 12, 28), d(1)) is True

    async def test_capacity_counts_every_unit(self, session, make_room, make_booking):
        room = await make_room(total_rooms=2)
        calc = AvailabilityCalculator(session)

        await make_booking(room, d(10), d(12))
        assert await calc.is_available(room.room_id, d(11), d(13)) is True

        await make_booking(room, d(11), d(14))
        with pytest.raises(CapacityExceededException):
            await calc.ensure_available(room.room_id, d(11), d(12))

    async def test_cancelled_bookings_free_their_unit(self, session, make_room, make_booking):
        room = await make_room(total_rooms=1)
        await make_booking(room, d(1), d(3), status=BookingStatus.CANCELLED)
        calc = AvailabilityCalculator(session)

        assert await calc.is_available(room.room_id, d(1), d(3)) is True

    async def test_other_statuses_hold_their_unit(self, session, make_room, make_booking):
        room = await make_room(total_rooms=1)
        await make_booking(room, d(1), d(3), status=BookingStatus.CHECKED_IN)
        calc = AvailabilityCalculator(session)

        assert await calc.is_available(room.room_id, d(2), d(3)) is False

    async def test_excluded_booking_does_not_block_itself(self, session, make_room, make_booking):
        room = await make_room(total_rooms=1)
        booking = await make_booking(room, d(1), d(3))
        calc = AvailabilityCalculator(session)

        assert await calc.is_available(room.room_id, d(1), d(3)) is False
        assert await calc.is_available(room.room_id, d(1), d(3), exclude_booking_id=booking.booking_id) is True

    async def test_missing_inventory_means_one_unit(self, session, make_room, make_booking):
        room = await make_room(total_rooms=None)
        calc = AvailabilityCalculator(session)

        assert await calc.is_available(room.room_id, d(1), d(3)) is True
        await make_booking(room, d(1), d(3))
        assert await calc.is_available(room.room_id, d(2), d(4)) is False

    async def test_bookings_of_other_rooms_are_ignored(self, session, make_room, make_booking):
        room = await make_room(total_rooms=1)
        other = await make_room(room_name="Suite", total_rooms=1)
        await make_booking(other, d(1), d(3))
        calc = AvailabilityCalculator(session)

        assert await calc.is_available(room.room_id, d(1), d(3)) is True

    async def test_unknown_room(self, session):
        calc = AvailabilityCalculator(session)
        with pytest.raises(RoomNotFoundException):
            await calc.is_available(999, d(1), d(3))

    async def test_invalid_range_is_checked_first(self, session):
        calc = AvailabilityCalculator(session)
        with pytest.raises(InvalidRangeException):
            await calc.is_available(999, d(3), d(1))
