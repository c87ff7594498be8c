from sqlalchemy import Column, String, DateTime, Integer, ForeignKey, Index, CheckConstraint

from hotel.bookings.status import BookingStatus
from hotel.database.engine import Base, BigIntPK, utcnow


class Booking(Base):
    __tablename__ = "bookings"

    booking_id = Column(BigIntPK, primary_key=True, autoincrement=True)

    room_id = Column(BigIntPK, ForeignKey("rooms.room_id"), nullable=False)
    user_id = Column(BigIntPK, ForeignKey("users.user_id"), nullable=False, index=True)

    # The stay occupies [check_in, check_out)
    check_in = Column(DateTime, nullable=False)
    check_out = Column(DateTime, nullable=False)

    # confirmed, rescheduled, checked in, checked out, cancelled
    status = Column(String(20), default=BookingStatus.CONFIRMED.value, nullable=False)

    adults = Column(Integer, nullable=False, default=1)
    children = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    __table_args__ = (
        CheckConstraint("check_out > check_in", name="ck_bookings_check_out_after_check_in"),
        # Overlap counting filters on room, status and both dates
        Index("idx_bookings_room_dates", room_id, status, check_in, check_out),
    )
