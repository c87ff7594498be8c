from sqlalchemy import Column, String, Numeric, DateTime, ForeignKey, Index, CheckConstraint

from hotel.database.engine import Base, BigIntPK, utcnow


class Payment(Base):
    __tablename__ = "payments"

    payment_id = Column(BigIntPK, primary_key=True, autoincrement=True)
    booking_id = Column(BigIntPK, ForeignKey("bookings.booking_id"), nullable=False)
    user_id = Column(BigIntPK, ForeignKey("users.user_id"), nullable=False)

    # online / partial / offline at booking time, partial_online / full_online / offline afterwards
    method = Column(String(20), nullable=False)
    # pending, partial_paid, paid
    status = Column(String(20), default="pending", nullable=False)
    currency = Column(String(3), default="INR", nullable=False)
    bill_amount = Column(Numeric(12, 2), nullable=False)
    bill_paid_amount = Column(Numeric(12, 2), default=0, nullable=False)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    __table_args__ = (
        CheckConstraint("bill_paid_amount <= bill_amount", name="ck_payments_paid_within_bill"),
        Index("idx_payments_booking_created", booking_id, created_at),
    )
