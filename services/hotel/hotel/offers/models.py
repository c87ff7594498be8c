from sqlalchemy import Column, String, Numeric, Boolean, DateTime, ForeignKey, Index

from hotel.database.engine import Base, BigIntPK, utcnow


class Offer(Base):
    __tablename__ = "room_offers"

    offer_id = Column(BigIntPK, primary_key=True, autoincrement=True)
    room_id = Column(BigIntPK, ForeignKey("rooms.room_id", ondelete="CASCADE"), nullable=False)
    title = Column(String(200), nullable=True)
    discount_percent = Column(Numeric(5, 2), nullable=False)
    offer_price = Column(Numeric(10, 2), nullable=True)

    # Either bound may be missing; a missing bound leaves that side open
    start_date = Column(DateTime, nullable=True)
    end_date = Column(DateTime, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    __table_args__ = (
        Index("idx_offers_room_active", room_id, is_active),
    )
