from sqlalchemy import Column, String, DateTime

from hotel.database.engine import Base, BigIntPK, utcnow


class User(Base):
    """Guest attached to one or more bookings."""

    __tablename__ = "users"

    user_id = Column(BigIntPK, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    whatsapp_number = Column(String(12), nullable=False)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
