from sqlalchemy import Column, Integer, String, Numeric, Text, DateTime, JSON

from hotel.database.engine import Base, BigIntPK, utcnow


class Room(Base):
    __tablename__ = "rooms"

    room_id = Column(BigIntPK, primary_key=True, autoincrement=True)
    room_name = Column(String(150), nullable=False)
    room_type = Column(String(80), nullable=False)
    room_number = Column(Integer, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    # Number of physical units sharing this configuration; NULL means one
    total_rooms = Column(Integer, nullable=True, default=1)
    guests = Column(Integer, nullable=True)
    room_size = Column(String(50), nullable=True)
    description = Column(Text, nullable=True)
    amenities = Column(JSON, default=list)
    image_urls = Column(JSON, default=list)

    created_at = Column(DateTime, default=utcnow, nullable=False)

    @property
    def inventory(self) -> int:
        return self.total_rooms if self.total_rooms is not None else 1
