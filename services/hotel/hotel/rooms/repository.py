import logging

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hotel.database.engine import get_async_session
from hotel.exceptions import RoomNotFoundException
from hotel.rooms.models import Room
from hotel.rooms.schemas import SRoomCreate, SRoomUpdate

logger = logging.getLogger(__name__)


class RoomRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self):
        query = select(Room).order_by(Room.created_at.desc(), Room.room_id.desc())
        result = await self.db.execute(query)
        return result.scalars().all()

    async def get_room(self, room_id: int, lock: bool = False) -> Room:
        """Return the room or raise ``RoomNotFoundException``.

        With ``lock=True`` the row stays locked until the surrounding
        transaction ends, which serializes bookings against the same room.
        """
        query = select(Room).where(Room.room_id == room_id)
        if lock:
            query = query.with_for_update()
        result = await self.db.execute(query)
        room = result.scalar_one_or_none()
        if room is None:
            raise RoomNotFoundException()
        return room

    async def create(self, data: SRoomCreate) -> Room:
        room = Room(**data.model_dump())
        self.db.add(room)
        await self.db.commit()
        logger.info("Created room %s (%s)", room.room_id, room.room_name)
        return room

    async def update(self, room_id: int, data: SRoomUpdate) -> Room:
        room = await self.get_room(room_id)
        for field, value in data.model_dump(exclude_unset=True).items():
            if value is None and field in ("room_name", "room_type", "price"):
                continue
            setattr(room, field, value)
        await self.db.commit()
        return room


async def get_room_repository(db: AsyncSession = Depends(get_async_session)):
    return RoomRepository(db)
