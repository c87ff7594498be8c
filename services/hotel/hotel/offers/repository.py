import logging
from datetime import datetime

from fastapi import Depends
from sqlalchemy import select, and_, or_
from sqlalchemy.ext.asyncio import AsyncSession

from hotel.database.engine import get_async_session
from hotel.exceptions import InvalidRangeException, OfferNotFoundException
from hotel.offers.models import Offer
from hotel.offers.schemas import SOfferCreate, SOfferUpdate
from hotel.rooms.models import Room
from hotel.rooms.repository import RoomRepository

logger = logging.getLogger(__name__)


class OfferRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_winning_offer(self, room_id: int, check_in: datetime, check_out: datetime) -> Offer | None:
        """Return the offer that prices a stay in ``room_id`` for the range, if any.

        Candidates are active offers with an ``offer_price`` whose window
        covers the whole stay, or whose window is open on either side. The
        most recently created candidate wins.
        """
        query = (
            select(Offer)
            .where(
                Offer.room_id == room_id,
                Offer.is_active.is_(True),
                Offer.offer_price.is_not(None),
                or_(
                    and_(
                        Offer.start_date.is_not(None),
                        Offer.start_date <= check_in,
                        Offer.end_date.is_not(None),
                        Offer.end_date >= check_out,
                    ),
                    Offer.start_date.is_(None),
                    Offer.end_date.is_(None),
                ),
            )
            .order_by(Offer.created_at.desc(), Offer.offer_id.desc())
            .limit(1)
        )
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def find_all(self):
        query = (
            select(Offer, Room)
            .join(Room, Room.room_id == Offer.room_id, isouter=True)
            .order_by(Offer.created_at.desc(), Offer.offer_id.desc())
        )
        result = await self.db.execute(query)
        return result.all()

    async def find_by_id(self, offer_id: int):
        query = (
            select(Offer, Room)
            .join(Room, Room.room_id == Offer.room_id, isouter=True)
            .where(Offer.offer_id == offer_id)
        )
        result = await self.db.execute(query)
        row = result.one_or_none()
        if row is None:
            raise OfferNotFoundException()
        return row

    async def _get(self, offer_id: int) -> Offer:
        offer = await self.db.get(Offer, offer_id)
        if offer is None:
            raise OfferNotFoundException()
        return offer

    async def create(self, data: SOfferCreate) -> Offer:
        # Raises RoomNotFoundException for unknown rooms
        room = await RoomRepository(self.db).get_room(data.room_id)

        offer = Offer(**data.model_dump())
        offer.room_id = room.room_id
        self.db.add(offer)
        await self.db.commit()
        logger.info("Created offer %s for room %s", offer.offer_id, offer.room_id)
        return offer

    async def update(self, offer_id: int, data: SOfferUpdate) -> Offer:
        offer = await self._get(offer_id)
        changes = data.model_dump(exclude_unset=True)
        # offer_price, title and the window bounds may be cleared; the rest may not
        for field in ("room_id", "discount_percent", "is_active"):
            if field in changes and changes[field] is None:
                del changes[field]
        if "room_id" in changes:
            await RoomRepository(self.db).get_room(changes["room_id"])

        start_date = changes.get("start_date", offer.start_date)
        end_date = changes.get("end_date", offer.end_date)
        if start_date and end_date and end_date < start_date:
            raise InvalidRangeException("Offer end_date must not be before start_date")

        for field, value in changes.items():
            setattr(offer, field, value)
        await self.db.commit()
        return offer

    async def delete(self, offer_id: int) -> Offer:
        offer = await self._get(offer_id)
        await self.db.delete(offer)
        await self.db.commit()
        logger.info("Deleted offer %s", offer_id)
        return offer


async def get_offer_repository(db: AsyncSession = Depends(get_async_session)):
    return OfferRepository(db)
