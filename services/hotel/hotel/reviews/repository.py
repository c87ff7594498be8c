from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hotel.database.engine import get_async_session
from hotel.reviews.models import Review
from hotel.rooms.models import Room
from hotel.users.models import User


class ReviewRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self):
        """Reviews, newest first, each with its guest and room (either may be missing)."""
        query = (
            select(Review, User, Room)
            .join(User, User.user_id == Review.user_id, isouter=True)
            .join(Room, Room.room_id == Review.room_id, isouter=True)
            .order_by(Review.created_at.desc(), Review.review_id.desc())
        )
        result = await self.db.execute(query)
        return result.all()


async def get_review_repository(db: AsyncSession = Depends(get_async_session)):
    return ReviewRepository(db)
