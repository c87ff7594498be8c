import logging
import re
import time

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hotel.database.engine import get_async_session
from hotel.exceptions import UserNotFoundException
from hotel.users.models import User

logger = logging.getLogger(__name__)

WHATSAPP_MAX_LENGTH = 12


def normalize_whatsapp(number) -> str:
    """Keep digits only, at most 12 of them; ``"0"`` when nothing is left."""
    digits = re.sub(r"\D", "", str(number or ""))
    return digits[:WHATSAPP_MAX_LENGTH] or "0"


def guest_email(email: str | None) -> str:
    """Trimmed email, or a placeholder for walk-in guests who gave none."""
    email = (email or "").strip()
    if email:
        return email
    return f"guest-{int(time.time() * 1000)}@booking.local"


class UserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self):
        query = select(User).order_by(User.created_at.desc(), User.user_id.desc())
        result = await self.db.execute(query)
        return result.scalars().all()

    async def find_by_id(self, user_id: int) -> User:
        user = await self.db.get(User, user_id)
        if user is None:
            raise UserNotFoundException()
        return user

    async def create(self, name: str, email: str | None, whatsapp) -> User:
        """Add a guest to the session; the caller owns the transaction."""
        user = User(
            name=name.strip(),
            email=guest_email(email),
            whatsapp_number=normalize_whatsapp(whatsapp),
        )
        self.db.add(user)
        await self.db.flush()
        return user

    async def update(self, user_id: int, name: str, email: str | None, whatsapp) -> User:
        user = await self.find_by_id(user_id)
        user.name = name.strip()
        user.email = guest_email(email)
        user.whatsapp_number = normalize_whatsapp(whatsapp)
        await self.db.flush()
        return user


async def get_user_repository(db: AsyncSession = Depends(get_async_session)):
    return UserRepository(db)
