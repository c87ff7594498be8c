import asyncio
import logging
import selectors
import sys

from hotel.config import settings
from hotel.database.engine import Database
# Register every table on Base.metadata
from hotel.bookings.models import Booking  # noqa: F401
from hotel.offers.models import Offer  # noqa: F401
from hotel.payments.models import Payment  # noqa: F401
from hotel.reviews.models import Review  # noqa: F401
from hotel.rooms.models import Room  # noqa: F401
from hotel.users.models import User  # noqa: F401

logger = logging.getLogger("create_tables")


async def main():
    database = Database(settings.database_url, echo=settings.db_echo)
    logger.info("Connecting to the database...")
    try:
        await database.create_all()
    finally:
        await database.dispose()
    logger.info("Tables created")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    if sys.platform == 'win32':
        # psycopg async needs a selector loop on Windows
        loop_factory = lambda: asyncio.SelectorEventLoop(selectors.SelectSelector())
        asyncio.run(main(), loop_factory=loop_factory)
    else:
        asyncio.run(main())
