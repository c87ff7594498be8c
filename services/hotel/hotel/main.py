import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hotel.bookings.router import router as booking_router
from hotel.config import settings
from hotel.database.engine import Database
from hotel.offers.router import router as offer_router
from hotel.payments.router import router as payment_router
from hotel.reviews.router import router as review_router
from hotel.rooms.router import router as room_router
from hotel.users.router import router as user_router

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Tests may install their own database before startup
    if getattr(app.state, "database", None) is None:
        app.state.database = Database(
            settings.database_url,
            echo=settings.db_echo,
            pool_size=settings.db_pool_size,
        )
    logger.info("Hotel service started")
    yield
    await app.state.database.dispose()
    logger.info("Hotel service stopped")


def create_app(database: Database | None = None) -> FastAPI:
    app = FastAPI(
        title="Hotel Service",
        description="Rooms, offers, guests, payments and the booking lifecycle.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": "hotel"}

    for router in (booking_router, room_router, offer_router, user_router, payment_router,
                   review_router):
        app.include_router(router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("hotel.main:app", reload=True)
