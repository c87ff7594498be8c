from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from hotel.schemas import BigIntId


class SRooms(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    room_id: BigIntId
    room_name: str
    room_type: str
    room_number: int | None = None
    price: Decimal
    total_rooms: int | None = None
    guests: int | None = None
    room_size: str | None = None
    description: str | None = None
    amenities: list[str] = []
    image_urls: list[str] = []
    created_at: datetime


class SRoomCreate(BaseModel):
    room_name: str = Field(min_length=1)
    room_type: str = Field(min_length=1)
    room_number: int | None = None
    price: Decimal = Field(ge=0)
    total_rooms: int = Field(default=1, ge=1)
    guests: int | None = Field(default=None, ge=1)
    room_size: str | None = None
    description: str | None = None
    amenities: list[str] = []
    # URLs of images already uploaded to the blob store
    image_urls: list[str] = []


class SRoomUpdate(BaseModel):
    """Editable room fields. ``room_number`` and ``total_rooms`` are fixed at creation."""

    room_name: str | None = Field(default=None, min_length=1)
    room_type: str | None = Field(default=None, min_length=1)
    price: Decimal | None = Field(default=None, ge=0)
    guests: int | None = Field(default=None, ge=1)
    room_size: str | None = None
    description: str | None = None
    amenities: list[str] | None = None
    image_urls: list[str] | None = None
