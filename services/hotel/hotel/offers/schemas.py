from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator

from hotel.database.engine import as_datetime
from hotel.exceptions import InvalidRangeException
from hotel.schemas import BigIntId

# Window bounds are compared against stays, which are stored as naive UTC
UtcDatetime = Annotated[datetime, AfterValidator(as_datetime)]


class SOfferRoom(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    room_id: BigIntId
    room_name: str
    room_type: str
    price: Decimal


class SOffers(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    offer_id: BigIntId
    room_id: BigIntId
    title: str | None = None
    discount_percent: Decimal
    offer_price: Decimal | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime


class SOfferWithRoom(SOffers):
    room: SOfferRoom | None = None


class SOfferCreate(BaseModel):
    title: str | None = None
    room_id: int = Field(gt=0)
    discount_percent: Decimal = Field(gt=0, le=100)
    offer_price: Decimal | None = Field(default=None, ge=0)
    start_date: UtcDatetime | None = None
    end_date: UtcDatetime | None = None
    is_active: bool = True

    @model_validator(mode="after")
    def check_window(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise InvalidRangeException("Offer end_date must not be before start_date")
        return self


class SOfferUpdate(BaseModel):
    title: str | None = None
    room_id: int | None = Field(default=None, gt=0)
    discount_percent: Decimal | None = Field(default=None, gt=0, le=100)
    offer_price: Decimal | None = Field(default=None, ge=0)
    start_date: UtcDatetime | None = None
    end_date: UtcDatetime | None = None
    is_active: bool | None = None
