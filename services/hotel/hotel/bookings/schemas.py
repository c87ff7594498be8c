from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from hotel.bookings.status import BookingStatus
from hotel.schemas import BigIntId

BookingPaymentMethod = Literal["online", "partial", "offline"]


class AvailabilityRequestSchema(BaseModel):
    room_id: int = Field(gt=0)
    check_in: datetime
    check_out: datetime


class AvailabilityResponseSchema(BaseModel):
    available: bool
    message: str | None = None


class BookingCreateSchema(BaseModel):
    room_id: int = Field(gt=0)
    check_in: datetime
    check_out: datetime
    # Book for a known guest instead of registering a new one
    user_id: int | None = Field(default=None, gt=0)
    guest_name: str | None = None
    guest_email: str | None = None
    whatsapp_number: str
    adults: int = Field(ge=1)
    children: int = Field(default=0, ge=0)
    payment_method: BookingPaymentMethod

    @field_validator("user_id", mode="before")
    @classmethod
    def blank_user_id_is_none(cls, v):
        if v == "":
            return None
        return v

    @field_validator("whatsapp_number", mode="before")
    @classmethod
    def whatsapp_required(cls, v):
        if v is None or str(v).strip() == "":
            raise ValueError("whatsapp_number is required")
        return str(v).strip()

    @model_validator(mode="after")
    def guest_or_user(self):
        if self.user_id is None and not (self.guest_name or "").strip():
            raise ValueError("guest_name is required when user_id is not given")
        return self


class BookingRescheduleSchema(BaseModel):
    room_id: int = Field(gt=0)
    check_in: datetime
    check_out: datetime
    guest_name: str
    guest_email: str | None = None
    whatsapp_number: str
    adults: int = Field(ge=1)
    children: int = Field(default=0, ge=0)
    payment_method: BookingPaymentMethod

    @field_validator("guest_name")
    @classmethod
    def guest_name_length(cls, v):
        if len(v.strip()) < 2:
            raise ValueError("guest_name is required (at least 2 characters)")
        return v.strip()

    @field_validator("whatsapp_number", mode="before")
    @classmethod
    def whatsapp_required(cls, v):
        if v is None or str(v).strip() == "":
            raise ValueError("whatsapp_number is required")
        return str(v).strip()


class BookingStatusSchema(BaseModel):
    status: BookingStatus


class BookingResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    booking_id: BigIntId
    room_id: BigIntId
    user_id: BigIntId
    check_in: datetime
    check_out: datetime
    status: str
    adults: int
    children: int
    created_at: datetime
    updated_at: datetime


class BookingRoomSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    room_id: BigIntId
    room_name: str
    room_type: str
    room_number: int | None = None
    price: Decimal


class BookingUserSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: BigIntId
    name: str
    email: str
    whatsapp_number: str


class BookingPaymentSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    payment_id: BigIntId
    method: str
    status: str
    currency: str
    bill_amount: Decimal
    bill_paid_amount: Decimal


class BookingDetailSchema(BookingResponseSchema):
    room: BookingRoomSchema | None = None
    user: BookingUserSchema | None = None
    payment: BookingPaymentSchema | None = None
