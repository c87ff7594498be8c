from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from hotel.schemas import BigIntId

PaymentMethod = Literal["partial_online", "full_online", "offline"]
PaymentStatus = Literal["partial_paid", "paid", "pending"]


class PaymentResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    payment_id: BigIntId
    booking_id: BigIntId
    user_id: BigIntId
    method: str
    status: str
    currency: str
    bill_amount: Decimal
    bill_paid_amount: Decimal
    created_at: datetime
    updated_at: datetime


class PaymentUserSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: BigIntId
    name: str
    email: str


class PaymentBookingSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    booking_id: BigIntId
    check_in: datetime
    check_out: datetime
    status: str


class PaymentDetailSchema(PaymentResponseSchema):
    user: PaymentUserSchema | None = None
    booking: PaymentBookingSchema | None = None


class PaymentUpdateSchema(BaseModel):
    method: PaymentMethod | None = None
    status: PaymentStatus | None = None
    # Amount received now; added to what was already paid
    bill_paid_amount: Decimal | None = Field(default=None, ge=0)
