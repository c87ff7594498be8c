from fastapi import APIRouter, Depends

from hotel.payments.repository import PaymentRepository, get_payment_repository
from hotel.payments.schemas import (
    PaymentBookingSchema,
    PaymentDetailSchema,
    PaymentResponseSchema,
    PaymentUpdateSchema,
    PaymentUserSchema,
)

router = APIRouter(prefix="/payments", tags=["Payments"])


@router.get("", response_model=list[PaymentDetailSchema])
async def get_payments(repo: PaymentRepository = Depends(get_payment_repository)):
    """All payments, newest first, with the guest and booking they belong to."""
    payments = []
    for payment, user, booking in await repo.find_all():
        item = PaymentDetailSchema.model_validate(payment)
        if user is not None:
            item.user = PaymentUserSchema.model_validate(user)
        if booking is not None:
            item.booking = PaymentBookingSchema.model_validate(booking)
        payments.append(item)
    return payments


@router.patch("/{payment_id}", response_model=PaymentResponseSchema)
async def update_payment(
    payment_id: int,
    data: PaymentUpdateSchema,
    repo: PaymentRepository = Depends(get_payment_repository)
):
    return await repo.apply_update(payment_id, data)
