import logging
from decimal import Decimal

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hotel.bookings.models import Booking
from hotel.database.engine import get_async_session
from hotel.exceptions import PaymentNotFoundException, PaymentAmountExceededException
from hotel.payments.models import Payment
from hotel.payments.schemas import PaymentUpdateSchema
from hotel.users.models import User

logger = logging.getLogger(__name__)


class PaymentRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, booking_id: int, user_id: int, method: str, bill_amount: Decimal,
                     currency: str) -> Payment:
        payment = Payment(
            booking_id=booking_id,
            user_id=user_id,
            method=method,
            status="pending",
            currency=currency,
            bill_amount=bill_amount,
            bill_paid_amount=Decimal("0"),
        )
        self.db.add(payment)
        await self.db.flush()
        return payment

    async def find_latest_by_booking(self, booking_id: int, lock: bool = False) -> Payment | None:
        query = (
            select(Payment)
            .where(Payment.booking_id == booking_id)
            .order_by(Payment.created_at.desc(), Payment.payment_id.desc())
            .limit(1)
        )
        if lock:
            query = query.with_for_update()
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def update(self, payment: Payment, **fields) -> Payment:
        for field, value in fields.items():
            setattr(payment, field, value)
        await self.db.flush()
        return payment

    async def find_all(self):
        query = (
            select(Payment, User, Booking)
            .join(User, User.user_id == Payment.user_id, isouter=True)
            .join(Booking, Booking.booking_id == Payment.booking_id, isouter=True)
            .order_by(Payment.created_at.desc(), Payment.payment_id.desc())
        )
        result = await self.db.execute(query)
        return result.all()

    async def get_payment(self, payment_id: int, lock: bool = False) -> Payment:
        query = select(Payment).where(Payment.payment_id == payment_id)
        if lock:
            query = query.with_for_update()
        result = await self.db.execute(query)
        payment = result.scalar_one_or_none()
        if payment is None:
            raise PaymentNotFoundException()
        return payment

    async def apply_update(self, payment_id: int, data: PaymentUpdateSchema) -> Payment:
        """Update method/status and add ``bill_paid_amount`` to what was already paid.

        The cumulative paid amount never exceeds ``bill_amount``: an update
        that would overshoot is rejected before anything is written.
        """
        payment = await self.get_payment(payment_id, lock=True)

        changes = {}
        if data.method is not None:
            changes["method"] = data.method
        if data.status is not None:
            changes["status"] = data.status
        if data.bill_paid_amount is not None:
            new_paid = Decimal(payment.bill_paid_amount or 0) + data.bill_paid_amount
            if new_paid > Decimal(payment.bill_amount or 0):
                logger.warning(
                    "Rejected payment %s update: paid %s would exceed bill %s",
                    payment_id, new_paid, payment.bill_amount,
                )
                raise PaymentAmountExceededException()
            changes["bill_paid_amount"] = new_paid

        await self.update(payment, **changes)
        await self.db.commit()
        logger.info("Updated payment %s: %s", payment_id, sorted(changes))
        return payment


async def get_payment_repository(db: AsyncSession = Depends(get_async_session)):
    return PaymentRepository(db)
