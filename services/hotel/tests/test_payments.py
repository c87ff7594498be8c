from datetime import datetime
from decimal import Decimal

import pytest

from hotel.exceptions import PaymentAmountExceededException, PaymentNotFoundException
from hotel.payments.models import Payment
from hotel.payments.repository import PaymentRepository
from hotel.payments.schemas import PaymentUpdateSchema


@pytest.fixture
async def payment(session, make_room, make_booking):
    room = await make_room(price="500")
    booking = await make_booking(room, datetime(2024, 6, 1), datetime(2024, 6, 3), bill_amount="1000")
    repo = PaymentRepository(session)
    return await repo.find_latest_by_booking(booking.booking_id)


class TestApplyUpdate:
    async def test_paid_amount_accumulates(self, session, payment):
        repo = PaymentRepository(session)

        await repo.apply_update(payment.payment_id, PaymentUpdateSchema(bill_paid_amount=Decimal("400")))
        updated = await repo.apply_update(
            payment.payment_id,
            PaymentUpdateSchema(bill_paid_amount=Decimal("600"), status="paid", method="full_online"),
        )
        assert updated.bill_paid_amount == Decimal("1000")
        assert updated.status == "paid"
        assert updated.method == "full_online"

    async def test_overpayment_is_rejected_before_writing(self, session, payment):
        repo = PaymentRepository(session)
        payment_id = payment.payment_id
        await repo.apply_update(payment_id, PaymentUpdateSchema(bill_paid_amount=Decimal("900")))

        with pytest.raises(PaymentAmountExceededException):
            await repo.apply_update(
                payment_id, PaymentUpdateSchema(bill_paid_amount=Decimal("100.01"), status="paid")
            )

        reloaded = await session.get(Payment, payment_id, populate_existing=True)
        assert reloaded.bill_paid_amount == Decimal("900")
        assert reloaded.status == "pending"

    async def test_status_only_update_keeps_amounts(self, session, payment):
        updated = await PaymentRepository(session).apply_update(
            payment.payment_id, PaymentUpdateSchema(status="partial_paid")
        )
        assert updated.status == "partial_paid"
        assert updated.bill_paid_amount == Decimal("0")

    async def test_unknown_payment(self, session):
        with pytest.raises(PaymentNotFoundException):
            await PaymentRepository(session).apply_update(5, PaymentUpdateSchema(status="paid"))


def test_negative_amounts_are_invalid():
    with pytest.raises(ValueError):
        PaymentUpdateSchema(bill_paid_amount=Decimal("-1"))


def test_unknown_method_is_invalid():
    with pytest.raises(ValueError):
        PaymentUpdateSchema(method="cash")
