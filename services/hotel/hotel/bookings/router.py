from fastapi import APIRouter, Depends

from hotel.bookings.schemas import (
    AvailabilityRequestSchema,
    AvailabilityResponseSchema,
    BookingCreateSchema,
    BookingDetailSchema,
    BookingPaymentSchema,
    BookingRescheduleSchema,
    BookingResponseSchema,
    BookingRoomSchema,
    BookingStatusSchema,
    BookingUserSchema,
)
from hotel.bookings.service import BookingService, GuestInfo, get_booking_service

router = APIRouter(prefix="/bookings", tags=["Bookings"])


def _detail(booking, room=None, user=None, payment=None) -> BookingDetailSchema:
    detail = BookingDetailSchema.model_validate(booking)
    if room is not None:
        detail.room = BookingRoomSchema.model_validate(room)
    if user is not None:
        detail.user = BookingUserSchema.model_validate(user)
    if payment is not None:
        detail.payment = BookingPaymentSchema.model_validate(payment)
    return detail


@router.post("/check-availability", response_model=AvailabilityResponseSchema)
async def check_availability(
    data: AvailabilityRequestSchema,
    service: BookingService = Depends(get_booking_service)
):
    """Reports a full or unknown room as ``available: false`` with a reason."""
    result = await service.check_room_availability(data.room_id, data.check_in, data.check_out)
    return {"available": result.available, "message": result.message}


@router.get("/checkins", response_model=list[BookingDetailSchema])
async def get_today_check_ins(service: BookingService = Depends(get_booking_service)):
    return [_detail(*row) for row in await service.today_check_ins()]


@router.get("/checkouts", response_model=list[BookingDetailSchema])
async def get_today_check_outs(service: BookingService = Depends(get_booking_service)):
    """Today's departures and overstays that were never checked out."""
    return [_detail(*row) for row in await service.today_check_outs()]


@router.get("/upcoming", response_model=list[BookingDetailSchema])
async def get_upcoming(service: BookingService = Depends(get_booking_service)):
    return [_detail(*row) for row in await service.upcoming()]


@router.get("/{booking_id}", response_model=BookingDetailSchema)
async def get_booking(booking_id: int, service: BookingService = Depends(get_booking_service)):
    return _detail(**await service.get_booking(booking_id))


@router.post("", status_code=201, response_model=BookingDetailSchema)
async def create_booking(
    data: BookingCreateSchema,
    service: BookingService = Depends(get_booking_service)
):
    guest = None
    if data.user_id is None:
        guest = GuestInfo(name=data.guest_name, email=data.guest_email, whatsapp=data.whatsapp_number)

    booking = await service.create_booking(
        room_id=data.room_id,
        check_in=data.check_in,
        check_out=data.check_out,
        adults=data.adults,
        children=data.children,
        payment_method=data.payment_method,
        guest=guest,
        user_id=data.user_id,
    )
    return _detail(**await service.get_booking(booking.booking_id))


@router.patch("/{booking_id}/reschedule", response_model=BookingDetailSchema)
async def reschedule_booking(
    booking_id: int,
    data: BookingRescheduleSchema,
    service: BookingService = Depends(get_booking_service)
):
    booking = await service.reschedule_booking(
        booking_id=booking_id,
        room_id=data.room_id,
        check_in=data.check_in,
        check_out=data.check_out,
        guest=GuestInfo(name=data.guest_name, email=data.guest_email, whatsapp=data.whatsapp_number),
        adults=data.adults,
        children=data.children,
        payment_method=data.payment_method,
    )
    return _detail(**await service.get_booking(booking.booking_id))


@router.patch("/{booking_id}/status", response_model=BookingResponseSchema)
async def update_booking_status(
    booking_id: int,
    data: BookingStatusSchema,
    service: BookingService = Depends(get_booking_service)
):
    return await service.update_booking_status(booking_id, data.status)
