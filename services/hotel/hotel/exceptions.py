from fastapi import HTTPException, status


class HotelException(HTTPException):
    status_code = 500
    detail = ""

    def __init__(self, detail: str | None = None):
        super().__init__(status_code=self.status_code, detail=detail or self.detail)


class InvalidRangeException(HotelException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Check-out must be after check-in"


class NotFoundException(HotelException):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Not found"


class RoomNotFoundException(NotFoundException):
    detail = "Room not found"


class BookingNotFoundException(NotFoundException):
    detail = "Booking not found"


class UserNotFoundException(NotFoundException):
    detail = "User not found"


class OfferNotFoundException(NotFoundException):
    detail = "Offer not found"


class PaymentNotFoundException(NotFoundException):
    detail = "Payment not found"


class CapacityExceededException(HotelException):
    status_code = status.HTTP_409_CONFLICT
    detail = (
        "This room has no availability for the selected dates. "
        "Please choose different dates or another room."
    )


class InvalidStateException(HotelException):
    status_code = status.HTTP_409_CONFLICT
    detail = "Operation is not permitted in the current booking status"


class PaymentAmountExceededException(HotelException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Paid amount cannot be greater than total amount"
