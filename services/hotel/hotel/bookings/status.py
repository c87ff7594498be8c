import enum


class BookingStatus(str, enum.Enum):
    CONFIRMED = "confirmed"
    RESCHEDULED = "rescheduled"
    CHECKED_IN = "checked in"
    CHECKED_OUT = "checked out"
    CANCELLED = "cancelled"


# Targets reachable through a plain status update. RESCHEDULED is only
# entered through a reschedule; CHECKED_OUT and CANCELLED are terminal.
TRANSITIONS = {
    BookingStatus.CONFIRMED: {
        BookingStatus.CHECKED_IN,
        BookingStatus.CHECKED_OUT,
        BookingStatus.CANCELLED,
    },
    BookingStatus.RESCHEDULED: {
        BookingStatus.CHECKED_IN,
        BookingStatus.CHECKED_OUT,
        BookingStatus.CANCELLED,
    },
    BookingStatus.CHECKED_IN: {
        BookingStatus.CHECKED_OUT,
        BookingStatus.CANCELLED,
    },
    BookingStatus.CHECKED_OUT: set(),
    BookingStatus.CANCELLED: set(),
}


def can_transition(current: BookingStatus, target: BookingStatus) -> bool:
    return target in TRANSITIONS.get(current, set())
