from enum import StrEnum


class SeatStatus(StrEnum):
    AVAILABLE = 'available'
    BOOKED = 'booked'
