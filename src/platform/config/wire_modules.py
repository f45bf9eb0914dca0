"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.reservation.app.command import (
    book_seat_use_case,
    cancel_booking_use_case,
    join_waitlist_use_case,
    register_passenger_use_case,
    register_trip_use_case,
)
from src.service.reservation.app.query import (
    get_seat_availability_use_case,
    list_bookings_use_case,
    list_passengers_use_case,
    list_waitlists_use_case,
    search_trips_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    register_passenger_use_case,
    register_trip_use_case,
    book_seat_use_case,
    cancel_booking_use_case,
    join_waitlist_use_case,
    list_passengers_use_case,
    search_trips_use_case,
    get_seat_availability_use_case,
    list_bookings_use_case,
    list_waitlists_use_case,
]
