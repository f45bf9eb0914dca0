from typing import List

import attrs

from src.service.reservation.domain.aggregate.trip_aggregate import Trip
from src.service.reservation.domain.entity.booking_entity import Booking
from src.service.reservation.domain.entity.passenger_entity import Passenger


@attrs.frozen
class TripSummary:
    trip_id: str
    origin: str
    destination: str
    departure_time: str
    seat_count: int
    fare: float
    available_count: int
    booked_count: int
    waitlist_length: int

    @classmethod
    def from_trip(cls, *, trip: Trip) -> 'TripSummary':
        return cls(
            trip_id=trip.trip_id,
            origin=trip.origin,
            destination=trip.destination,
            departure_time=trip.departure_time,
            seat_count=trip.seat_count,
            fare=trip.fare,
            available_count=trip.available_count,
            booked_count=trip.booked_count,
            waitlist_length=trip.waitlist.size(),
        )


@attrs.frozen
class SeatAvailability:
    trip_id: str
    available_seats: List[int]
    available_count: int
    booked_count: int


@attrs.frozen
class TripBookings:
    trip_id: str
    bookings: List[Booking]


@attrs.frozen
class TripWaitlist:
    trip_id: str
    capacity: int
    passengers: List[Passenger]
