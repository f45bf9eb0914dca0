"""
Flat state records

The whole reservation state round-trips through these four record kinds.
Order inside each list is significant: bookings go trip by trip in seat
order, waitlist entries go head to tail so reloading keeps FIFO priority.
"""

from typing import List

import attrs


@attrs.frozen
class PassengerRecord:
    passenger_id: str
    name: str
    phone: str
    email: str
    city: str
    age: int


@attrs.frozen
class TripRecord:
    trip_id: str
    seat_count: int
    origin: str
    destination: str
    departure_time: str
    fare: float


@attrs.frozen
class BookingRecord:
    trip_id: str
    passenger_id: str
    seat_number: int


@attrs.frozen
class WaitlistRecord:
    trip_id: str
    passenger_id: str


@attrs.define
class ReservationSnapshot:
    passengers: List[PassengerRecord] = attrs.field(factory=list)
    trips: List[TripRecord] = attrs.field(factory=list)
    bookings: List[BookingRecord] = attrs.field(factory=list)
    waitlist: List[WaitlistRecord] = attrs.field(factory=list)
