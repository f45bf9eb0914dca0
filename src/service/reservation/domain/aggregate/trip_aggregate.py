"""
Trip Aggregate - Aggregate Root for one scheduled vehicle run

[DDD Design Principles]
- Trip is the Aggregate Root; it owns exactly one seat table and one waitlist
- Booking is an entity inside the aggregate, created and dropped only here
- Seat state is derived from the seat table, never stored beside it

[Business Invariants]
- Seat numbers are 1-based and bounded by seat_count
- A seat is BOOKED iff its slot holds a Booking whose seat_number is that seat
- A booked seat is never overwritten; the only transitions are
  AVAILABLE -> BOOKED (book_seat) and BOOKED -> AVAILABLE (cancel_seat)
- A booking request always ends booked, waitlisted, or rejected (QueueFullError)
"""

import re
from typing import List, Optional

import attrs

from src.platform.exception.exceptions import (
    ReservationNotFoundError,
    SeatUnavailableError,
    ValidationError,
)
from src.platform.logging.loguru_io import Logger
from src.service.reservation.domain.bounded_queue import BoundedQueue
from src.service.reservation.domain.entity.booking_entity import Booking
from src.service.reservation.domain.entity.passenger_entity import Passenger, same_id
from src.service.reservation.domain.enum.reservation_outcome import ReservationOutcome
from src.service.reservation.domain.enum.seat_status import SeatStatus
from src.service.reservation.domain.value_object.state_record import (
    BookingRecord,
    TripRecord,
    WaitlistRecord,
)


DEPARTURE_TIME_PATTERN = re.compile(r'^([01]\d|2[0-3]):[0-5]\d$')


@attrs.define(eq=False)
class Trip:
    trip_id: str
    seat_count: int
    origin: str
    destination: str
    departure_time: str
    fare: float
    waitlist: BoundedQueue[Passenger]

    # Slot i holds the booking of seat i; slot 0 is never used
    _seats: List[Optional[Booking]] = attrs.field(init=False, repr=False)

    def __attrs_post_init__(self) -> None:
        self._seats = [None] * (self.seat_count + 1)

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        trip_id: str,
        seat_count: int,
        origin: str,
        destination: str,
        departure_time: str,
        fare: float,
        waitlist_capacity: int,
    ) -> 'Trip':
        """
        Create a trip with every seat available and an empty waitlist

        This is the only correct way to build a Trip; it validates the route,
        schedule and pricing before any seat state exists.
        """
        trip_id = trip_id.strip()
        origin = origin.strip()
        destination = destination.strip()
        departure_time = departure_time.strip()

        if not trip_id:
            raise ValidationError('Trip ID cannot be empty.')
        if seat_count <= 0 or fare <= 0:
            raise ValidationError('Total seats and fare must be positive')
        if not origin:
            raise ValidationError('Starting point cannot be empty.')
        if not destination:
            raise ValidationError('Ending point cannot be empty.')
        if same_id(origin, destination):
            raise ValidationError('Starting and ending points cannot be the same.')
        if not DEPARTURE_TIME_PATTERN.match(departure_time):
            raise ValidationError('Invalid time format. Use HH:MM (24-hour).')

        return cls(
            trip_id=trip_id,
            seat_count=seat_count,
            origin=origin,
            destination=destination,
            departure_time=departure_time,
            fare=float(fare),
            waitlist=BoundedQueue(waitlist_capacity),
        )

    # ------------------------------------------------------------------ queries

    def has_id(self, trip_id: str) -> bool:
        return same_id(self.trip_id, trip_id)

    def serves_route(self, *, origin: str, destination: str) -> bool:
        return same_id(self.origin, origin) and same_id(self.destination, destination)

    def is_valid_seat(self, seat_number: int) -> bool:
        return 1 <= seat_number <= self.seat_count

    def is_seat_available(self, seat_number: int) -> bool:
        return self.is_valid_seat(seat_number) and self._seats[seat_number] is None

    def seat_status(self, seat_number: int) -> SeatStatus:
        if not self.is_valid_seat(seat_number):
            raise ValidationError(f'Invalid seat number: {seat_number}')
        return SeatStatus.AVAILABLE if self._seats[seat_number] is None else SeatStatus.BOOKED

    def seat_statuses(self) -> List[SeatStatus]:
        """Status of seats 1..seat_count, in seat order."""
        return [self.seat_status(seat) for seat in range(1, self.seat_count + 1)]

    def booking_at(self, seat_number: int) -> Optional[Booking]:
        if not self.is_valid_seat(seat_number):
            return None
        return self._seats[seat_number]

    def bookings(self) -> List[Booking]:
        return [booking for booking in self._seats[1:] if booking is not None]

    def available_seats(self) -> List[int]:
        return [
            seat
            for seat, status in enumerate(self.seat_statuses(), start=1)
            if status is SeatStatus.AVAILABLE
        ]

    def first_available_seat(self) -> Optional[int]:
        return next(iter(self.available_seats()), None)

    @property
    def booked_count(self) -> int:
        return len(self.bookings())

    @property
    def available_count(self) -> int:
        return self.seat_count - self.booked_count

    def waiting_passengers(self) -> List[Passenger]:
        return list(self.waitlist.iterate())

    def neighbors_of(self, seat_number: int) -> List[Booking]:
        """Occupied seats numbered directly below and above seat_number."""
        return [
            booking
            for seat in (seat_number - 1, seat_number + 1)
            if (booking := self.booking_at(seat)) is not None
        ]

    def ensure_reserved_by(self, *, seat_number: int, passenger: Passenger) -> Booking:
        if not self.is_valid_seat(seat_number):
            raise ValidationError(f'Invalid seat number: {seat_number}')
        booking = self._seats[seat_number]
        if booking is None or not booking.passenger.has_id(passenger.passenger_id):
            raise ReservationNotFoundError(f'Reservation not found for seat {seat_number}')
        return booking

    # ----------------------------------------------------------------- commands

    @Logger.io
    def book_seat(self, *, passenger: Passenger, seat_number: int) -> ReservationOutcome:
        """
        Book seat_number for passenger, falling back to the waitlist

        Returns:
            CONFIRMED when the seat was free, WAITLISTED when it was taken or
            outside the trip and the passenger was queued instead

        Raises:
            QueueFullError: seat unavailable and waitlist at capacity;
                nothing was booked or queued
        """
        if passenger is None:
            raise ValidationError('Passenger cannot be null')
        try:
            self._claim_seat(passenger=passenger, seat_number=seat_number)
        except SeatUnavailableError as e:
            self.waitlist.enqueue(passenger)
            Logger.base.info(
                f'{e.message} {passenger.passenger_id} queued on trip {self.trip_id} '
                f'(waitlist {self.waitlist.size()}/{self.waitlist.capacity})'
            )
            return ReservationOutcome.WAITLISTED
        return ReservationOutcome.CONFIRMED

    @Logger.io
    def cancel_seat(self, *, seat_number: int, passenger: Passenger) -> Booking:
        booking = self.ensure_reserved_by(seat_number=seat_number, passenger=passenger)
        self._seats[seat_number] = None
        return booking

    @Logger.io
    def join_waitlist(self, *, passenger: Passenger) -> int:
        """Queue passenger without trying a seat. Returns the 1-based position."""
        self.waitlist.enqueue(passenger)
        return self.waitlist.size()

    @Logger.io
    def promote_next_waiting(self, *, seat_number: int) -> Optional[Booking]:
        """Move the earliest-queued passenger into seat_number, if anyone is waiting."""
        if self.waitlist.is_empty():
            return None
        if not self.is_seat_available(seat_number):
            raise SeatUnavailableError(f'Seat {seat_number} is not free for promotion')
        passenger = self.waitlist.dequeue()
        return self._claim_seat(passenger=passenger, seat_number=seat_number)

    def restore_booking(self, *, passenger: Passenger, seat_number: int) -> Booking:
        """Re-create a persisted booking; refuses to overwrite or to fall back."""
        return self._claim_seat(passenger=passenger, seat_number=seat_number)

    def _claim_seat(self, *, passenger: Passenger, seat_number: int) -> Booking:
        if not self.is_seat_available(seat_number):
            raise SeatUnavailableError(f'Seat {seat_number} is already booked or invalid.')
        booking = Booking(trip_id=self.trip_id, passenger=passenger, seat_number=seat_number)
        self._seats[seat_number] = booking
        return booking

    # ------------------------------------------------------------------ records

    def to_record(self) -> TripRecord:
        return TripRecord(
            trip_id=self.trip_id,
            seat_count=self.seat_count,
            origin=self.origin,
            destination=self.destination,
            departure_time=self.departure_time,
            fare=self.fare,
        )

    def booking_records(self) -> List[BookingRecord]:
        return [
            BookingRecord(
                trip_id=self.trip_id,
                passenger_id=booking.passenger_id,
                seat_number=booking.seat_number,
            )
            for booking in self.bookings()
        ]

    def waitlist_records(self) -> List[WaitlistRecord]:
        return [
            WaitlistRecord(trip_id=self.trip_id, passenger_id=passenger.passenger_id)
            for passenger in self.waitlist.iterate()
        ]
