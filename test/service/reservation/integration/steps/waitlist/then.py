from typing import Any

from pytest_bdd import parsers, then

from src.platform.exception.exceptions import QueueFullError
from src.service.reservation.domain.enum.reservation_outcome import ReservationOutcome
from src.service.reservation.domain.enum.seat_status import SeatStatus
from src.service.reservation.driven_adapter.registry.in_memory_trip_registry import (
    InMemoryTripRegistry,
)
from test.service.reservation.integration.steps.waitlist.fixtures import (
    RecordingNotificationSink,
)


@then(parsers.parse('the booking is confirmed for seat {seat:d}'))
def booking_confirmed(seat: int, reservation_context: dict[str, Any]) -> None:
    result = reservation_context['result']
    assert result.outcome == ReservationOutcome.CONFIRMED
    assert result.seat_number == seat


@then(parsers.parse('"{name}" is waitlisted at position {position:d}'))
def waitlisted_at(name: str, position: int, reservation_context: dict[str, Any]) -> None:
    result = reservation_context['result']
    assert result.outcome == ReservationOutcome.WAITLISTED
    assert result.passenger_id == reservation_context['passenger_ids'][name]
    assert result.waitlist_position == position


@then('nobody is notified')
def nobody_notified(recording_sink: RecordingNotificationSink) -> None:
    assert recording_sink.events == []


@then(parsers.parse('"{name}" is notified about seat {seat:d}'))
def notified_about_seat(
    name: str,
    seat: int,
    recording_sink: RecordingNotificationSink,
    reservation_context: dict[str, Any],
) -> None:
    passenger_id = reservation_context['passenger_ids'][name]
    matching = [
        event for event in recording_sink.events if event.neighbor_passenger_id == passenger_id
    ]
    assert len(matching) == 1
    assert matching[0].cancelled_seat == seat
    assert f'seat {seat}' in matching[0].message


@then('the cancelled seat was still booked when the notifications were sent')
def seat_booked_during_notification(recording_sink: RecordingNotificationSink) -> None:
    assert recording_sink.seat_still_booked
    assert all(recording_sink.seat_still_booked)


@then(parsers.parse('seat {seat:d} on trip "{trip_id}" is booked by "{name}"'))
def seat_booked_by(
    seat: int,
    trip_id: str,
    name: str,
    trip_registry: InMemoryTripRegistry,
    reservation_context: dict[str, Any],
) -> None:
    trip = trip_registry.find_by_id(trip_id=trip_id)
    assert trip is not None
    booking = trip.booking_at(seat)
    assert booking is not None
    assert booking.passenger_id == reservation_context['passenger_ids'][name]


@then(parsers.parse('seat {seat:d} on trip "{trip_id}" is available'))
def seat_available(seat: int, trip_id: str, trip_registry: InMemoryTripRegistry) -> None:
    trip = trip_registry.find_by_id(trip_id=trip_id)
    assert trip is not None
    assert trip.seat_status(seat) == SeatStatus.AVAILABLE


@then(parsers.parse('the waitlist of trip "{trip_id}" is empty'))
def waitlist_empty(trip_id: str, trip_registry: InMemoryTripRegistry) -> None:
    trip = trip_registry.find_by_id(trip_id=trip_id)
    assert trip is not None
    assert trip.waitlist.is_empty()


@then(parsers.parse('the waitlist of trip "{trip_id}" holds only "{name}"'))
def waitlist_holds_only(
    trip_id: str,
    name: str,
    trip_registry: InMemoryTripRegistry,
    reservation_context: dict[str, Any],
) -> None:
    trip = trip_registry.find_by_id(trip_id=trip_id)
    assert trip is not None
    assert [p.passenger_id for p in trip.waiting_passengers()] == [
        reservation_context['passenger_ids'][name]
    ]


@then('the request is rejected because the waitlist is full')
def rejected_waitlist_full(reservation_context: dict[str, Any]) -> None:
    assert isinstance(reservation_context['error'], QueueFullError)
