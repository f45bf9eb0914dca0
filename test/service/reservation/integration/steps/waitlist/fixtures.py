from typing import Any, List

import pytest

from src.service.reservation.app.interface.i_neighbor_notification_sink import (
    INeighborNotificationSink,
)
from src.service.reservation.app.interface.i_trip_registry import ITripRegistry
from src.service.reservation.domain.domain_event.neighbor_cancelled_event import (
    NeighborCancelledEvent,
)


class RecordingNotificationSink(INeighborNotificationSink):
    """Keeps every event plus whether the cancelled seat was still booked on delivery."""

    def __init__(self, trip_registry: ITripRegistry) -> None:
        self.trip_registry = trip_registry
        self.events: List[NeighborCancelledEvent] = []
        self.seat_still_booked: List[bool] = []

    def notify(self, *, event: NeighborCancelledEvent) -> None:
        trip = self.trip_registry.find_by_id(trip_id=event.trip_id)
        assert trip is not None
        self.events.append(event)
        self.seat_still_booked.append(not trip.is_seat_available(event.cancelled_seat))


@pytest.fixture
def recording_sink(trip_registry: ITripRegistry) -> RecordingNotificationSink:
    return RecordingNotificationSink(trip_registry)


@pytest.fixture
def reservation_context() -> dict[str, Any]:
    """Scenario state: passenger ids by name, the last result and the last error."""
    return {'passenger_ids': {}, 'result': None, 'error': None}
