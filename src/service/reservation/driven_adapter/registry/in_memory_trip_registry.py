from typing import Dict, List, Optional

from src.platform.exception.exceptions import ConflictError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.interface.i_trip_registry import ITripRegistry
from src.service.reservation.domain.aggregate.trip_aggregate import Trip


class InMemoryTripRegistry(ITripRegistry):
    """Trips keyed by casefolded id, kept in registration order."""

    def __init__(self) -> None:
        self._trips: Dict[str, Trip] = {}

    @Logger.io
    def add(self, *, trip: Trip) -> None:
        key = trip.trip_id.casefold()
        if key in self._trips:
            raise ConflictError('Trip ID already exists.')
        self._trips[key] = trip

    def find_by_id(self, *, trip_id: str) -> Optional[Trip]:
        return self._trips.get(trip_id.strip().casefold())

    def list_all(self) -> List[Trip]:
        return list(self._trips.values())

    @Logger.io
    def search_by_route(self, *, origin: str, destination: str) -> List[Trip]:
        origin = origin.strip()
        destination = destination.strip()
        if not origin or not destination:
            raise ValidationError('Starting and ending points cannot be empty.')
        return [
            trip
            for trip in self._trips.values()
            if trip.serves_route(origin=origin, destination=destination)
        ]
