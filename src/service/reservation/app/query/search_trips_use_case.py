from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.dto.trip_summary import TripSummary
from src.service.reservation.app.interface.i_trip_registry import ITripRegistry


class SearchTripsUseCase:
    """
    Trip lookups for browsing: all trips, one trip, or trips on a route.
    Route matching ignores case on both endpoints.
    """

    def __init__(self, *, trip_registry: ITripRegistry) -> None:
        self.trip_registry = trip_registry

    @classmethod
    @inject
    def depends(
        cls,
        trip_registry: ITripRegistry = Depends(Provide[Container.trip_registry]),
    ) -> Self:
        return cls(trip_registry=trip_registry)

    @Logger.io
    def list_trips(self) -> List[TripSummary]:
        return [TripSummary.from_trip(trip=trip) for trip in self.trip_registry.list_all()]

    @Logger.io
    def get_trip(self, *, trip_id: str) -> TripSummary:
        if not trip_id.strip():
            raise ValidationError('Trip ID cannot be empty.')
        trip = self.trip_registry.find_by_id(trip_id=trip_id.strip())
        if not trip:
            raise NotFoundError('Trip not found.')
        return TripSummary.from_trip(trip=trip)

    @Logger.io
    def search(self, *, origin: str, destination: str) -> List[TripSummary]:
        trips = self.trip_registry.search_by_route(origin=origin, destination=destination)
        if not trips:
            Logger.base.info(f'🔍 [TRIP] No trips found from {origin} to {destination}')
        return [TripSummary.from_trip(trip=trip) for trip in trips]
