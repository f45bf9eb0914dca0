from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.dto.trip_summary import TripWaitlist
from src.service.reservation.app.interface.i_trip_registry import ITripRegistry
from src.service.reservation.domain.aggregate.trip_aggregate import Trip


class ListWaitlistsUseCase:
    """Waitlist contents, head first, without dequeuing anyone."""

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
    def for_trip(self, *, trip_id: str) -> TripWaitlist:
        if not trip_id.strip():
            raise ValidationError('Trip ID cannot be empty.')
        trip = self.trip_registry.find_by_id(trip_id=trip_id.strip())
        if not trip:
            raise NotFoundError('Trip not found.')
        return self._view(trip)

    @Logger.io
    def for_all_trips(self) -> List[TripWaitlist]:
        """Only trips with someone waiting."""
        return [
            self._view(trip) for trip in self.trip_registry.list_all() if not trip.waitlist.is_empty()
        ]

    @staticmethod
    def _view(trip: Trip) -> TripWaitlist:
        return TripWaitlist(
            trip_id=trip.trip_id,
            capacity=trip.waitlist.capacity,
            passengers=trip.waiting_passengers(),
        )
