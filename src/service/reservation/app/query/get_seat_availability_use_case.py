from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.dto.trip_summary import SeatAvailability
from src.service.reservation.app.interface.i_trip_registry import ITripRegistry


class GetSeatAvailabilityUseCase:
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
    def execute(self, *, trip_id: str) -> SeatAvailability:
        """Free seat numbers in ascending order, plus booked/free counts."""
        if not trip_id.strip():
            raise ValidationError('Trip ID cannot be empty.')
        trip = self.trip_registry.find_by_id(trip_id=trip_id.strip())
        if not trip:
            raise NotFoundError('Trip not found.')
        return SeatAvailability(
            trip_id=trip.trip_id,
            available_seats=trip.available_seats(),
            available_count=trip.available_count,
            booked_count=trip.booked_count,
        )
