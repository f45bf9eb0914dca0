from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.dto.trip_summary import TripBookings
from src.service.reservation.app.interface.i_trip_registry import ITripRegistry


class ListBookingsUseCase:
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
    def execute(self) -> List[TripBookings]:
        """Bookings grouped per trip in seat order; trips without bookings are left out."""
        grouped = [
            TripBookings(trip_id=trip.trip_id, bookings=trip.bookings())
            for trip in self.trip_registry.list_all()
        ]
        return [group for group in grouped if group.bookings]
