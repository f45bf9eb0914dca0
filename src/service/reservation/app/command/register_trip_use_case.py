from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.command.save_reservation_state_use_case import (
    SaveReservationStateUseCase,
)
from src.service.reservation.app.interface.i_trip_registry import ITripRegistry
from src.service.reservation.domain.aggregate.trip_aggregate import Trip


class RegisterTripUseCase:
    """
    Register a scheduled trip.

    The aggregate validates route, schedule and fare; this use case adds the
    fleet-level rules: seat count ceiling and trip id uniqueness.
    """

    def __init__(
        self,
        *,
        trip_registry: ITripRegistry,
        waitlist_capacity: int,
        max_seats_per_trip: int,
        state_persister: Optional[SaveReservationStateUseCase] = None,
    ) -> None:
        self.trip_registry = trip_registry
        self.waitlist_capacity = waitlist_capacity
        self.max_seats_per_trip = max_seats_per_trip
        self.state_persister = state_persister

    @classmethod
    @inject
    def depends(
        cls,
        trip_registry: ITripRegistry = Depends(Provide[Container.trip_registry]),
        config: Settings = Depends(Provide[Container.config_service]),
        state_persister: SaveReservationStateUseCase = Depends(
            Provide[Container.state_persister]
        ),
    ) -> Self:
        return cls(
            trip_registry=trip_registry,
            waitlist_capacity=config.WAITLIST_CAPACITY,
            max_seats_per_trip=config.MAX_SEATS_PER_TRIP,
            state_persister=state_persister,
        )

    @Logger.io
    def register(
        self,
        *,
        trip_id: str,
        seat_count: int,
        origin: str,
        destination: str,
        departure_time: str,
        fare: float,
    ) -> Trip:
        if not trip_id.strip():
            raise ValidationError('Trip ID cannot be empty.')
        if self.trip_registry.find_by_id(trip_id=trip_id.strip()) is not None:
            raise ConflictError('Trip ID already exists.')
        if seat_count <= 0 or seat_count > self.max_seats_per_trip:
            raise ValidationError(
                f'Invalid number of seats. Must be between 1 and {self.max_seats_per_trip}.'
            )

        trip = Trip.create(
            trip_id=trip_id,
            seat_count=seat_count,
            origin=origin,
            destination=destination,
            departure_time=departure_time,
            fare=fare,
            waitlist_capacity=self.waitlist_capacity,
        )
        self.trip_registry.add(trip=trip)
        Logger.base.info(
            f'🚌 [TRIP] Registered {trip.trip_id} {trip.origin} → {trip.destination} '
            f'at {trip.departure_time}'
        )
        if self.state_persister:
            self.state_persister.autosave()
        return trip
