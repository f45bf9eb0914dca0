from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.command.save_reservation_state_use_case import (
    SaveReservationStateUseCase,
)
from src.service.reservation.app.dto.reservation_result import WaitlistResult
from src.service.reservation.app.interface.i_passenger_registry import IPassengerRegistry
from src.service.reservation.app.interface.i_trip_registry import ITripRegistry


class JoinWaitlistUseCase:
    """Queue a passenger on a trip's waitlist without trying a seat first."""

    def __init__(
        self,
        *,
        passenger_registry: IPassengerRegistry,
        trip_registry: ITripRegistry,
        state_persister: Optional[SaveReservationStateUseCase] = None,
    ) -> None:
        self.passenger_registry = passenger_registry
        self.trip_registry = trip_registry
        self.state_persister = state_persister

    @classmethod
    @inject
    def depends(
        cls,
        passenger_registry: IPassengerRegistry = Depends(Provide[Container.passenger_registry]),
        trip_registry: ITripRegistry = Depends(Provide[Container.trip_registry]),
        state_persister: SaveReservationStateUseCase = Depends(
            Provide[Container.state_persister]
        ),
    ) -> Self:
        return cls(
            passenger_registry=passenger_registry,
            trip_registry=trip_registry,
            state_persister=state_persister,
        )

    @Logger.io
    def execute(self, *, trip_id: str, passenger_id: str) -> WaitlistResult:
        if not passenger_id.strip():
            raise ValidationError('Passenger ID cannot be empty.')
        passenger = self.passenger_registry.find_by_id(passenger_id=passenger_id.strip())
        if not passenger:
            raise NotFoundError('Passenger not found.')

        if not trip_id.strip():
            raise ValidationError('Trip ID cannot be empty.')
        trip = self.trip_registry.find_by_id(trip_id=trip_id.strip())
        if not trip:
            raise NotFoundError('Trip not found.')

        # QueueFullError propagates untouched: the waitlist is unchanged
        position = trip.join_waitlist(passenger=passenger)
        Logger.base.info(
            f'⏳ [WAITLIST] {passenger.name} (ID: {passenger.passenger_id}) added to waiting list '
            f'for trip {trip.trip_id} at position {position}'
        )

        if self.state_persister:
            self.state_persister.autosave()
        return WaitlistResult(
            trip_id=trip.trip_id, passenger_id=passenger.passenger_id, position=position
        )
