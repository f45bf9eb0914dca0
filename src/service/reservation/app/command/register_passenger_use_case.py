from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.command.save_reservation_state_use_case import (
    SaveReservationStateUseCase,
)
from src.service.reservation.app.interface.i_passenger_registry import IPassengerRegistry
from src.service.reservation.domain.entity.passenger_entity import Passenger


class RegisterPassengerUseCase:
    def __init__(
        self,
        *,
        passenger_registry: IPassengerRegistry,
        state_persister: Optional[SaveReservationStateUseCase] = None,
    ) -> None:
        self.passenger_registry = passenger_registry
        self.state_persister = state_persister

    @classmethod
    @inject
    def depends(
        cls,
        passenger_registry: IPassengerRegistry = Depends(Provide[Container.passenger_registry]),
        state_persister: SaveReservationStateUseCase = Depends(
            Provide[Container.state_persister]
        ),
    ) -> Self:
        return cls(passenger_registry=passenger_registry, state_persister=state_persister)

    @Logger.io
    def register(self, *, name: str, phone: str, email: str, city: str, age: int) -> Passenger:
        passenger = self.passenger_registry.register(
            name=name, phone=phone, email=email, city=city, age=age
        )
        Logger.base.info(f'🧍 [PASSENGER] Registered {passenger.passenger_id}')
        if self.state_persister:
            self.state_persister.autosave()
        return passenger
