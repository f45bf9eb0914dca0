"""
List Passengers Use Case
Read-only views over the passenger registry
"""

from typing import List, Literal, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.interface.i_passenger_registry import IPassengerRegistry
from src.service.reservation.domain.entity.passenger_entity import Passenger


PassengerOrder = Literal['oldest', 'newest']


class ListPassengersUseCase:
    def __init__(self, *, passenger_registry: IPassengerRegistry) -> None:
        self.passenger_registry = passenger_registry

    @classmethod
    @inject
    def depends(
        cls,
        passenger_registry: IPassengerRegistry = Depends(Provide[Container.passenger_registry]),
    ) -> Self:
        return cls(passenger_registry=passenger_registry)

    @Logger.io
    def list_passengers(self, *, order: PassengerOrder = 'oldest') -> List[Passenger]:
        """
        Args:
            order: 'oldest' for registration order, 'newest' for reverse
        """
        passengers = self.passenger_registry.list_all()
        if order == 'newest':
            return list(reversed(passengers))
        return passengers

    @Logger.io
    def get_passenger(self, *, passenger_id: str) -> Passenger:
        if not passenger_id.strip():
            raise ValidationError('Passenger ID cannot be empty.')
        passenger = self.passenger_registry.find_by_id(passenger_id=passenger_id.strip())
        if not passenger:
            raise NotFoundError('Passenger not found.')
        return passenger
