"""
In-memory Passenger Registry

Passengers live in insertion order keyed by casefolded id. Ids come from a
registry-owned allocator; two registries never share numbering.
"""

from typing import Dict, List, Optional

import attrs

from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.interface.i_passenger_registry import IPassengerRegistry
from src.service.reservation.domain.entity.passenger_entity import Passenger


class PassengerIdAllocator:
    """Monotonic `P001`, `P002`, ... ids."""

    PREFIX = 'P'

    def __init__(self, *, start: int = 1) -> None:
        self._next = start

    def allocate(self) -> str:
        passenger_id = f'{self.PREFIX}{self._next:03d}'
        self._next += 1
        return passenger_id

    def observe(self, passenger_id: str) -> None:
        """Move past an externally assigned id so it is never handed out again."""
        if passenger_id[:1].upper() != self.PREFIX:
            return
        digits = passenger_id[1:]
        if not digits.isdigit():
            return
        self._next = max(self._next, int(digits) + 1)


class InMemoryPassengerRegistry(IPassengerRegistry):
    PENDING_ID = 'PENDING'

    def __init__(self, *, id_allocator: Optional[PassengerIdAllocator] = None) -> None:
        self.id_allocator = id_allocator or PassengerIdAllocator()
        self._passengers: Dict[str, Passenger] = {}

    @Logger.io
    def register(self, *, name: str, phone: str, email: str, city: str, age: int) -> Passenger:
        # Validate under a placeholder id so a rejected registration burns no id
        candidate = Passenger.create(
            passenger_id=self.PENDING_ID, name=name, phone=phone, email=email, city=city, age=age
        )
        passenger = attrs.evolve(candidate, passenger_id=self.id_allocator.allocate())
        self.add(passenger=passenger)
        return passenger

    def add(self, *, passenger: Passenger) -> None:
        key = passenger.passenger_id.casefold()
        if key in self._passengers:
            raise ConflictError(f'Passenger ID {passenger.passenger_id} already exists.')
        self._passengers[key] = passenger
        self.id_allocator.observe(passenger.passenger_id)

    def find_by_id(self, *, passenger_id: str) -> Optional[Passenger]:
        return self._passengers.get(passenger_id.strip().casefold())

    def list_all(self) -> List[Passenger]:
        return list(self._passengers.values())
