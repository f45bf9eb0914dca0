from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.reservation.domain.entity.passenger_entity import Passenger


class IPassengerRegistry(ABC):
    """
    Registry of passengers, owner of passenger id allocation.

    The reservation core only looks passengers up; it never creates or
    deletes them.
    """

    @abstractmethod
    def register(self, *, name: str, phone: str, email: str, city: str, age: int) -> Passenger:
        """
        Validate and store a new passenger under the next free id

        Raises:
            ValidationError: When any attribute is malformed
        """
        pass

    @abstractmethod
    def add(self, *, passenger: Passenger) -> None:
        """Store an already-identified passenger (state restore)."""
        pass

    @abstractmethod
    def find_by_id(self, *, passenger_id: str) -> Optional[Passenger]:
        """Case-insensitive lookup; None when unknown."""
        pass

    @abstractmethod
    def list_all(self) -> List[Passenger]:
        """Passengers in registration order, oldest first."""
        pass
