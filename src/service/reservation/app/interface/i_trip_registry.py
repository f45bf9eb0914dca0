from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.reservation.domain.aggregate.trip_aggregate import Trip


class ITripRegistry(ABC):
    @abstractmethod
    def add(self, *, trip: Trip) -> None:
        """
        Store a trip

        Raises:
            ConflictError: When a trip with the same id (case-insensitive) exists
        """
        pass

    @abstractmethod
    def find_by_id(self, *, trip_id: str) -> Optional[Trip]:
        pass

    @abstractmethod
    def list_all(self) -> List[Trip]:
        """Trips in registration order."""
        pass

    @abstractmethod
    def search_by_route(self, *, origin: str, destination: str) -> List[Trip]:
        pass
