"""
Reservation State Repository Interface

Persists the flat-record snapshot of passengers, trips, bookings and
waitlists. Implementations decide the storage format.
"""

from abc import ABC, abstractmethod

from src.service.reservation.domain.value_object.state_record import ReservationSnapshot


class IReservationStateRepo(ABC):
    @abstractmethod
    def load(self) -> ReservationSnapshot:
        """
        Read the last saved snapshot

        Returns:
            Snapshot with record lists in their saved order; empty lists
            when nothing has been saved yet
        """
        pass

    @abstractmethod
    def save(self, *, snapshot: ReservationSnapshot) -> None:
        """Replace the stored state with snapshot."""
        pass
