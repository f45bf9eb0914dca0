from abc import ABC, abstractmethod

from src.service.reservation.domain.domain_event.neighbor_cancelled_event import (
    NeighborCancelledEvent,
)


class INeighborNotificationSink(ABC):
    """Receives advisory neighbor notifications. Delivery is best-effort."""

    @abstractmethod
    def notify(self, *, event: NeighborCancelledEvent) -> None:
        pass
