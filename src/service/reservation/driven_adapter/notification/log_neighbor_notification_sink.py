from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.interface.i_neighbor_notification_sink import (
    INeighborNotificationSink,
)
from src.service.reservation.domain.domain_event.neighbor_cancelled_event import (
    NeighborCancelledEvent,
)


class LogNeighborNotificationSink(INeighborNotificationSink):
    """Delivers neighbor notifications to the application log."""

    def notify(self, *, event: NeighborCancelledEvent) -> None:
        Logger.base.info(
            f'📢 [NOTIFY] Notification to {event.neighbor_name} '
            f'(ID: {event.neighbor_passenger_id}, Seat {event.neighbor_seat}): {event.message}'
        )
