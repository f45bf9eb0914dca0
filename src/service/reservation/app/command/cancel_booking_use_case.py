from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.command.save_reservation_state_use_case import (
    SaveReservationStateUseCase,
)
from src.service.reservation.app.dto.reservation_result import CancellationResult
from src.service.reservation.app.interface.i_neighbor_notification_sink import (
    INeighborNotificationSink,
)
from src.service.reservation.app.interface.i_passenger_registry import IPassengerRegistry
from src.service.reservation.app.interface.i_trip_registry import ITripRegistry
from src.service.reservation.domain.aggregate.trip_aggregate import Trip
from src.service.reservation.domain.domain_event.neighbor_cancelled_event import (
    NeighborCancelledEvent,
)
from src.service.reservation.domain.entity.passenger_entity import Passenger


class CancelBookingUseCase:
    """
    Cancel a seat, tell the neighbors, and hand the seat to the waitlist.

    Flow:
    1. Resolve trip and passenger; verify the seat is booked by that passenger
       (ValidationError / NotFoundError / ReservationNotFoundError, nothing changes)
    2. Notify occupied seats numbered seat-1 and seat+1 (advisory, best-effort)
    3. Free the seat
    4. Waitlist non-empty: dequeue the earliest passenger into the freed seat
       before any other request runs
    5. Report the freed seat and the promoted passenger
    """

    def __init__(
        self,
        *,
        passenger_registry: IPassengerRegistry,
        trip_registry: ITripRegistry,
        notification_sink: Optional[INeighborNotificationSink] = None,
        state_persister: Optional[SaveReservationStateUseCase] = None,
    ) -> None:
        self.passenger_registry = passenger_registry
        self.trip_registry = trip_registry
        self.notification_sink = notification_sink
        self.state_persister = state_persister

    @classmethod
    @inject
    def depends(
        cls,
        passenger_registry: IPassengerRegistry = Depends(Provide[Container.passenger_registry]),
        trip_registry: ITripRegistry = Depends(Provide[Container.trip_registry]),
        notification_sink: INeighborNotificationSink = Depends(
            Provide[Container.neighbor_notification_sink]
        ),
        state_persister: SaveReservationStateUseCase = Depends(
            Provide[Container.state_persister]
        ),
    ) -> Self:
        return cls(
            passenger_registry=passenger_registry,
            trip_registry=trip_registry,
            notification_sink=notification_sink,
            state_persister=state_persister,
        )

    @Logger.io
    def execute(self, *, trip_id: str, passenger_id: str, seat_number: int) -> CancellationResult:
        if not trip_id.strip():
            raise ValidationError('Trip ID cannot be empty.')
        trip = self.trip_registry.find_by_id(trip_id=trip_id.strip())
        if not trip:
            raise NotFoundError('Trip not found.')

        if not passenger_id.strip():
            raise ValidationError('Passenger ID cannot be empty.')
        passenger = self.passenger_registry.find_by_id(passenger_id=passenger_id.strip())
        if not passenger:
            raise NotFoundError('Passenger not found.')

        trip.ensure_reserved_by(seat_number=seat_number, passenger=passenger)

        notified = self._notify_neighbors(trip=trip, seat_number=seat_number, passenger=passenger)

        trip.cancel_seat(seat_number=seat_number, passenger=passenger)
        Logger.base.info(
            f'🗑️ [CANCEL] Reservation cancelled for {passenger.name} '
            f'(ID: {passenger.passenger_id}), seat {seat_number} on {trip.trip_id}'
        )

        promoted = trip.promote_next_waiting(seat_number=seat_number)
        if promoted:
            Logger.base.info(
                f'⬆️ [CANCEL] Seat {seat_number} assigned to {promoted.passenger.name} '
                f'(ID: {promoted.passenger_id}) from waiting list at {trip.fare}'
            )

        if self.state_persister:
            self.state_persister.autosave()

        return CancellationResult(
            trip_id=trip.trip_id,
            seat_number=seat_number,
            cancelled_passenger_id=passenger.passenger_id,
            notified_passenger_ids=notified,
            promoted_passenger_id=promoted.passenger_id if promoted else None,
            promoted_passenger_name=promoted.passenger.name if promoted else None,
        )

    def _notify_neighbors(self, *, trip: Trip, seat_number: int, passenger: Passenger) -> List[str]:
        notified: List[str] = []
        for neighbor in trip.neighbors_of(seat_number):
            event = NeighborCancelledEvent.from_neighbor(
                neighbor=neighbor, cancelled_seat=seat_number, cancelling_passenger=passenger
            )
            notified.append(neighbor.passenger_id)
            if self.notification_sink is None:
                continue
            try:
                self.notification_sink.notify(event=event)
            except Exception as e:
                # Advisory; cancellation proceeds regardless
                Logger.base.warning(
                    f'⚠️ [CANCEL] Neighbor notification to {neighbor.passenger_id} failed: {e}'
                )
        return notified
