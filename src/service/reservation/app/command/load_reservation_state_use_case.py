import attrs

from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.interface.i_passenger_registry import IPassengerRegistry
from src.service.reservation.app.interface.i_reservation_state_repo import (
    IReservationStateRepo,
)
from src.service.reservation.app.interface.i_trip_registry import ITripRegistry
from src.service.reservation.domain.aggregate.trip_aggregate import Trip
from src.service.reservation.domain.entity.passenger_entity import Passenger


@attrs.frozen
class LoadSummary:
    passengers: int = 0
    trips: int = 0
    bookings: int = 0
    waitlist: int = 0
    skipped: int = 0


class LoadReservationStateUseCase:
    """
    Rebuild registries from the stored snapshot.

    Order matters: passengers, then trips, then bookings, then waitlist
    entries (in saved queue order, so FIFO priority survives the reload).
    A record that fails validation or references something unknown is
    skipped with a warning; the rest still loads.
    """

    def __init__(
        self,
        *,
        passenger_registry: IPassengerRegistry,
        trip_registry: ITripRegistry,
        state_repo: IReservationStateRepo,
        waitlist_capacity: int,
    ) -> None:
        self.passenger_registry = passenger_registry
        self.trip_registry = trip_registry
        self.state_repo = state_repo
        self.waitlist_capacity = waitlist_capacity

    @Logger.io
    def execute(self) -> LoadSummary:
        snapshot = self.state_repo.load()
        passengers = trips = bookings = waitlist = skipped = 0

        for record in snapshot.passengers:
            try:
                passenger = Passenger.create(**attrs.asdict(record))
                self.passenger_registry.add(passenger=passenger)
            except CustomBaseError as e:
                skipped += 1
                Logger.base.warning(f'⚠️ [STATE] Skipping passenger {record}: {e.message}')
                continue
            passengers += 1

        for record in snapshot.trips:
            try:
                trip = Trip.create(
                    **attrs.asdict(record), waitlist_capacity=self.waitlist_capacity
                )
                self.trip_registry.add(trip=trip)
            except CustomBaseError as e:
                skipped += 1
                Logger.base.warning(f'⚠️ [STATE] Skipping trip {record.trip_id}: {e.message}')
                continue
            trips += 1

        for record in snapshot.bookings:
            trip = self.trip_registry.find_by_id(trip_id=record.trip_id)
            passenger = self.passenger_registry.find_by_id(passenger_id=record.passenger_id)
            if trip is None or passenger is None:
                skipped += 1
                Logger.base.warning(f'⚠️ [STATE] Trip or passenger not found for booking: {record}')
                continue
            try:
                trip.restore_booking(passenger=passenger, seat_number=record.seat_number)
            except CustomBaseError as e:
                skipped += 1
                Logger.base.warning(f'⚠️ [STATE] Skipping booking {record}: {e.message}')
                continue
            bookings += 1

        for record in snapshot.waitlist:
            trip = self.trip_registry.find_by_id(trip_id=record.trip_id)
            passenger = self.passenger_registry.find_by_id(passenger_id=record.passenger_id)
            if trip is None or passenger is None:
                skipped += 1
                Logger.base.warning(
                    f'⚠️ [STATE] Trip or passenger not found for waitlist entry: {record}'
                )
                continue
            try:
                trip.join_waitlist(passenger=passenger)
            except CustomBaseError as e:
                skipped += 1
                Logger.base.warning(
                    f'⚠️ [STATE] Waiting list full for trip {record.trip_id}, '
                    f'cannot add passenger {record.passenger_id}: {e.message}'
                )
                continue
            waitlist += 1

        summary = LoadSummary(
            passengers=passengers,
            trips=trips,
            bookings=bookings,
            waitlist=waitlist,
            skipped=skipped,
        )
        Logger.base.info(f'📂 [STATE] Loaded {summary}')
        return summary
