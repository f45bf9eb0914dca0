from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.interface.i_passenger_registry import IPassengerRegistry
from src.service.reservation.app.interface.i_reservation_state_repo import (
    IReservationStateRepo,
)
from src.service.reservation.app.interface.i_trip_registry import ITripRegistry
from src.service.reservation.domain.value_object.state_record import (
    PassengerRecord,
    ReservationSnapshot,
)


class SaveReservationStateUseCase:
    """
    Flatten registries into a snapshot and hand it to the state repository.

    Mutating use cases call autosave() once their change is applied, so the
    store never sees a half-applied operation.
    """

    def __init__(
        self,
        *,
        passenger_registry: IPassengerRegistry,
        trip_registry: ITripRegistry,
        state_repo: IReservationStateRepo,
        autosave_enabled: bool = True,
    ) -> None:
        self.passenger_registry = passenger_registry
        self.trip_registry = trip_registry
        self.state_repo = state_repo
        self.autosave_enabled = autosave_enabled

    def build_snapshot(self) -> ReservationSnapshot:
        snapshot = ReservationSnapshot(
            passengers=[
                PassengerRecord(
                    passenger_id=passenger.passenger_id,
                    name=passenger.name,
                    phone=passenger.phone,
                    email=passenger.email,
                    city=passenger.city,
                    age=passenger.age,
                )
                for passenger in self.passenger_registry.list_all()
            ]
        )
        for trip in self.trip_registry.list_all():
            snapshot.trips.append(trip.to_record())
            snapshot.bookings.extend(trip.booking_records())
            snapshot.waitlist.extend(trip.waitlist_records())
        return snapshot

    @Logger.io
    def execute(self) -> ReservationSnapshot:
        snapshot = self.build_snapshot()
        self.state_repo.save(snapshot=snapshot)
        Logger.base.info(
            f'💾 [STATE] Saved {len(snapshot.passengers)} passengers, {len(snapshot.trips)} trips, '
            f'{len(snapshot.bookings)} bookings, {len(snapshot.waitlist)} waitlist entries'
        )
        return snapshot

    def autosave(self) -> None:
        """
        Save synchronously when autosave is on.

        Called from request handlers, so the disk write is part of each
        mutating request's latency and blocks the event loop meanwhile.
        A failed write leaves the last good snapshot on disk.
        """
        if not self.autosave_enabled:
            return
        try:
            self.execute()
        except OSError as e:
            # In-memory state stays authoritative; the next save retries the write
            Logger.base.error(f'❌ [STATE] Autosave failed: {e}')
