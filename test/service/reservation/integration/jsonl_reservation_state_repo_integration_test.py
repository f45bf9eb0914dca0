from collections.abc import Callable
from pathlib import Path

import orjson
import pytest

from src.service.reservation.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.reservation.app.command.load_reservation_state_use_case import (
    LoadReservationStateUseCase,
)
from src.service.reservation.app.command.save_reservation_state_use_case import (
    SaveReservationStateUseCase,
)
from src.service.reservation.domain.aggregate.trip_aggregate import Trip
from src.service.reservation.domain.entity.passenger_entity import Passenger
from src.service.reservation.domain.value_object.state_record import (
    BookingRecord,
    PassengerRecord,
    ReservationSnapshot,
    TripRecord,
    WaitlistRecord,
)
from src.service.reservation.driven_adapter.registry.in_memory_passenger_registry import (
    InMemoryPassengerRegistry,
)
from src.service.reservation.driven_adapter.registry.in_memory_trip_registry import (
    InMemoryTripRegistry,
)
from src.service.reservation.driven_adapter.repo.jsonl_reservation_state_repo import (
    JsonlReservationStateRepo,
)


@pytest.fixture
def snapshot() -> ReservationSnapshot:
    return ReservationSnapshot(
        passengers=[
            PassengerRecord(
                passenger_id='P001',
                name='Asha Rao',
                phone='9876543210',
                email='asha@example.com',
                city='Pune',
                age=30,
            )
        ],
        trips=[
            TripRecord(
                trip_id='T1',
                seat_count=2,
                origin='Mumbai',
                destination='Pune',
                departure_time='08:30',
                fare=450.0,
            )
        ],
        bookings=[BookingRecord(trip_id='T1', passenger_id='P001', seat_number=2)],
        waitlist=[
            WaitlistRecord(trip_id='T1', passenger_id='P003'),
            WaitlistRecord(trip_id='T1', passenger_id='P002'),
        ],
    )


@pytest.mark.integration
class TestJsonlReservationStateRepo:
    def test_missing_files_load_empty(self, tmp_path: Path) -> None:
        loaded = JsonlReservationStateRepo(data_dir=tmp_path / 'absent').load()

        assert loaded == ReservationSnapshot()

    def test_save_then_load(self, tmp_path: Path, snapshot: ReservationSnapshot) -> None:
        repo = JsonlReservationStateRepo(data_dir=tmp_path / 'state')

        repo.save(snapshot=snapshot)

        assert repo.load() == snapshot
        assert sorted(p.name for p in (tmp_path / 'state').iterdir()) == [
            'bookings.jsonl',
            'passengers.jsonl',
            'trips.jsonl',
            'waitlist.jsonl',
        ]

    def test_one_object_per_line(self, tmp_path: Path, snapshot: ReservationSnapshot) -> None:
        JsonlReservationStateRepo(data_dir=tmp_path).save(snapshot=snapshot)

        lines = (tmp_path / 'waitlist.jsonl').read_bytes().splitlines()

        assert [orjson.loads(line) for line in lines] == [
            {'trip_id': 'T1', 'passenger_id': 'P003'},
            {'trip_id': 'T1', 'passenger_id': 'P002'},
        ]

    def test_save_replaces_previous_state(
        self, tmp_path: Path, snapshot: ReservationSnapshot
    ) -> None:
        repo = JsonlReservationStateRepo(data_dir=tmp_path)
        repo.save(snapshot=snapshot)

        repo.save(snapshot=ReservationSnapshot())

        assert repo.load() == ReservationSnapshot()
        assert not list(tmp_path.glob('*.tmp'))

    def test_malformed_lines_are_skipped(self, tmp_path: Path) -> None:
        (tmp_path / 'bookings.jsonl').write_bytes(
            b'{"trip_id": "T1", "passenger_id": "P001", "seat_number": 1}\n'
            b'not json at all\n'
            b'\n'
            b'{"trip_id": "T1", "passenger_id": "P002"}\n'
            b'[1, 2, 3]\n'
            b'{"trip_id": "T1", "passenger_id": "P003", "seat_number": "two"}\n'
            b'{"trip_id": "T1", "passenger_id": "P004", "seat_number": 4}\n'
        )

        loaded = JsonlReservationStateRepo(data_dir=tmp_path).load()

        assert loaded.bookings == [
            BookingRecord(trip_id='T1', passenger_id='P001', seat_number=1),
            BookingRecord(trip_id='T1', passenger_id='P004', seat_number=4),
        ]

    def test_non_integral_numbers_and_nulls_are_skipped(self, tmp_path: Path) -> None:
        (tmp_path / 'bookings.jsonl').write_bytes(
            b'{"trip_id": "T1", "passenger_id": "P001", "seat_number": 2.7}\n'
            b'{"trip_id": "T1", "passenger_id": null, "seat_number": 1}\n'
            b'{"trip_id": "T1", "passenger_id": "P002", "seat_number": true}\n'
            b'{"trip_id": "T1", "passenger_id": "P003", "seat_number": 3.0}\n'
        )
        (tmp_path / 'trips.jsonl').write_bytes(
            b'{"trip_id": "T1", "seat_count": 2, "origin": "Mumbai", "destination": "Pune",'
            b' "departure_time": "08:30", "fare": null}\n'
        )

        loaded = JsonlReservationStateRepo(data_dir=tmp_path).load()

        assert loaded.bookings == [
            BookingRecord(trip_id='T1', passenger_id='P003', seat_number=3),
        ]
        assert loaded.trips == []

    def test_failed_write_keeps_previous_snapshot(
        self, tmp_path: Path, snapshot: ReservationSnapshot
    ) -> None:
        repo = JsonlReservationStateRepo(data_dir=tmp_path)
        repo.save(snapshot=snapshot)
        # The waitlist file is written last; a directory in its .tmp slot makes it fail
        (tmp_path / 'waitlist.jsonl.tmp').mkdir()

        with pytest.raises(OSError):
            repo.save(snapshot=ReservationSnapshot())

        assert repo.load() == snapshot
        assert sorted(p.name for p in tmp_path.glob('*.tmp')) == ['waitlist.jsonl.tmp']


@pytest.mark.integration
class TestFailedAutosaveKeepsStoreConsistent:
    def test_reload_after_failed_autosave_matches_last_good_save(
        self,
        tmp_path: Path,
        passenger_registry: InMemoryPassengerRegistry,
        trip_registry: InMemoryTripRegistry,
        make_passenger: Callable[..., Passenger],
        make_trip: Callable[..., Trip],
    ) -> None:
        repo = JsonlReservationStateRepo(data_dir=tmp_path)
        persister = SaveReservationStateUseCase(
            passenger_registry=passenger_registry, trip_registry=trip_registry, state_repo=repo
        )
        asha = make_passenger('P001', 'Asha Rao')
        bilal = make_passenger('P002', 'Bilal Khan')
        passenger_registry.add(passenger=asha)
        passenger_registry.add(passenger=bilal)
        trip = make_trip('T1', seat_count=1)
        trip_registry.add(trip=trip)
        trip.book_seat(passenger=asha, seat_number=1)
        trip.book_seat(passenger=bilal, seat_number=1)
        persister.execute()
        (tmp_path / 'waitlist.jsonl.tmp').mkdir()

        result = CancelBookingUseCase(
            passenger_registry=passenger_registry,
            trip_registry=trip_registry,
            state_persister=persister,
        ).execute(trip_id='T1', passenger_id='P001', seat_number=1)

        assert result.promoted_passenger_id == 'P002'
        reloaded_trips = InMemoryTripRegistry()
        LoadReservationStateUseCase(
            passenger_registry=InMemoryPassengerRegistry(),
            trip_registry=reloaded_trips,
            state_repo=repo,
            waitlist_capacity=2,
        ).execute()
        reloaded = reloaded_trips.find_by_id(trip_id='T1')
        assert reloaded is not None
        booking = reloaded.booking_at(1)
        assert booking is not None
        assert booking.passenger_id == 'P001'
        assert [p.passenger_id for p in reloaded.waiting_passengers()] == ['P002']
