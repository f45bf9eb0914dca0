from unittest.mock import Mock

import pytest

from src.platform.exception.exceptions import ConflictError, ValidationError
from src.service.reservation.app.command.register_passenger_use_case import (
    RegisterPassengerUseCase,
)
from src.service.reservation.app.command.register_trip_use_case import RegisterTripUseCase
from src.service.reservation.driven_adapter.registry.in_memory_passenger_registry import (
    InMemoryPassengerRegistry,
)
from src.service.reservation.driven_adapter.registry.in_memory_trip_registry import (
    InMemoryTripRegistry,
)


TRIP_FIELDS = {
    'seat_count': 40,
    'origin': 'Mumbai',
    'destination': 'Pune',
    'departure_time': '08:30',
    'fare': 450.0,
}


@pytest.mark.unit
class TestRegisterPassenger:
    def test_assigns_sequential_ids(self, passenger_registry: InMemoryPassengerRegistry) -> None:
        persister = Mock()
        use_case = RegisterPassengerUseCase(
            passenger_registry=passenger_registry, state_persister=persister
        )

        first = use_case.register(
            name='Asha', phone='9876543210', email='asha@example.com', city='Pune', age=30
        )
        second = use_case.register(
            name='Bilal', phone='9876543211', email='bilal@example.com', city='Goa', age=41
        )

        assert (first.passenger_id, second.passenger_id) == ('P001', 'P002')
        assert persister.autosave.call_count == 2

    def test_rejected_registration_burns_no_id(
        self, passenger_registry: InMemoryPassengerRegistry
    ) -> None:
        use_case = RegisterPassengerUseCase(passenger_registry=passenger_registry)

        with pytest.raises(ValidationError):
            use_case.register(name='Asha', phone='123', email='a@b.c', city='Pune', age=30)
        passenger = use_case.register(
            name='Asha', phone='9876543210', email='a@b.c', city='Pune', age=30
        )

        assert passenger.passenger_id == 'P001'


@pytest.mark.unit
class TestRegisterTrip:
    @pytest.fixture
    def use_case(self, trip_registry: InMemoryTripRegistry) -> RegisterTripUseCase:
        return RegisterTripUseCase(
            trip_registry=trip_registry, waitlist_capacity=5, max_seats_per_trip=50
        )

    def test_registers_trip_with_configured_waitlist(
        self, use_case: RegisterTripUseCase, trip_registry: InMemoryTripRegistry
    ) -> None:
        trip = use_case.register(trip_id=' T100 ', **TRIP_FIELDS)

        assert trip.trip_id == 'T100'
        assert trip.waitlist.capacity == 5
        assert trip_registry.find_by_id(trip_id='t100') is trip

    def test_duplicate_id_is_conflict(self, use_case: RegisterTripUseCase) -> None:
        use_case.register(trip_id='T100', **TRIP_FIELDS)

        with pytest.raises(ConflictError) as exc_info:
            use_case.register(trip_id='t100', **TRIP_FIELDS)

        assert exc_info.value.message == 'Trip ID already exists.'

    @pytest.mark.parametrize('seat_count', [0, 51])
    def test_seat_count_bounds(self, use_case: RegisterTripUseCase, seat_count: int) -> None:
        with pytest.raises(ValidationError) as exc_info:
            use_case.register(trip_id='T100', **{**TRIP_FIELDS, 'seat_count': seat_count})

        assert exc_info.value.message == 'Invalid number of seats. Must be between 1 and 50.'
