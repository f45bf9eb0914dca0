from collections.abc import Callable

import pytest

from src.platform.exception.exceptions import ConflictError
from src.service.reservation.domain.aggregate.trip_aggregate import Trip
from src.service.reservation.domain.entity.passenger_entity import Passenger
from src.service.reservation.driven_adapter.registry.in_memory_passenger_registry import (
    InMemoryPassengerRegistry,
    PassengerIdAllocator,
)
from src.service.reservation.driven_adapter.registry.in_memory_trip_registry import (
    InMemoryTripRegistry,
)


@pytest.mark.unit
class TestPassengerIdAllocator:
    def test_formats_three_digits(self) -> None:
        allocator = PassengerIdAllocator()

        assert [allocator.allocate() for _ in range(3)] == ['P001', 'P002', 'P003']

    def test_observe_moves_past_loaded_ids(self) -> None:
        allocator = PassengerIdAllocator()
        allocator.observe('P007')
        allocator.observe('P003')
        allocator.observe('legacy-id')

        assert allocator.allocate() == 'P008'

    def test_registries_do_not_share_numbering(self) -> None:
        first = InMemoryPassengerRegistry()
        second = InMemoryPassengerRegistry()
        kwargs = {'name': 'Asha', 'phone': '9876543210', 'email': 'a@b.c', 'city': 'Pune', 'age': 3}

        first.register(**kwargs)

        assert second.register(**kwargs).passenger_id == 'P001'


@pytest.mark.unit
class TestInMemoryPassengerRegistry:
    def test_add_then_register_continues_numbering(
        self,
        passenger_registry: InMemoryPassengerRegistry,
        make_passenger: Callable[..., Passenger],
    ) -> None:
        passenger_registry.add(passenger=make_passenger('P010', 'Asha'))

        passenger = passenger_registry.register(
            name='Bilal', phone='9876543211', email='b@example.com', city='Goa', age=40
        )

        assert passenger.passenger_id == 'P011'
        assert [p.passenger_id for p in passenger_registry.list_all()] == ['P010', 'P011']

    def test_duplicate_id_is_conflict(
        self,
        passenger_registry: InMemoryPassengerRegistry,
        make_passenger: Callable[..., Passenger],
    ) -> None:
        passenger_registry.add(passenger=make_passenger('P001', 'Asha'))

        with pytest.raises(ConflictError):
            passenger_registry.add(passenger=make_passenger('p001', 'Other'))

    def test_lookup_is_case_insensitive(
        self,
        passenger_registry: InMemoryPassengerRegistry,
        make_passenger: Callable[..., Passenger],
    ) -> None:
        passenger_registry.add(passenger=make_passenger('P001', 'Asha'))

        found = passenger_registry.find_by_id(passenger_id=' p001 ')

        assert found is not None
        assert found.name == 'Asha'
        assert passenger_registry.find_by_id(passenger_id='P002') is None


@pytest.mark.unit
class TestInMemoryTripRegistry:
    def test_duplicate_id_is_conflict(
        self, trip_registry: InMemoryTripRegistry, make_trip: Callable[..., Trip]
    ) -> None:
        trip_registry.add(trip=make_trip('T1'))

        with pytest.raises(ConflictError):
            trip_registry.add(trip=make_trip('t1'))

    def test_list_keeps_registration_order(
        self, trip_registry: InMemoryTripRegistry, make_trip: Callable[..., Trip]
    ) -> None:
        for trip_id in ('T3', 'T1', 'T2'):
            trip_registry.add(trip=make_trip(trip_id))

        assert [trip.trip_id for trip in trip_registry.list_all()] == ['T3', 'T1', 'T2']
