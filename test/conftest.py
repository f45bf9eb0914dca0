"""
Test Configuration and Fixtures

This module provides:
- Test environment variables (log dir, data dir) set before any app import
- Registry fixtures and small factories for passengers and trips
- BDD step definitions (imported from bdd_steps_loader.py)

Architecture:
- Unit tests (test/**/unit/): pure in-process objects, collaborators stubbed or mocked
- Integration tests: real registries, real JSON Lines files under tmp_path, TestClient
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time (src.platform.config.core_setting)
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # Never touch the real data directory from tests
    os.environ['DATA_DIR'] = tempfile.mkdtemp(prefix='bus_reservation_test_')
    os.environ.setdefault('AUTOSAVE_STATE', 'false')
    os.environ.setdefault('WAITLIST_CAPACITY', '100')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Callable  # noqa: E402

import pytest  # noqa: E402

from src.service.reservation.domain.aggregate.trip_aggregate import Trip  # noqa: E402
from src.service.reservation.domain.entity.passenger_entity import Passenger  # noqa: E402
from src.service.reservation.driven_adapter.registry.in_memory_passenger_registry import (  # noqa: E402
    InMemoryPassengerRegistry,
)
from src.service.reservation.driven_adapter.registry.in_memory_trip_registry import (  # noqa: E402
    InMemoryTripRegistry,
)
from test.bdd_steps_loader import *  # noqa: E402, F403


@pytest.fixture
def passenger_registry() -> InMemoryPassengerRegistry:
    return InMemoryPassengerRegistry()


@pytest.fixture
def trip_registry() -> InMemoryTripRegistry:
    return InMemoryTripRegistry()


@pytest.fixture
def make_passenger() -> Callable[..., Passenger]:
    def _make(passenger_id: str = 'P001', name: str = 'Asha Rao', **overrides: object) -> Passenger:
        fields: dict = {
            'phone': '9876543210',
            'email': f'{passenger_id.lower()}@example.com',
            'city': 'Pune',
            'age': 30,
        }
        fields.update(overrides)
        return Passenger.create(passenger_id=passenger_id, name=name, **fields)

    return _make


@pytest.fixture
def make_trip() -> Callable[..., Trip]:
    def _make(
        trip_id: str = 'T1', seat_count: int = 3, waitlist_capacity: int = 2, **overrides: object
    ) -> Trip:
        fields: dict = {
            'origin': 'Mumbai',
            'destination': 'Pune',
            'departure_time': '08:30',
            'fare': 450.0,
        }
        fields.update(overrides)
        return Trip.create(
            trip_id=trip_id,
            seat_count=seat_count,
            waitlist_capacity=waitlist_capacity,
            **fields,
        )

    return _make
