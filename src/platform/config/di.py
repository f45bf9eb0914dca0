"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.reservation.app.command.load_reservation_state_use_case import (
    LoadReservationStateUseCase,
)
from src.service.reservation.app.command.save_reservation_state_use_case import (
    SaveReservationStateUseCase,
)
from src.service.reservation.driven_adapter.notification.log_neighbor_notification_sink import (
    LogNeighborNotificationSink,
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


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Registries (process-wide, hold all live trip state)
    passenger_registry = providers.Singleton(InMemoryPassengerRegistry)
    trip_registry = providers.Singleton(InMemoryTripRegistry)

    # Advisory neighbor notifications
    neighbor_notification_sink = providers.Singleton(LogNeighborNotificationSink)

    # Flat-file state store
    state_repo = providers.Singleton(
        JsonlReservationStateRepo, data_dir=config_service.provided.DATA_DIR
    )
    state_persister = providers.Singleton(
        SaveReservationStateUseCase,
        passenger_registry=passenger_registry,
        trip_registry=trip_registry,
        state_repo=state_repo,
        autosave_enabled=config_service.provided.AUTOSAVE_STATE,
    )
    load_state_use_case = providers.Factory(
        LoadReservationStateUseCase,
        passenger_registry=passenger_registry,
        trip_registry=trip_registry,
        state_repo=state_repo,
        waitlist_capacity=config_service.provided.WAITLIST_CAPACITY,
    )


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
