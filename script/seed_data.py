#!/usr/bin/env python3
"""
State Seed Script
Populate sample trips and passengers into the JSON Lines state store

Features:
1. Register a handful of trips on a few routes
2. Register test passengers
3. Save everything under DATA_DIR so the API picks it up on next start

Notes:
- Existing state in DATA_DIR is loaded first; trips that already exist are skipped
"""

from dataclasses import dataclass

from src.platform.config.di import container
from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.command.register_passenger_use_case import (
    RegisterPassengerUseCase,
)
from src.service.reservation.app.command.register_trip_use_case import RegisterTripUseCase


@dataclass
class TripConfig:
    """Trip seed configuration"""

    trip_id: str
    seat_count: int
    origin: str
    destination: str
    departure_time: str
    fare: float


@dataclass
class PassengerConfig:
    """Passenger seed configuration"""

    name: str
    phone: str
    email: str
    city: str
    age: int


SAMPLE_TRIPS = [
    TripConfig('T101', 40, 'Mumbai', 'Pune', '06:30', 450.0),
    TripConfig('T102', 40, 'Mumbai', 'Pune', '18:15', 500.0),
    TripConfig('T201', 30, 'Bengaluru', 'Mysuru', '07:00', 320.0),
    TripConfig('T301', 20, 'Delhi', 'Agra', '22:45', 650.0),
]

SAMPLE_PASSENGERS = [
    PassengerConfig('Asha Rao', '9876543210', 'asha@example.com', 'Pune', 34),
    PassengerConfig('Bilal Khan', '9123456780', 'bilal@example.com', 'Mumbai', 27),
    PassengerConfig('Chen Wei', '9988776655', 'chen@example.com', 'Bengaluru', 45),
]


def seed() -> None:
    config = container.config_service()
    container.load_state_use_case().execute()

    trip_use_case = RegisterTripUseCase(
        trip_registry=container.trip_registry(),
        waitlist_capacity=config.WAITLIST_CAPACITY,
        max_seats_per_trip=config.MAX_SEATS_PER_TRIP,
    )
    for trip in SAMPLE_TRIPS:
        try:
            trip_use_case.register(
                trip_id=trip.trip_id,
                seat_count=trip.seat_count,
                origin=trip.origin,
                destination=trip.destination,
                departure_time=trip.departure_time,
                fare=trip.fare,
            )
        except ConflictError:
            Logger.base.info(f'⏭️ [SEED] Trip {trip.trip_id} already exists, skipping')

    passenger_use_case = RegisterPassengerUseCase(passenger_registry=container.passenger_registry())
    for passenger in SAMPLE_PASSENGERS:
        passenger_use_case.register(
            name=passenger.name,
            phone=passenger.phone,
            email=passenger.email,
            city=passenger.city,
            age=passenger.age,
        )

    container.state_persister().execute()
    Logger.base.info(f'✅ [SEED] State written to {config.DATA_DIR}')


if __name__ == '__main__':
    seed()
