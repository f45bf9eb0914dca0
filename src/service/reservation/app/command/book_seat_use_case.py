from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.command.save_reservation_state_use_case import (
    SaveReservationStateUseCase,
)
from src.service.reservation.app.dto.reservation_result import BookingResult
from src.service.reservation.app.interface.i_passenger_registry import IPassengerRegistry
from src.service.reservation.app.interface.i_trip_registry import ITripRegistry
from src.service.reservation.domain.enum.reservation_outcome import ReservationOutcome


class BookSeatUseCase:
    """
    Book a seat on a trip, degrading to the waitlist when the seat is taken.

    Flow:
    1. Resolve passenger and trip (NotFoundError when unknown)
    2. Reject seat numbers outside the trip before touching the ledger
    3. No seat given: take the lowest free seat, or queue when the trip is full
    4. Delegate to the ledger, which books or queues
       (QueueFullError when the waitlist is at capacity; nothing changes)
    """

    def __init__(
        self,
        *,
        passenger_registry: IPassengerRegistry,
        trip_registry: ITripRegistry,
        state_persister: Optional[SaveReservationStateUseCase] = None,
    ) -> None:
        self.passenger_registry = passenger_registry
        self.trip_registry = trip_registry
        self.state_persister = state_persister

    @classmethod
    @inject
    def depends(
        cls,
        passenger_registry: IPassengerRegistry = Depends(Provide[Container.passenger_registry]),
        trip_registry: ITripRegistry = Depends(Provide[Container.trip_registry]),
        state_persister: SaveReservationStateUseCase = Depends(
            Provide[Container.state_persister]
        ),
    ) -> Self:
        return cls(
            passenger_registry=passenger_registry,
            trip_registry=trip_registry,
            state_persister=state_persister,
        )

    @Logger.io
    def execute(
        self, *, trip_id: str, passenger_id: str, seat_number: Optional[int] = None
    ) -> BookingResult:
        if not passenger_id.strip():
            raise ValidationError('Passenger ID cannot be empty.')
        passenger = self.passenger_registry.find_by_id(passenger_id=passenger_id.strip())
        if not passenger:
            raise NotFoundError('Passenger not found. Please register first.')

        if not trip_id.strip():
            raise ValidationError('Trip ID cannot be empty.')
        trip = self.trip_registry.find_by_id(trip_id=trip_id.strip())
        if not trip:
            raise NotFoundError('Trip not found.')

        if seat_number is None:
            seat_number = trip.first_available_seat()
            if seat_number is None:
                position = trip.join_waitlist(passenger=passenger)
                return self._done(
                    BookingResult(
                        outcome=ReservationOutcome.WAITLISTED,
                        trip_id=trip.trip_id,
                        passenger_id=passenger.passenger_id,
                        passenger_name=passenger.name,
                        fare=trip.fare,
                        waitlist_position=position,
                    )
                )
        elif not trip.is_valid_seat(seat_number):
            raise ValidationError(f'Invalid seat number. Must be between 1 and {trip.seat_count}.')

        outcome = trip.book_seat(passenger=passenger, seat_number=seat_number)

        if outcome is ReservationOutcome.CONFIRMED:
            Logger.base.info(
                f'🎫 [BOOK] Seat {seat_number} booked for {passenger.name} '
                f'(ID: {passenger.passenger_id}) on {trip.trip_id} at {trip.fare}'
            )
            result = BookingResult(
                outcome=outcome,
                trip_id=trip.trip_id,
                passenger_id=passenger.passenger_id,
                passenger_name=passenger.name,
                fare=trip.fare,
                seat_number=seat_number,
            )
        else:
            result = BookingResult(
                outcome=outcome,
                trip_id=trip.trip_id,
                passenger_id=passenger.passenger_id,
                passenger_name=passenger.name,
                fare=trip.fare,
                seat_number=seat_number,
                waitlist_position=trip.waitlist.size(),
            )
        return self._done(result)

    def _done(self, result: BookingResult) -> BookingResult:
        if self.state_persister:
            self.state_persister.autosave()
        return result
