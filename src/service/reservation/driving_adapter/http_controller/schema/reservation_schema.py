from typing import List, Optional

from pydantic import BaseModel

from src.service.reservation.app.dto.trip_summary import TripBookings, TripWaitlist
from src.service.reservation.domain.enum.reservation_outcome import ReservationOutcome


class BookSeatRequest(BaseModel):
    passenger_id: str
    seat_number: Optional[int] = None  # omitted: lowest free seat

    class Config:
        json_schema_extra = {
            'examples': [
                {'passenger_id': 'P001', 'seat_number': 12},
                {'passenger_id': 'P002'},
            ]
        }


class CancelBookingRequest(BaseModel):
    passenger_id: str
    seat_number: int

    class Config:
        json_schema_extra = {'example': {'passenger_id': 'P001', 'seat_number': 12}}


class JoinWaitlistRequest(BaseModel):
    passenger_id: str


class BookingResultResponse(BaseModel):
    model_config = {'from_attributes': True}

    outcome: ReservationOutcome
    trip_id: str
    passenger_id: str
    passenger_name: str
    fare: float
    seat_number: Optional[int] = None
    waitlist_position: Optional[int] = None


class CancellationResponse(BaseModel):
    model_config = {'from_attributes': True}

    trip_id: str
    seat_number: int
    cancelled_passenger_id: str
    notified_passenger_ids: List[str]
    promoted_passenger_id: Optional[str] = None
    promoted_passenger_name: Optional[str] = None


class WaitlistJoinResponse(BaseModel):
    model_config = {'from_attributes': True}

    trip_id: str
    passenger_id: str
    position: int


class SeatBookingResponse(BaseModel):
    seat_number: int
    passenger_id: str
    passenger_name: str


class TripBookingsResponse(BaseModel):
    trip_id: str
    bookings: List[SeatBookingResponse]

    @classmethod
    def from_dto(cls, dto: TripBookings) -> 'TripBookingsResponse':
        return cls(
            trip_id=dto.trip_id,
            bookings=[
                SeatBookingResponse(
                    seat_number=booking.seat_number,
                    passenger_id=booking.passenger_id,
                    passenger_name=booking.passenger.name,
                )
                for booking in dto.bookings
            ],
        )


class WaitingPassengerResponse(BaseModel):
    position: int
    passenger_id: str
    passenger_name: str


class TripWaitlistResponse(BaseModel):
    trip_id: str
    capacity: int
    passengers: List[WaitingPassengerResponse]

    @classmethod
    def from_dto(cls, dto: TripWaitlist) -> 'TripWaitlistResponse':
        return cls(
            trip_id=dto.trip_id,
            capacity=dto.capacity,
            passengers=[
                WaitingPassengerResponse(
                    position=position,
                    passenger_id=passenger.passenger_id,
                    passenger_name=passenger.name,
                )
                for position, passenger in enumerate(dto.passengers, start=1)
            ],
        )
