from typing import List

from pydantic import BaseModel


class TripCreateRequest(BaseModel):
    trip_id: str
    seat_count: int
    origin: str
    destination: str
    departure_time: str  # HH:MM, 24-hour
    fare: float

    class Config:
        json_schema_extra = {
            'example': {
                'trip_id': 'T100',
                'seat_count': 40,
                'origin': 'Mumbai',
                'destination': 'Pune',
                'departure_time': '08:30',
                'fare': 450.0,
            }
        }


class TripResponse(BaseModel):
    model_config = {'from_attributes': True}

    trip_id: str
    origin: str
    destination: str
    departure_time: str
    seat_count: int
    fare: float
    available_count: int
    booked_count: int
    waitlist_length: int


class SeatAvailabilityResponse(BaseModel):
    model_config = {'from_attributes': True}

    trip_id: str
    available_seats: List[int]
    available_count: int
    booked_count: int
