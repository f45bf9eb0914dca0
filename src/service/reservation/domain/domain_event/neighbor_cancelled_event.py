"""
Neighbor Cancelled Event

Advisory event raised for each occupied seat numerically adjacent to a seat
that is about to be cancelled. Delivering it has no effect on seat state.
"""

import attrs

from src.service.reservation.domain.entity.booking_entity import Booking
from src.service.reservation.domain.entity.passenger_entity import Passenger


@attrs.frozen
class NeighborCancelledEvent:
    trip_id: str
    neighbor_passenger_id: str
    neighbor_name: str
    neighbor_seat: int
    cancelled_seat: int
    cancelling_passenger_id: str
    cancelling_passenger_name: str

    @classmethod
    def from_neighbor(
        cls, *, neighbor: Booking, cancelled_seat: int, cancelling_passenger: Passenger
    ) -> 'NeighborCancelledEvent':
        return cls(
            trip_id=neighbor.trip_id,
            neighbor_passenger_id=neighbor.passenger.passenger_id,
            neighbor_name=neighbor.passenger.name,
            neighbor_seat=neighbor.seat_number,
            cancelled_seat=cancelled_seat,
            cancelling_passenger_id=cancelling_passenger.passenger_id,
            cancelling_passenger_name=cancelling_passenger.name,
        )

    @property
    def message(self) -> str:
        return (
            f'Your neighbor in seat {self.cancelled_seat} ({self.cancelling_passenger_name}) '
            'has canceled their booking.'
        )
