import attrs

from src.platform.exception.exceptions import ValidationError
from src.service.reservation.domain.entity.passenger_entity import Passenger


def _validate_seat_number(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value <= 0:
        raise ValidationError('Invalid seat number')


@attrs.frozen
class Booking:
    """One passenger holding one seat on one trip.

    Only a trip's seat ledger creates or drops these.
    """

    trip_id: str
    passenger: Passenger
    seat_number: int = attrs.field(validator=_validate_seat_number)

    @property
    def passenger_id(self) -> str:
        return self.passenger.passenger_id

    def __str__(self) -> str:
        return (
            f'Seat {self.seat_number} booked by {self.passenger.name} '
            f'(ID: {self.passenger.passenger_id})'
        )
