import pytest

from src.platform.exception.exceptions import ValidationError
from src.service.reservation.domain.entity.booking_entity import Booking
from src.service.reservation.domain.entity.passenger_entity import Passenger


VALID = {
    'passenger_id': 'P001',
    'name': 'Asha Rao',
    'phone': '9876543210',
    'email': 'asha@example.com',
    'city': 'Pune',
    'age': 30,
}


@pytest.mark.unit
class TestPassengerCreate:
    def test_strips_whitespace(self) -> None:
        passenger = Passenger.create(**{**VALID, 'name': '  Asha Rao ', 'city': ' Pune'})

        assert passenger.name == 'Asha Rao'
        assert passenger.city == 'Pune'

    @pytest.mark.parametrize(
        'field,value,message',
        [
            ('passenger_id', '  ', 'Passenger ID cannot be empty.'),
            ('name', '', 'Name cannot be empty.'),
            ('phone', '12345', 'Invalid phone number. Must be 10 digits.'),
            ('phone', '98765abcde', 'Invalid phone number. Must be 10 digits.'),
            ('email', 'not-an-email', 'Invalid email format.'),
            ('city', ' ', 'City cannot be empty.'),
            ('age', 0, 'Invalid age. Must be between 1 and 120.'),
            ('age', 121, 'Invalid age. Must be between 1 and 120.'),
        ],
    )
    def test_rejects_invalid_field(self, field: str, value: object, message: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Passenger.create(**{**VALID, field: value})

        assert exc_info.value.message == message

    def test_id_comparison_ignores_case(self) -> None:
        passenger = Passenger.create(**VALID)

        assert passenger.has_id('p001')
        assert not passenger.has_id('P002')


@pytest.mark.unit
class TestBooking:
    def test_str_names_seat_and_passenger(self) -> None:
        booking = Booking(trip_id='T1', passenger=Passenger.create(**VALID), seat_number=3)

        assert str(booking) == 'Seat 3 booked by Asha Rao (ID: P001)'
        assert booking.passenger_id == 'P001'

    def test_rejects_non_positive_seat(self) -> None:
        with pytest.raises(ValidationError):
            Booking(trip_id='T1', passenger=Passenger.create(**VALID), seat_number=0)
