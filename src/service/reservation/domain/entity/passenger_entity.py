import re

import attrs

from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger


PHONE_PATTERN = re.compile(r'\d{10}')
EMAIL_PATTERN = re.compile(r'^[A-Za-z0-9+_.-]+@(.+)$')
MIN_AGE = 1
MAX_AGE = 120


def same_id(left: str, right: str) -> bool:
    """Passenger and trip identifiers compare case-insensitively."""
    return left.casefold() == right.casefold()


@attrs.frozen
class Passenger:
    passenger_id: str
    name: str
    phone: str
    email: str
    city: str
    age: int

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        passenger_id: str,
        name: str,
        phone: str,
        email: str,
        city: str,
        age: int,
    ) -> 'Passenger':
        passenger_id = passenger_id.strip()
        name = name.strip()
        phone = phone.strip()
        email = email.strip()
        city = city.strip()

        if not passenger_id:
            raise ValidationError('Passenger ID cannot be empty.')
        if not name:
            raise ValidationError('Name cannot be empty.')
        if not PHONE_PATTERN.fullmatch(phone):
            raise ValidationError('Invalid phone number. Must be 10 digits.')
        if not EMAIL_PATTERN.match(email):
            raise ValidationError('Invalid email format.')
        if not city:
            raise ValidationError('City cannot be empty.')
        if age < MIN_AGE or age > MAX_AGE:
            raise ValidationError(f'Invalid age. Must be between {MIN_AGE} and {MAX_AGE}.')

        return cls(
            passenger_id=passenger_id,
            name=name,
            phone=phone,
            email=email,
            city=city,
            age=age,
        )

    def has_id(self, passenger_id: str) -> bool:
        return same_id(self.passenger_id, passenger_id)
