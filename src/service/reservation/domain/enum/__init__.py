"""Reservation Domain Enums"""

from src.service.reservation.domain.enum.reservation_outcome import ReservationOutcome
from src.service.reservation.domain.enum.seat_status import SeatStatus

__all__ = ['ReservationOutcome', 'SeatStatus']
