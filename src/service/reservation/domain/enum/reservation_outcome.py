"""
Reservation Outcome Enum

Every booking request resolves to exactly one of these; a full waitlist is
reported as QueueFullError instead.
"""

from enum import StrEnum


class ReservationOutcome(StrEnum):
    CONFIRMED = 'confirmed'
    WAITLISTED = 'waitlisted'
