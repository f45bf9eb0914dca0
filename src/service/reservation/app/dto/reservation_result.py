from typing import List, Optional

import attrs

from src.service.reservation.domain.enum.reservation_outcome import ReservationOutcome


@attrs.frozen
class BookingResult:
    outcome: ReservationOutcome
    trip_id: str
    passenger_id: str
    passenger_name: str
    fare: float
    seat_number: Optional[int] = None  # requested or assigned seat
    waitlist_position: Optional[int] = None  # 1-based, only when waitlisted


@attrs.frozen
class CancellationResult:
    trip_id: str
    seat_number: int
    cancelled_passenger_id: str
    notified_passenger_ids: List[str] = attrs.field(factory=list)
    promoted_passenger_id: Optional[str] = None
    promoted_passenger_name: Optional[str] = None


@attrs.frozen
class WaitlistResult:
    trip_id: str
    passenger_id: str
    position: int
