from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.command.book_seat_use_case import BookSeatUseCase
from src.service.reservation.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.reservation.app.command.join_waitlist_use_case import JoinWaitlistUseCase
from src.service.reservation.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.reservation.app.query.list_waitlists_use_case import ListWaitlistsUseCase
from src.service.reservation.driving_adapter.http_controller.schema.reservation_schema import (
    BookingResultResponse,
    BookSeatRequest,
    CancelBookingRequest,
    CancellationResponse,
    JoinWaitlistRequest,
    TripBookingsResponse,
    TripWaitlistResponse,
    WaitlistJoinResponse,
)


router = APIRouter()


@router.post('/trip/{trip_id}/booking', status_code=status.HTTP_201_CREATED)
@Logger.io
async def book_seat(
    trip_id: str,
    request: BookSeatRequest,
    use_case: BookSeatUseCase = Depends(BookSeatUseCase.depends),
) -> BookingResultResponse:
    """Confirmed or waitlisted; 409 only when the waitlist is full too."""
    result = use_case.execute(
        trip_id=trip_id, passenger_id=request.passenger_id, seat_number=request.seat_number
    )
    return BookingResultResponse.model_validate(result)


@router.post('/trip/{trip_id}/cancellation', status_code=status.HTTP_200_OK)
@Logger.io
async def cancel_booking(
    trip_id: str,
    request: CancelBookingRequest,
    use_case: CancelBookingUseCase = Depends(CancelBookingUseCase.depends),
) -> CancellationResponse:
    result = use_case.execute(
        trip_id=trip_id, passenger_id=request.passenger_id, seat_number=request.seat_number
    )
    return CancellationResponse.model_validate(result)


@router.post('/trip/{trip_id}/waitlist', status_code=status.HTTP_201_CREATED)
@Logger.io
async def join_waitlist(
    trip_id: str,
    request: JoinWaitlistRequest,
    use_case: JoinWaitlistUseCase = Depends(JoinWaitlistUseCase.depends),
) -> WaitlistJoinResponse:
    result = use_case.execute(trip_id=trip_id, passenger_id=request.passenger_id)
    return WaitlistJoinResponse.model_validate(result)


@router.get('/trip/{trip_id}/waitlist')
@Logger.io
async def get_trip_waitlist(
    trip_id: str,
    use_case: ListWaitlistsUseCase = Depends(ListWaitlistsUseCase.depends),
) -> TripWaitlistResponse:
    return TripWaitlistResponse.from_dto(use_case.for_trip(trip_id=trip_id))


@router.get('/booking')
@Logger.io
async def list_bookings(
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[TripBookingsResponse]:
    return [TripBookingsResponse.from_dto(group) for group in use_case.execute()]


@router.get('/waitlist')
@Logger.io
async def list_waitlists(
    use_case: ListWaitlistsUseCase = Depends(ListWaitlistsUseCase.depends),
) -> List[TripWaitlistResponse]:
    return [TripWaitlistResponse.from_dto(view) for view in use_case.for_all_trips()]
