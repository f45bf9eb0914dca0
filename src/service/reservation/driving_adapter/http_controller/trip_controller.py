from typing import List, Optional

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.command.register_trip_use_case import RegisterTripUseCase
from src.service.reservation.app.dto.trip_summary import TripSummary
from src.service.reservation.app.query.get_seat_availability_use_case import (
    GetSeatAvailabilityUseCase,
)
from src.service.reservation.app.query.search_trips_use_case import SearchTripsUseCase
from src.service.reservation.driving_adapter.http_controller.schema.trip_schema import (
    SeatAvailabilityResponse,
    TripCreateRequest,
    TripResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def register_trip(
    request: TripCreateRequest,
    use_case: RegisterTripUseCase = Depends(RegisterTripUseCase.depends),
) -> TripResponse:
    trip = use_case.register(
        trip_id=request.trip_id,
        seat_count=request.seat_count,
        origin=request.origin,
        destination=request.destination,
        departure_time=request.departure_time,
        fare=request.fare,
    )
    return TripResponse.model_validate(TripSummary.from_trip(trip=trip))


@router.get('')
@Logger.io
async def list_trips(
    origin: Optional[str] = None,
    destination: Optional[str] = None,
    use_case: SearchTripsUseCase = Depends(SearchTripsUseCase.depends),
) -> List[TripResponse]:
    """All trips, or only those on a route when origin or destination is given."""
    if origin is None and destination is None:
        summaries = use_case.list_trips()
    else:
        summaries = use_case.search(origin=origin or '', destination=destination or '')
    return [TripResponse.model_validate(summary) for summary in summaries]


@router.get('/{trip_id}')
@Logger.io
async def get_trip(
    trip_id: str,
    use_case: SearchTripsUseCase = Depends(SearchTripsUseCase.depends),
) -> TripResponse:
    return TripResponse.model_validate(use_case.get_trip(trip_id=trip_id))


@router.get('/{trip_id}/seats')
@Logger.io
async def get_seat_availability(
    trip_id: str,
    use_case: GetSeatAvailabilityUseCase = Depends(GetSeatAvailabilityUseCase.depends),
) -> SeatAvailabilityResponse:
    return SeatAvailabilityResponse.model_validate(use_case.execute(trip_id=trip_id))
