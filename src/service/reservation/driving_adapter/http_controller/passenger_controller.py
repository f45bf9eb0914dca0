from typing import List, Literal

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.command.register_passenger_use_case import (
    RegisterPassengerUseCase,
)
from src.service.reservation.app.query.list_passengers_use_case import ListPassengersUseCase
from src.service.reservation.driving_adapter.http_controller.schema.passenger_schema import (
    PassengerCreateRequest,
    PassengerResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def register_passenger(
    request: PassengerCreateRequest,
    use_case: RegisterPassengerUseCase = Depends(RegisterPassengerUseCase.depends),
) -> PassengerResponse:
    passenger = use_case.register(
        name=request.name,
        phone=request.phone,
        email=request.email,
        city=request.city,
        age=request.age,
    )
    return PassengerResponse.model_validate(passenger)


@router.get('')
@Logger.io
async def list_passengers(
    order: Literal['oldest', 'newest'] = 'oldest',
    use_case: ListPassengersUseCase = Depends(ListPassengersUseCase.depends),
) -> List[PassengerResponse]:
    return [
        PassengerResponse.model_validate(passenger)
        for passenger in use_case.list_passengers(order=order)
    ]


@router.get('/{passenger_id}')
@Logger.io
async def get_passenger(
    passenger_id: str,
    use_case: ListPassengersUseCase = Depends(ListPassengersUseCase.depends),
) -> PassengerResponse:
    return PassengerResponse.model_validate(use_case.get_passenger(passenger_id=passenger_id))
