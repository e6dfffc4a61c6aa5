from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, status

from src.platform.logging.loguru_io import Logger
from src.service.hotel.app.query.get_hotel_use_case import GetHotelUseCase
from src.service.hotel.app.query.list_hotels_use_case import ListHotelsUseCase
from src.service.hotel.driving_adapter.http_controller.auth.token_auth import (
    get_current_user_id,
)
from src.service.hotel.driving_adapter.http_controller.schema.hotel_schema import (
    HotelResponse,
    HotelWithRoomsResponse,
)


# Upper bound of the Integer primary key column
MAX_HOTEL_ID = 2_147_483_647

# Authentication runs before path validation for every route in the group
router = APIRouter(dependencies=[Depends(get_current_user_id)])


@router.get('', status_code=status.HTTP_200_OK, response_model_by_alias=True)
@Logger.io
async def list_hotels(
    user_id: int = Depends(get_current_user_id),
    use_case: ListHotelsUseCase = Depends(ListHotelsUseCase.depends),
) -> List[HotelResponse]:
    hotels = await use_case.list_hotels(user_id=user_id)
    return [HotelResponse.from_entity(hotel) for hotel in hotels]


@router.get('/{hotel_id}', status_code=status.HTTP_200_OK, response_model_by_alias=True)
@Logger.io
async def get_hotel(
    hotel_id: Annotated[int, Path(ge=1, le=MAX_HOTEL_ID)],
    user_id: int = Depends(get_current_user_id),
    use_case: GetHotelUseCase = Depends(GetHotelUseCase.depends),
) -> HotelWithRoomsResponse:
    hotel = await use_case.get_hotel(user_id=user_id, hotel_id=hotel_id)
    return HotelWithRoomsResponse.from_entity(hotel)
