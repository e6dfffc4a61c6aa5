from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.hotel_metrics import HotelAccessResult, metrics
from src.service.hotel.app.interface.i_hotel_query_repo import IHotelQueryRepo
from src.service.hotel.app.service.hotel_access_service import HotelAccessService
from src.service.hotel.domain.entity.hotel_entity import HotelEntity


OPERATION = 'get'


class GetHotelUseCase:
    def __init__(
        self,
        hotel_query_repo: IHotelQueryRepo,
        hotel_access_service: HotelAccessService,
    ) -> None:
        self.hotel_query_repo = hotel_query_repo
        self.hotel_access_service = hotel_access_service

    @classmethod
    @inject
    def depends(
        cls,
        hotel_query_repo: IHotelQueryRepo = Depends(Provide[Container.hotel_query_repo]),
        hotel_access_service: HotelAccessService = Depends(
            Provide[Container.hotel_access_service]
        ),
    ) -> Self:
        return cls(hotel_query_repo=hotel_query_repo, hotel_access_service=hotel_access_service)

    @Logger.io
    async def get_hotel(self, *, user_id: int, hotel_id: int) -> HotelEntity:
        """Get a hotel with its rooms for a user whose ticket grants hotel access."""
        Logger.base.info(f'🏨 [GET_HOTEL] Loading hotel {hotel_id} for user {user_id}')

        await self.hotel_access_service.ensure_access(user_id=user_id, operation=OPERATION)

        hotel = await self.hotel_query_repo.get_hotel_with_rooms(hotel_id=hotel_id)
        if hotel is None:
            Logger.base.warning(f'⚠️ [GET_HOTEL] Hotel {hotel_id} not found')
            metrics.record_access(operation=OPERATION, result=HotelAccessResult.HOTEL_NOT_FOUND)
            raise NotFoundError('Hotel not found')

        metrics.record_access(operation=OPERATION, result=HotelAccessResult.GRANTED)
        Logger.base.info(f'✅ [GET_HOTEL] Found hotel {hotel_id} with {len(hotel.rooms)} rooms')
        return hotel
