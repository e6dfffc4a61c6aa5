from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.hotel_metrics import HotelAccessResult, metrics
from src.service.hotel.app.interface.i_hotel_query_repo import IHotelQueryRepo
from src.service.hotel.app.service.hotel_access_service import HotelAccessService
from src.service.hotel.domain.entity.hotel_entity import HotelEntity


OPERATION = 'list'


class ListHotelsUseCase:
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
    async def list_hotels(self, *, user_id: int) -> List[HotelEntity]:
        """List every hotel for a user whose ticket grants hotel access."""
        Logger.base.info(f'🏨 [LIST_HOTELS] Checking hotel access for user {user_id}')

        await self.hotel_access_service.ensure_access(user_id=user_id, operation=OPERATION)

        hotels = await self.hotel_query_repo.list_hotels()
        if not hotels:
            metrics.record_access(operation=OPERATION, result=HotelAccessResult.NO_HOTELS)
            raise NotFoundError('There are no hotels registered')

        metrics.record_access(operation=OPERATION, result=HotelAccessResult.GRANTED)
        Logger.base.info(f'✅ [LIST_HOTELS] Found {len(hotels)} hotels for user {user_id}')
        return hotels
