from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.platform.logging.loguru_io import Logger
from src.service.hotel.app.interface.i_hotel_query_repo import IHotelQueryRepo
from src.service.hotel.domain.entity.hotel_entity import HotelEntity, RoomEntity
from src.service.hotel.driven_adapter.model.hotel_model import HotelModel, RoomModel


class HotelQueryRepoImpl(IHotelQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def list_hotels(self) -> List[HotelEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(HotelModel).order_by(HotelModel.id))
            hotel_models = result.scalars().all()

            return [self._hotel_model_to_entity(hotel_model) for hotel_model in hotel_models]

    @Logger.io
    async def get_hotel_with_rooms(self, *, hotel_id: int) -> Optional[HotelEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(HotelModel)
                .options(selectinload(HotelModel.rooms))
                .where(HotelModel.id == hotel_id)
            )
            hotel_model = result.scalar_one_or_none()

            if not hotel_model:
                return None

            hotel = self._hotel_model_to_entity(hotel_model)
            hotel.rooms = [self._room_model_to_entity(room) for room in hotel_model.rooms]
            return hotel

    @staticmethod
    def _hotel_model_to_entity(hotel_model: HotelModel) -> HotelEntity:
        return HotelEntity(
            id=hotel_model.id,
            name=hotel_model.name,
            image=hotel_model.image,
            created_at=hotel_model.created_at,
            updated_at=hotel_model.updated_at,
        )

    @staticmethod
    def _room_model_to_entity(room_model: RoomModel) -> RoomEntity:
        return RoomEntity(
            id=room_model.id,
            name=room_model.name,
            capacity=room_model.capacity,
            hotel_id=room_model.hotel_id,
            created_at=room_model.created_at,
            updated_at=room_model.updated_at,
        )
