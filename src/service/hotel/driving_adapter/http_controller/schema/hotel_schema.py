from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.service.hotel.domain.entity.hotel_entity import HotelEntity, RoomEntity


class HotelResponse(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'id': 1,
                'name': 'Driven Resort',
                'image': 'https://example.com/driven-resort.png',
                'createdAt': '2024-01-01T00:00:00Z',
                'updatedAt': '2024-01-01T00:00:00Z',
            }
        },
    )

    id: int
    name: str
    image: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, hotel: HotelEntity) -> 'HotelResponse':
        return cls(
            id=hotel.id,  # type: ignore[arg-type]
            name=hotel.name,
            image=hotel.image,
            created_at=hotel.created_at,  # type: ignore[arg-type]
            updated_at=hotel.updated_at,  # type: ignore[arg-type]
        )


class RoomResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, room: RoomEntity) -> 'RoomResponse':
        return cls(
            id=room.id,  # type: ignore[arg-type]
            name=room.name,
            capacity=room.capacity,
            hotel_id=room.hotel_id,
            created_at=room.created_at,  # type: ignore[arg-type]
            updated_at=room.updated_at,  # type: ignore[arg-type]
        )


class HotelWithRoomsResponse(HotelResponse):
    # Serialized as `Rooms`
    rooms: List[RoomResponse] = Field(alias='Rooms')

    @classmethod
    def from_entity(cls, hotel: HotelEntity) -> 'HotelWithRoomsResponse':
        return cls(
            id=hotel.id,  # type: ignore[arg-type]
            name=hotel.name,
            image=hotel.image,
            created_at=hotel.created_at,  # type: ignore[arg-type]
            updated_at=hotel.updated_at,  # type: ignore[arg-type]
            rooms=[RoomResponse.from_entity(room) for room in hotel.rooms],
        )
