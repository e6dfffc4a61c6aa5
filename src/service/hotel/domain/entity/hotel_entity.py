from datetime import datetime
from typing import List, Optional

import attrs


@attrs.define
class RoomEntity:
    name: str
    capacity: int
    hotel_id: int
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@attrs.define
class HotelEntity:
    name: str
    image: str
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    rooms: List[RoomEntity] = attrs.field(factory=list)
