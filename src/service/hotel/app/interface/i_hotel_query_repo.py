"""
Hotel Query Repository Interface - CQRS Read Side
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.hotel.domain.entity.hotel_entity import HotelEntity


class IHotelQueryRepo(ABC):
    @abstractmethod
    async def list_hotels(self) -> List[HotelEntity]:
        """List all hotels (without rooms), ordered by id."""
        pass

    @abstractmethod
    async def get_hotel_with_rooms(self, *, hotel_id: int) -> Optional[HotelEntity]:
        """Get a hotel together with all of its rooms."""
        pass
