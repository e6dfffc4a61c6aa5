from abc import ABC, abstractmethod
from typing import Optional

from src.service.hotel.domain.entity.session_entity import SessionEntity


class ISessionQueryRepo(ABC):
    @abstractmethod
    async def get_by_token(self, *, token: str) -> Optional[SessionEntity]:
        pass
