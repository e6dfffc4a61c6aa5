from abc import ABC, abstractmethod
from typing import Optional

from src.service.hotel.domain.entity.enrollment_entity import EnrollmentEntity


class IEnrollmentQueryRepo(ABC):
    @abstractmethod
    async def get_by_user_id(self, *, user_id: int) -> Optional[EnrollmentEntity]:
        pass
