from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.hotel.app.interface.i_enrollment_query_repo import IEnrollmentQueryRepo
from src.service.hotel.domain.entity.enrollment_entity import EnrollmentEntity
from src.service.hotel.driven_adapter.model.enrollment_model import EnrollmentModel


class EnrollmentQueryRepoImpl(IEnrollmentQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_user_id(self, *, user_id: int) -> Optional[EnrollmentEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(EnrollmentModel).where(EnrollmentModel.user_id == user_id)
            )
            enrollment_model = result.scalar_one_or_none()

            if not enrollment_model:
                return None

            return self._model_to_entity(enrollment_model)

    def _model_to_entity(self, enrollment_model: EnrollmentModel) -> EnrollmentEntity:
        return EnrollmentEntity(
            id=enrollment_model.id,
            user_id=enrollment_model.user_id,
            name=enrollment_model.name,
            cpf=enrollment_model.cpf,
            birthday=enrollment_model.birthday,
            phone=enrollment_model.phone,
            created_at=enrollment_model.created_at,
            updated_at=enrollment_model.updated_at,
        )
