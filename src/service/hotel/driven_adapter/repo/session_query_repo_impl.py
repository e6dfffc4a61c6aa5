from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.hotel.app.interface.i_session_query_repo import ISessionQueryRepo
from src.service.hotel.domain.entity.session_entity import SessionEntity
from src.service.hotel.driven_adapter.model.session_model import SessionModel


class SessionQueryRepoImpl(ISessionQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_token(self, *, token: str) -> Optional[SessionEntity]:
        async with self.session_factory() as session:
            # A user may hold several sessions; any row carrying this token is enough
            result = await session.execute(
                select(SessionModel).where(SessionModel.token == token).limit(1)
            )
            session_model = result.scalar_one_or_none()

            if not session_model:
                return None

            return SessionEntity(
                id=session_model.id,
                user_id=session_model.user_id,
                token=session_model.token,
                created_at=session_model.created_at,
            )
