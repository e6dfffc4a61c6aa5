from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from src.platform.logging.loguru_io import Logger
from src.service.hotel.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.hotel.domain.entity.ticket_entity import TicketEntity, TicketTypeEntity
from src.service.hotel.domain.enum.ticket_status import TicketStatus
from src.service.hotel.driven_adapter.model.ticket_model import TicketModel


class TicketQueryRepoImpl(ITicketQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_enrollment_id_with_ticket_type(
        self, *, enrollment_id: int
    ) -> Optional[TicketEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(TicketModel)
                .options(joinedload(TicketModel.ticket_type))
                .where(TicketModel.enrollment_id == enrollment_id)
            )
            ticket_model = result.scalar_one_or_none()

            if not ticket_model:
                return None

            return self._model_to_entity(ticket_model)

    def _model_to_entity(self, ticket_model: TicketModel) -> TicketEntity:
        ticket_type_model = ticket_model.ticket_type
        return TicketEntity(
            id=ticket_model.id,
            enrollment_id=ticket_model.enrollment_id,
            ticket_type_id=ticket_model.ticket_type_id,
            status=TicketStatus(ticket_model.status),
            ticket_type=TicketTypeEntity(
                id=ticket_type_model.id,
                name=ticket_type_model.name,
                price=ticket_type_model.price,
                is_remote=ticket_type_model.is_remote,
                includes_hotel=ticket_type_model.includes_hotel,
                created_at=ticket_type_model.created_at,
                updated_at=ticket_type_model.updated_at,
            ),
            created_at=ticket_model.created_at,
            updated_at=ticket_model.updated_at,
        )
