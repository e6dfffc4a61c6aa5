from datetime import datetime
from typing import Optional

import attrs

from src.service.hotel.domain.enum.ticket_status import TicketStatus


@attrs.define
class TicketTypeEntity:
    name: str
    price: int
    is_remote: bool
    includes_hotel: bool
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@attrs.define
class TicketEntity:
    enrollment_id: int
    ticket_type_id: int
    status: TicketStatus
    ticket_type: TicketTypeEntity
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_reserved(self) -> bool:
        return self.status == TicketStatus.RESERVED
