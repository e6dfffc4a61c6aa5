"""Hotel Domain Enums"""

from src.service.hotel.domain.enum.ticket_status import TicketStatus

__all__ = ['TicketStatus']
