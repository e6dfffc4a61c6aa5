from enum import Enum


class TicketStatus(str, Enum):
    RESERVED = 'RESERVED'
    PAID = 'PAID'
