"""
Hotel Access Policy
Pure eligibility rules over an already-loaded ticket - no infrastructure access.
"""

from enum import Enum
from typing import Optional

from src.service.hotel.domain.entity.ticket_entity import TicketEntity


class PaymentGateFailure(Enum):
    """Why a ticket does not grant hotel access, in evaluation order."""

    TICKET_NOT_PAID = 'The ticket has not been paid yet'
    TICKET_IS_REMOTE = 'Remote tickets do not include hotel accommodation'
    HOTEL_NOT_INCLUDED = 'The ticket type does not include hotel accommodation'

    @property
    def message(self) -> str:
        return self.value


def find_payment_gate_failure(ticket: TicketEntity) -> Optional[PaymentGateFailure]:
    """Return the first failed rule, or None when the ticket grants hotel access."""
    if ticket.is_reserved:
        return PaymentGateFailure.TICKET_NOT_PAID
    if ticket.ticket_type.is_remote:
        return PaymentGateFailure.TICKET_IS_REMOTE
    if not ticket.ticket_type.includes_hotel:
        return PaymentGateFailure.HOTEL_NOT_INCLUDED
    return None
