"""
Hotel Access Service

Resolves user -> enrollment -> ticket and applies the payment gate.
Shared by every hotel query.
"""

from src.platform.exception.exceptions import NotFoundError, PaymentRequiredError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.hotel_metrics import HotelAccessResult, metrics
from src.service.hotel.app.interface.i_enrollment_query_repo import IEnrollmentQueryRepo
from src.service.hotel.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.hotel.domain.entity.ticket_entity import TicketEntity
from src.service.hotel.domain.hotel_access_policy import (
    PaymentGateFailure,
    find_payment_gate_failure,
)


_FAILURE_RESULT = {
    PaymentGateFailure.TICKET_NOT_PAID: HotelAccessResult.TICKET_NOT_PAID,
    PaymentGateFailure.TICKET_IS_REMOTE: HotelAccessResult.TICKET_IS_REMOTE,
    PaymentGateFailure.HOTEL_NOT_INCLUDED: HotelAccessResult.HOTEL_NOT_INCLUDED,
}


class HotelAccessService:
    def __init__(
        self,
        enrollment_query_repo: IEnrollmentQueryRepo,
        ticket_query_repo: ITicketQueryRepo,
    ) -> None:
        self.enrollment_query_repo = enrollment_query_repo
        self.ticket_query_repo = ticket_query_repo

    @Logger.io
    async def ensure_access(self, *, user_id: int, operation: str) -> TicketEntity:
        """
        Return the user's ticket when it grants hotel access.

        Raises:
            NotFoundError: user has no enrollment, or the enrollment has no ticket
            PaymentRequiredError: the ticket fails the payment gate
        """
        enrollment = await self.enrollment_query_repo.get_by_user_id(user_id=user_id)
        if enrollment is None:
            metrics.record_access(operation=operation, result=HotelAccessResult.NO_ENROLLMENT)
            raise NotFoundError('This user does not have an enrollment')

        ticket = await self.ticket_query_repo.get_by_enrollment_id_with_ticket_type(
            enrollment_id=enrollment.id  # type: ignore[arg-type]
        )
        if ticket is None:
            metrics.record_access(operation=operation, result=HotelAccessResult.NO_TICKET)
            raise NotFoundError('This user enrollment has no ticket')

        failure = find_payment_gate_failure(ticket)
        if failure is not None:
            Logger.base.warning(
                f'💳 [HOTEL_ACCESS] User {user_id} blocked by payment gate: {failure.name}'
            )
            metrics.record_access(operation=operation, result=_FAILURE_RESULT[failure])
            raise PaymentRequiredError(failure.message)

        return ticket
