from enum import StrEnum

from prometheus_client import Counter


class HotelAccessResult(StrEnum):
    GRANTED = 'granted'
    NO_ENROLLMENT = 'no_enrollment'
    NO_TICKET = 'no_ticket'
    TICKET_NOT_PAID = 'ticket_not_paid'
    TICKET_IS_REMOTE = 'ticket_is_remote'
    HOTEL_NOT_INCLUDED = 'hotel_not_included'
    NO_HOTELS = 'no_hotels'
    HOTEL_NOT_FOUND = 'hotel_not_found'


class HotelMetrics:
    """Outcome counters for the hotel endpoints."""

    def __init__(self) -> None:
        self.hotel_access_requests = Counter(
            'hotel_access_requests_total',
            'Hotel endpoint requests by eligibility outcome',
            ['operation', 'result'],  # operation: list/get
        )

    def record_access(self, *, operation: str, result: HotelAccessResult) -> None:
        self.hotel_access_requests.labels(operation=operation, result=result.value).inc()


# Global metrics instance
metrics = HotelMetrics()
