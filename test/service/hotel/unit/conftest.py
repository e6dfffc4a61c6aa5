"""
Unit test fixtures for the hotel service.

Repositories are replaced with AsyncMock instances, so nothing here touches
the database or the HTTP app.
"""

from datetime import datetime
from typing import Callable
from unittest.mock import AsyncMock

import pytest

from src.service.hotel.app.interface import (
    IEnrollmentQueryRepo,
    IHotelQueryRepo,
    ITicketQueryRepo,
)
from src.service.hotel.app.service.hotel_access_service import HotelAccessService
from src.service.hotel.domain.entity.enrollment_entity import EnrollmentEntity
from src.service.hotel.domain.entity.hotel_entity import HotelEntity, RoomEntity
from src.service.hotel.domain.entity.ticket_entity import TicketEntity, TicketTypeEntity
from src.service.hotel.domain.enum.ticket_status import TicketStatus


NOW = datetime(2024, 1, 1, 12, 0, 0)
USER_ID = 7


@pytest.fixture
def make_ticket() -> Callable[..., TicketEntity]:
    def _make(
        *,
        status: TicketStatus = TicketStatus.PAID,
        is_remote: bool = False,
        includes_hotel: bool = True,
    ) -> TicketEntity:
        return TicketEntity(
            id=1,
            enrollment_id=3,
            ticket_type_id=2,
            status=status,
            ticket_type=TicketTypeEntity(
                id=2,
                name='Presencial + Hotel',
                price=600,
                is_remote=is_remote,
                includes_hotel=includes_hotel,
            ),
        )

    return _make


@pytest.fixture
def enrollment() -> EnrollmentEntity:
    return EnrollmentEntity(
        id=3,
        user_id=USER_ID,
        name='Enrolled User',
        cpf='12345678909',
        birthday=datetime(1995, 5, 17),
        phone='21999999999',
    )


@pytest.fixture
def hotel() -> HotelEntity:
    return HotelEntity(
        id=1,
        name='Driven Resort',
        image='https://example.com/resort.png',
        created_at=NOW,
        updated_at=NOW,
        rooms=[
            RoomEntity(id=10, name='101', capacity=2, hotel_id=1, created_at=NOW, updated_at=NOW),
            RoomEntity(id=11, name='102', capacity=3, hotel_id=1, created_at=NOW, updated_at=NOW),
        ],
    )


@pytest.fixture
def mock_enrollment_query_repo() -> AsyncMock:
    return AsyncMock(spec=IEnrollmentQueryRepo)


@pytest.fixture
def mock_ticket_query_repo() -> AsyncMock:
    return AsyncMock(spec=ITicketQueryRepo)


@pytest.fixture
def mock_hotel_query_repo() -> AsyncMock:
    return AsyncMock(spec=IHotelQueryRepo)


@pytest.fixture
def hotel_access_service(
    mock_enrollment_query_repo: AsyncMock,
    mock_ticket_query_repo: AsyncMock,
) -> HotelAccessService:
    return HotelAccessService(
        enrollment_query_repo=mock_enrollment_query_repo,
        ticket_query_repo=mock_ticket_query_repo,
    )
