from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import NotFoundError
from src.service.hotel.app.query.get_hotel_use_case import GetHotelUseCase
from src.service.hotel.domain.entity.hotel_entity import HotelEntity


USER_ID = 7


@pytest.fixture
def mock_hotel_access_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def get_hotel_use_case(
    mock_hotel_query_repo: AsyncMock, mock_hotel_access_service: AsyncMock
) -> GetHotelUseCase:
    return GetHotelUseCase(
        hotel_query_repo=mock_hotel_query_repo,
        hotel_access_service=mock_hotel_access_service,
    )


@pytest.mark.unit
class TestGetHotelUseCase:
    @pytest.mark.asyncio
    async def test_returns_hotel_with_rooms(
        self,
        get_hotel_use_case: GetHotelUseCase,
        mock_hotel_query_repo: AsyncMock,
        mock_hotel_access_service: AsyncMock,
        hotel: HotelEntity,
    ) -> None:
        # Arrange
        mock_hotel_query_repo.get_hotel_with_rooms.return_value = hotel

        # Act
        result = await get_hotel_use_case.get_hotel(user_id=USER_ID, hotel_id=1)

        # Assert
        assert result is hotel
        assert len(result.rooms) == 2
        mock_hotel_access_service.ensure_access.assert_awaited_once_with(
            user_id=USER_ID, operation='get'
        )
        mock_hotel_query_repo.get_hotel_with_rooms.assert_awaited_once_with(hotel_id=1)

    @pytest.mark.asyncio
    async def test_raises_not_found_for_unknown_hotel(
        self,
        get_hotel_use_case: GetHotelUseCase,
        mock_hotel_query_repo: AsyncMock,
    ) -> None:
        mock_hotel_query_repo.get_hotel_with_rooms.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await get_hotel_use_case.get_hotel(user_id=USER_ID, hotel_id=999)

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == 'Hotel not found'

    @pytest.mark.asyncio
    async def test_access_check_runs_before_hotel_lookup(
        self,
        get_hotel_use_case: GetHotelUseCase,
        mock_hotel_query_repo: AsyncMock,
        mock_hotel_access_service: AsyncMock,
    ) -> None:
        mock_hotel_access_service.ensure_access.side_effect = NotFoundError(
            'This user does not have an enrollment'
        )

        with pytest.raises(NotFoundError):
            await get_hotel_use_case.get_hotel(user_id=USER_ID, hotel_id=1)

        mock_hotel_query_repo.get_hotel_with_rooms.assert_not_awaited()
