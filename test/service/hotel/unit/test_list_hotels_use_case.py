from unittest.mock import AsyncMock

from prometheus_client import REGISTRY
import pytest

from src.platform.exception.exceptions import NotFoundError, PaymentRequiredError
from src.service.hotel.app.query.list_hotels_use_case import ListHotelsUseCase
from src.service.hotel.domain.entity.hotel_entity import HotelEntity


USER_ID = 7


def _access_count(result: str) -> float:
    value = REGISTRY.get_sample_value(
        'hotel_access_requests_total', {'operation': 'list', 'result': result}
    )
    return value or 0.0


@pytest.fixture
def mock_hotel_access_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def list_hotels_use_case(
    mock_hotel_query_repo: AsyncMock, mock_hotel_access_service: AsyncMock
) -> ListHotelsUseCase:
    return ListHotelsUseCase(
        hotel_query_repo=mock_hotel_query_repo,
        hotel_access_service=mock_hotel_access_service,
    )


@pytest.mark.unit
class TestListHotelsUseCase:
    @pytest.mark.asyncio
    async def test_returns_hotels_after_access_check(
        self,
        list_hotels_use_case: ListHotelsUseCase,
        mock_hotel_query_repo: AsyncMock,
        mock_hotel_access_service: AsyncMock,
        hotel: HotelEntity,
    ) -> None:
        # Arrange
        mock_hotel_query_repo.list_hotels.return_value = [hotel]
        before = _access_count('granted')

        # Act
        result = await list_hotels_use_case.list_hotels(user_id=USER_ID)

        # Assert
        assert result == [hotel]
        mock_hotel_access_service.ensure_access.assert_awaited_once_with(
            user_id=USER_ID, operation='list'
        )
        assert _access_count('granted') == before + 1

    @pytest.mark.asyncio
    async def test_raises_not_found_when_no_hotel_is_registered(
        self,
        list_hotels_use_case: ListHotelsUseCase,
        mock_hotel_query_repo: AsyncMock,
    ) -> None:
        mock_hotel_query_repo.list_hotels.return_value = []
        before = _access_count('no_hotels')

        with pytest.raises(NotFoundError) as exc_info:
            await list_hotels_use_case.list_hotels(user_id=USER_ID)

        assert exc_info.value.message == 'There are no hotels registered'
        assert _access_count('no_hotels') == before + 1

    @pytest.mark.asyncio
    async def test_does_not_list_hotels_when_access_is_denied(
        self,
        list_hotels_use_case: ListHotelsUseCase,
        mock_hotel_query_repo: AsyncMock,
        mock_hotel_access_service: AsyncMock,
    ) -> None:
        mock_hotel_access_service.ensure_access.side_effect = PaymentRequiredError(
            'The ticket has not been paid yet'
        )

        with pytest.raises(PaymentRequiredError):
            await list_hotels_use_case.list_hotels(user_id=USER_ID)

        mock_hotel_query_repo.list_hotels.assert_not_awaited()
