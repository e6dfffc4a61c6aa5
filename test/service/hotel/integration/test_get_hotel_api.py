"""
Integration tests for GET /hotels/{hotel_id}
"""

from datetime import datetime

from httpx import AsyncClient
import pytest

from src.service.hotel.domain.enum.ticket_status import TicketStatus
from src.service.hotel.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from test.shared.factory import (
    auth_headers,
    create_enrollment,
    create_hotel,
    create_room,
    create_user,
    create_user_with_ticket,
    generate_valid_token,
)


def _hotel_url(hotel_id: int | str) -> str:
    return f'/hotels/{hotel_id}'


@pytest.mark.integration
class TestGetHotelAuthentication:
    @pytest.mark.asyncio
    async def test_returns_401_when_token_is_not_given(self, client: AsyncClient) -> None:
        hotel = await create_hotel()

        response = await client.get(_hotel_url(hotel.id))

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_returns_401_when_token_is_not_valid(self, client: AsyncClient) -> None:
        hotel = await create_hotel()

        response = await client.get(_hotel_url(hotel.id), headers=auth_headers('lorem'))

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_returns_401_when_there_is_no_session_for_token(
        self, client: AsyncClient
    ) -> None:
        user_without_session = await create_user()
        token = JwtAuth().create_jwt_token(user_id=user_without_session.id)
        hotel = await create_hotel()

        response = await client.get(_hotel_url(hotel.id), headers=auth_headers(token))

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_returns_401_before_validating_hotel_id(self, client: AsyncClient) -> None:
        response = await client.get(_hotel_url('abc'))

        assert response.status_code == 401


@pytest.mark.integration
class TestGetHotelWithValidToken:
    @pytest.mark.asyncio
    async def test_returns_404_when_user_is_not_enrolled(self, client: AsyncClient) -> None:
        token = await generate_valid_token()
        hotel = await create_hotel()

        response = await client.get(_hotel_url(hotel.id), headers=auth_headers(token))

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_returns_404_when_enrollment_has_no_ticket(self, client: AsyncClient) -> None:
        user = await create_user()
        token = await generate_valid_token(user)
        hotel = await create_hotel()
        await create_enrollment(user)

        response = await client.get(_hotel_url(hotel.id), headers=auth_headers(token))

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_returns_402_when_ticket_is_not_paid(self, client: AsyncClient) -> None:
        data = await create_user_with_ticket(status=TicketStatus.RESERVED)
        hotel = await create_hotel()

        response = await client.get(_hotel_url(hotel.id), headers=auth_headers(data['token']))

        assert response.status_code == 402

    @pytest.mark.asyncio
    async def test_returns_402_for_reserved_ticket_even_when_hotel_does_not_exist(
        self, client: AsyncClient
    ) -> None:
        data = await create_user_with_ticket(status=TicketStatus.RESERVED)

        response = await client.get(_hotel_url(1), headers=auth_headers(data['token']))

        assert response.status_code == 402

    @pytest.mark.asyncio
    async def test_returns_402_when_ticket_is_remote(self, client: AsyncClient) -> None:
        data = await create_user_with_ticket(is_remote=True, includes_hotel=True)
        hotel = await create_hotel()

        response = await client.get(_hotel_url(hotel.id), headers=auth_headers(data['token']))

        assert response.status_code == 402

    @pytest.mark.asyncio
    async def test_returns_402_when_ticket_does_not_include_hotel(
        self, client: AsyncClient
    ) -> None:
        data = await create_user_with_ticket(includes_hotel=False)
        hotel = await create_hotel()

        response = await client.get(_hotel_url(hotel.id), headers=auth_headers(data['token']))

        assert response.status_code == 402
        assert response.json() == {
            'detail': 'The ticket type does not include hotel accommodation'
        }

    @pytest.mark.asyncio
    async def test_returns_404_when_hotel_does_not_exist(self, client: AsyncClient) -> None:
        data = await create_user_with_ticket()
        hotel = await create_hotel()

        response = await client.get(
            _hotel_url(hotel.id + 1), headers=auth_headers(data['token'])
        )

        assert response.status_code == 404
        assert response.json() == {'detail': 'Hotel not found'}

    @pytest.mark.asyncio
    async def test_returns_400_when_hotel_id_is_not_an_integer(
        self, client: AsyncClient
    ) -> None:
        data = await create_user_with_ticket()

        response = await client.get(_hotel_url('abc'), headers=auth_headers(data['token']))

        assert response.status_code == 400

    @pytest.mark.asyncio
    @pytest.mark.parametrize('hotel_id', ['99999999999999999999', '2147483648', '0'])
    async def test_returns_400_when_hotel_id_is_out_of_range(
        self, client: AsyncClient, hotel_id: str
    ) -> None:
        data = await create_user_with_ticket()
        await create_hotel()

        response = await client.get(_hotel_url(hotel_id), headers=auth_headers(data['token']))

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_returns_200_with_hotel_and_its_rooms(self, client: AsyncClient) -> None:
        # Arrange
        data = await create_user_with_ticket()
        hotel = await create_hotel()
        room_a = await create_room(hotel_id=hotel.id, capacity=1)
        room_b = await create_room(hotel_id=hotel.id, capacity=3)
        other_hotel = await create_hotel()
        await create_room(hotel_id=other_hotel.id)

        # Act
        response = await client.get(_hotel_url(hotel.id), headers=auth_headers(data['token']))

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body['id'] == hotel.id
        assert body['name'] == hotel.name
        assert body['image'] == hotel.image
        assert datetime.fromisoformat(body['createdAt']) == hotel.created_at
        assert datetime.fromisoformat(body['updatedAt']) == hotel.updated_at

        assert len(body['Rooms']) == 2
        assert [room['id'] for room in body['Rooms']] == [room_a.id, room_b.id]
        for room in body['Rooms']:
            assert set(room) == {'id', 'name', 'capacity', 'hotelId', 'createdAt', 'updatedAt'}
            assert room['hotelId'] == hotel.id
        assert body['Rooms'][1]['capacity'] == 3

    @pytest.mark.asyncio
    async def test_returns_empty_rooms_for_hotel_without_rooms(
        self, client: AsyncClient
    ) -> None:
        data = await create_user_with_ticket()
        hotel = await create_hotel()

        response = await client.get(_hotel_url(hotel.id), headers=auth_headers(data['token']))

        assert response.status_code == 200
        assert response.json()['Rooms'] == []

    @pytest.mark.asyncio
    async def test_repeated_requests_return_identical_results(self, client: AsyncClient) -> None:
        data = await create_user_with_ticket()
        hotel = await create_hotel()
        await create_room(hotel_id=hotel.id)
        await create_room(hotel_id=hotel.id, capacity=2)

        first_response = await client.get(
            _hotel_url(hotel.id), headers=auth_headers(data['token'])
        )
        second_response = await client.get(
            _hotel_url(hotel.id), headers=auth_headers(data['token'])
        )

        assert first_response.status_code == second_response.status_code == 200
        assert len(first_response.json()['Rooms']) == 2
        assert first_response.json() == second_response.json()
