from httpx import AsyncClient
import pytest

from src.platform.constant.route_constant import HEALTH, METRICS


@pytest.mark.integration
class TestSystemEndpoints:
    @pytest.mark.asyncio
    async def test_health_check(self, client: AsyncClient) -> None:
        response = await client.get(HEALTH)

        assert response.status_code == 200
        assert response.json() == {'status': 'healthy'}

    @pytest.mark.asyncio
    async def test_metrics_exposes_hotel_access_counter(self, client: AsyncClient) -> None:
        response = await client.get(METRICS)

        assert response.status_code == 200
        assert response.headers['content-type'].startswith('text/plain')
        # HELP/TYPE lines are emitted even before the first labelled sample
        assert 'hotel_access_requests' in response.text
