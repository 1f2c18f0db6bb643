"""
Tests for ServerService
"""
import pytest
from unittest.mock import AsyncMock
from aioresponses import aioresponses

from api.client import APIClient, HTTPMethod
from models.server import Server, ProvisionServerRequest
from services.server_service import ServerService
from exceptions import ValidationException

BASE_URL = "https://api.webdock.io/v1"


class TestServerService:
    """Test ServerService with a mocked client."""

    @pytest.fixture
    def mock_client(self):
        return AsyncMock()

    @pytest.fixture
    def service(self, mock_client):
        return ServerService(client=mock_client)

    def test_init(self, service):
        assert service.resource == 'servers'
        assert service.model_class is Server

    @pytest.mark.asyncio
    async def test_get_by_slug(self, service, mock_client):
        mock_client.request.return_value = {'slug': 'web-1', 'name': 'Web 1'}

        server = await service.get_by_slug('web-1')

        assert server.slug == 'web-1'
        mock_client.request.assert_called_once_with('servers', HTTPMethod.GET, object_id='web-1')

    @pytest.mark.asyncio
    async def test_get_running(self, service, mock_client):
        mock_client.request.return_value = [
            {'slug': 'a', 'name': 'A', 'status': 'running'},
            {'slug': 'b', 'name': 'B', 'status': 'stopped'},
        ]

        running = await service.get_running()

        assert [s.slug for s in running] == ['a']

    @pytest.mark.asyncio
    async def test_provision_routes_through_validating_method(self, service, mock_client):
        data = {'name': 'demo', 'slug': 'demo', 'locationId': 'fi',
                'profileSlug': 'micro', 'imageSlug': 'ubuntu'}
        mock_client.provision_server.return_value = {'slug': 'demo', 'name': 'demo', 'status': 'provisioning'}

        server = await service.provision(data)

        assert server.status == 'provisioning'
        mock_client.provision_server.assert_awaited_once_with(data)
        mock_client.request.assert_not_called()

    @pytest.mark.asyncio
    async def test_provision_from_model(self, service, mock_client):
        request = ProvisionServerRequest(name='demo', slug='demo', location_id='fi',
                                         profile_slug='micro', image_slug='ubuntu')
        mock_client.provision_server.return_value = {'slug': 'demo', 'name': 'demo'}

        await service.provision(request)

        sent = mock_client.provision_server.call_args[0][0]
        assert sent['locationId'] == 'fi'
        assert sent['imageSlug'] == 'ubuntu'

    @pytest.mark.asyncio
    async def test_rename(self, service, mock_client):
        mock_client.request.return_value = {'slug': 'web-1', 'name': 'Renamed', 'description': 'prod'}

        server = await service.rename('web-1', 'Renamed', description='prod')

        assert server.name == 'Renamed'
        mock_client.request.assert_called_once_with(
            'servers', HTTPMethod.PATCH, data={'name': 'Renamed', 'description': 'prod'}, object_id='web-1'
        )


class TestServerServiceWithHTTP:
    """Test ServerService against a real client and mocked HTTP."""

    @pytest.fixture
    async def client(self):
        client = APIClient(api_token='test-token', base_url=BASE_URL)
        yield client
        await client.close()

    @pytest.mark.asyncio
    async def test_provision_missing_field_sends_nothing(self, client):
        service = ServerService(client=client)

        with aioresponses() as m:
            with pytest.raises(ValidationException, match="imageSlug"):
                await service.provision({'name': 'demo', 'slug': 'demo', 'locationId': 'fi', 'profileSlug': 'micro'})

            assert len(m.requests) == 0

    @pytest.mark.asyncio
    async def test_get_all(self, client):
        service = ServerService(client=client)

        with aioresponses() as m:
            m.get(f"{BASE_URL}/servers", payload=[{'slug': 'a', 'name': 'A', 'ipv4': '10.0.0.1'}], status=200)

            servers = await service.get_all()

        assert servers[0].ipv4 == '10.0.0.1'
