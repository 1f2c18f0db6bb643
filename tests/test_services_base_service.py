"""
Tests for BaseService functionality
"""
import pytest
from unittest.mock import AsyncMock, patch

from api.client import HTTPMethod
from services.base_service import BaseService
from models.base import WebdockBaseModel
from exceptions import ServiceException, ResponseDecodeException, ValidationException


class MockModel(WebdockBaseModel):
    """Mock model for testing BaseService."""
    id: int
    name: str
    value: int = 100


class TestBaseService:
    """Test BaseService functionality."""

    @pytest.fixture
    def mock_client(self):
        """Mock API client."""
        return AsyncMock()

    @pytest.fixture
    def base_service(self, mock_client):
        """Create BaseService instance for testing."""
        return BaseService(MockModel, 'scripts', client=mock_client)

    def test_init(self):
        """Test service initialization."""
        service = BaseService(MockModel, 'scripts')
        assert service.model_class == MockModel
        assert service.resource == 'scripts'
        assert service._client is None

    @pytest.mark.asyncio
    async def test_get_client_prefers_injected(self, base_service, mock_client):
        assert await base_service.get_client() is mock_client

    @pytest.mark.asyncio
    async def test_get_client_uses_global(self):
        service = BaseService(MockModel, 'scripts')
        sentinel = AsyncMock()

        with patch('services.base_service.get_global_client', AsyncMock(return_value=sentinel)) as getter:
            assert await service.get_client() is sentinel
            assert await service.get_client() is sentinel

        getter.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_get_all_bare_list(self, base_service, mock_client):
        mock_client.request.return_value = [
            {'id': 1, 'name': 'Test1', 'value': 100},
            {'id': 2, 'name': 'Test2', 'value': 200}
        ]

        result = await base_service.get_all()

        assert len(result) == 2
        assert all(isinstance(item, MockModel) for item in result)
        mock_client.request.assert_called_once_with('scripts', HTTPMethod.GET, params=None)

    @pytest.mark.asyncio
    async def test_get_all_wrapped_list(self, base_service, mock_client):
        mock_client.request.return_value = {'scripts': [{'id': 1, 'name': 'Test'}]}

        result = await base_service.get_all()

        assert result[0].value == 100

    @pytest.mark.asyncio
    async def test_get_all_with_params(self, base_service, mock_client):
        mock_client.request.return_value = []

        result = await base_service.get_all(params=[('name', 'x')])

        assert result == []
        mock_client.request.assert_called_once_with('scripts', HTTPMethod.GET, params=[('name', 'x')])

    @pytest.mark.asyncio
    async def test_get_all_unexpected_shape(self, base_service, mock_client):
        mock_client.request.return_value = {'count': 3}

        with pytest.raises(ResponseDecodeException):
            await base_service.get_all()

    @pytest.mark.asyncio
    async def test_get_by_id_success(self, base_service, mock_client):
        mock_client.request.return_value = {'id': 1, 'name': 'Test', 'value': 200}

        result = await base_service.get_by_id(1)

        assert isinstance(result, MockModel)
        assert result.value == 200
        mock_client.request.assert_called_once_with('scripts', HTTPMethod.GET, object_id=1)

    @pytest.mark.asyncio
    async def test_get_by_id_invalid_data(self, base_service, mock_client):
        mock_client.request.return_value = {'id': 'not-a-number', 'name': 'Test'}

        with pytest.raises(ResponseDecodeException, match="MockModel"):
            await base_service.get_by_id(1)

    @pytest.mark.asyncio
    async def test_service_error_propagates(self, base_service, mock_client):
        mock_client.request.side_effect = ServiceException(404, "Not Found")

        with pytest.raises(ServiceException) as exc_info:
            await base_service.get_by_id(999)

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_create_success(self, base_service, mock_client):
        input_data = {'name': 'New Item', 'value': 300}
        mock_client.request.return_value = {'id': 3, 'name': 'New Item', 'value': 300}

        result = await base_service.create(input_data)

        assert result.id == 3
        mock_client.request.assert_called_once_with('scripts', HTTPMethod.POST, data=input_data)

    @pytest.mark.asyncio
    async def test_create_no_body(self, base_service, mock_client):
        mock_client.request.return_value = None

        assert await base_service.create({'name': 'x'}) is None

    @pytest.mark.asyncio
    async def test_create_validation_error_propagates(self, base_service, mock_client):
        mock_client.request.side_effect = ValidationException("Invalid data format")

        with pytest.raises(ValidationException):
            await base_service.create({'name': 'x'})

    @pytest.mark.asyncio
    async def test_update_uses_patch(self, base_service, mock_client):
        mock_client.request.return_value = {'id': 1, 'name': 'Updated'}

        result = await base_service.update(1, {'name': 'Updated'})

        assert result.name == 'Updated'
        mock_client.request.assert_called_once_with(
            'scripts', HTTPMethod.PATCH, data={'name': 'Updated'}, object_id=1
        )

    @pytest.mark.asyncio
    async def test_delete(self, base_service, mock_client):
        mock_client.request.return_value = True

        assert await base_service.delete(4) is True
        mock_client.request.assert_called_once_with('scripts', HTTPMethod.DELETE, object_id=4)
