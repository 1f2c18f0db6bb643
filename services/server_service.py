"""
Server service for the Webdock API client

Handles server listing, provisioning, updates and deletion.
"""
import logging
from typing import Optional, List, Dict, Any, Union

from services.base_service import BaseService
from api.client import APIClient
from models.server import Server, ProvisionServerRequest
from exceptions import WebdockException

logger = logging.getLogger(f'{__name__}.ServerService')


class ServerService(BaseService[Server]):
    """
    Service for server operations.

    Features:
    - Server listing and lookup by slug
    - Provisioning with local validation of required fields
    - Metadata updates and deletion
    """

    def __init__(self, client: Optional[APIClient] = None):
        """Initialize server service."""
        super().__init__(Server, 'servers', client=client)
        logger.debug("ServerService initialized")

    async def get_by_slug(self, slug: str) -> Server:
        """Get a server by its slug."""
        return await self.get_by_id(slug)

    async def get_running(self) -> List[Server]:
        """Get all servers currently in the running state."""
        servers = await self.get_all()
        return [server for server in servers if server.is_running]

    async def provision(self, request: Union[ProvisionServerRequest, Dict[str, Any]]) -> Optional[Server]:
        """
        Provision a new server.

        Args:
            request: ProvisionServerRequest or a dict in API (camelCase) form

        Returns:
            The server being provisioned, or None when the API returned no body

        Raises:
            ValidationException: If a required field is missing (no request is sent)
        """
        if isinstance(request, ProvisionServerRequest):
            request = request.to_dict()
        return await self.create(request)

    async def _send_create(self, client: APIClient, model_data: Dict[str, Any]) -> Any:
        return await client.provision_server(model_data)

    async def rename(self, slug: str, name: str, description: Optional[str] = None) -> Optional[Server]:
        """Change a server's display name and, optionally, description."""
        data = {'name': name}
        if description is not None:
            data['description'] = description

        try:
            return await self.update(slug, data)
        except WebdockException:
            logger.error(f"Failed to rename server {slug}")
            raise


# Global service instance
server_service = ServerService()
