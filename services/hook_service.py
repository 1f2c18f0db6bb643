"""
Hook service for the Webdock API client

Hooks deliver event notifications to a callback URL.
"""
from typing import Optional, Dict, Any

from services.base_service import BaseService
from api.client import APIClient
from models.hook import Hook


class HookService(BaseService[Hook]):
    """Service for event hooks."""

    def __init__(self, client: Optional[APIClient] = None):
        super().__init__(Hook, 'hooks', client=client)

    async def register(self, callback_url: str, **extra: Any) -> Optional[Hook]:
        """
        Register a callback URL for account events.

        Args:
            callback_url: URL the API will call
            **extra: Additional hook fields passed through as-is
        """
        return await self.create({'callbackUrl': callback_url, **extra})

    async def _send_create(self, client: APIClient, model_data: Dict[str, Any]) -> Any:
        return await client.create_hook(model_data)


hook_service = HookService()
