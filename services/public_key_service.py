"""
Public key service for the Webdock API client

Manages SSH public keys stored on the account.
"""
import logging
from typing import Optional, Dict, Any

from services.base_service import BaseService
from api.client import APIClient
from models.public_key import PublicKey

logger = logging.getLogger(f'{__name__}.PublicKeyService')


class PublicKeyService(BaseService[PublicKey]):
    """Service for account public keys."""

    def __init__(self, client: Optional[APIClient] = None):
        super().__init__(PublicKey, 'pubkeys', client=client)

    async def add_key(self, name: str, public_key: str) -> Optional[PublicKey]:
        """
        Add a public key to the account.

        Args:
            name: Label for the key
            public_key: Key material (e.g., 'ssh-ed25519 AAAA...')
        """
        return await self.create({'name': name, 'publicKey': public_key})

    async def _send_create(self, client: APIClient, model_data: Dict[str, Any]) -> Any:
        return await client.create_public_key(model_data)


public_key_service = PublicKeyService()
