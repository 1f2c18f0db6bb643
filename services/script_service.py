"""
Script service for the Webdock API client
"""
from typing import Optional, Dict, Any

from services.base_service import BaseService
from api.client import APIClient
from models.script import Script


class ScriptService(BaseService[Script]):
    """Service for account scripts."""

    def __init__(self, client: Optional[APIClient] = None):
        super().__init__(Script, 'scripts', client=client)

    async def add_script(self, name: str, filename: str, content: str) -> Optional[Script]:
        """Create a script that can later be deployed to servers."""
        return await self.create({'name': name, 'filename': filename, 'content': content})

    async def _send_create(self, client: APIClient, model_data: Dict[str, Any]) -> Any:
        return await client.create_script(model_data)


script_service = ScriptService()
