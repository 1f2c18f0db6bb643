"""
Profile service for the Webdock API client

Hardware profiles differ per location, so listing accepts a location filter.
"""
import logging
from typing import Optional, List

from services.base_service import BaseService
from api.client import APIClient
from models.profile import Profile

logger = logging.getLogger(f'{__name__}.ProfileService')


class ProfileService(BaseService[Profile]):
    """Service for hardware profiles (read-only)."""

    def __init__(self, client: Optional[APIClient] = None):
        super().__init__(Profile, 'profiles', client=client)

    async def get_for_location(self, location_id: str) -> List[Profile]:
        """
        Get the profiles available in one location.

        Args:
            location_id: Location id (e.g., 'fi')
        """
        return await self.get_all(params=[('locationId', location_id)])

    async def get_cheapest(self, location_id: Optional[str] = None) -> Optional[Profile]:
        """Get the lowest priced profile, optionally within a location."""
        params = [('locationId', location_id)] if location_id else None
        profiles = [p for p in await self.get_all(params=params) if p.price is not None]
        if not profiles:
            logger.debug("No priced profiles returned")
            return None
        return min(profiles, key=lambda p: p.price.amount)


profile_service = ProfileService()
