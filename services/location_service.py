"""
Location service for the Webdock API client
"""
import logging
from typing import Optional, List

from services.base_service import BaseService
from api.client import APIClient
from models.location import Location

logger = logging.getLogger(f'{__name__}.LocationService')


class LocationService(BaseService[Location]):
    """Service for datacenter locations (read-only)."""

    def __init__(self, client: Optional[APIClient] = None):
        super().__init__(Location, 'locations', client=client)

    async def get_by_country(self, country: str) -> List[Location]:
        """Get locations in a country (case-insensitive match)."""
        locations = await self.get_all()
        matches = [loc for loc in locations if loc.country and loc.country.lower() == country.lower()]
        logger.debug(f"Found {len(matches)} locations in {country}")
        return matches


location_service = LocationService()
