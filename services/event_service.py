"""
Event service for the Webdock API client

Provisioning and other long-running actions are reported through the event log;
the callback id returned when an action starts identifies its events.
"""
import logging
from typing import Optional, List

from services.base_service import BaseService
from api.client import APIClient
from models.event import Event

logger = logging.getLogger(f'{__name__}.EventService')


class EventService(BaseService[Event]):
    """Service for the account event log (read-only)."""

    def __init__(self, client: Optional[APIClient] = None):
        super().__init__(Event, 'events', client=client)

    async def get_for_callback(self, callback_id: str) -> List[Event]:
        """Get the events belonging to one callback id."""
        return await self.get_all(params=[('callbackId', callback_id)])

    async def get_by_type(self, event_type: str) -> List[Event]:
        """Get events of one type (e.g., 'provision', 'delete')."""
        return await self.get_all(params=[('eventType', event_type)])

    async def is_callback_finished(self, callback_id: str) -> bool:
        """True once every event for the callback id has finished or failed."""
        events = await self.get_for_callback(callback_id)
        if not events:
            logger.debug(f"No events found for callback {callback_id}")
            return False
        return all(event.is_finished for event in events)


event_service = EventService()
