"""
Event model for the account event log

Events track asynchronous actions such as provisioning or deletion.
"""
from enum import Enum
from typing import Optional
from pydantic import Field

from models.base import WebdockBaseModel


class EventStatus(Enum):
    """Lifecycle states of an event."""
    WAITING = "waiting"
    WORKING = "working"
    FINISHED = "finished"
    ERROR = "error"


class Event(WebdockBaseModel):
    """Entry in the account event log."""

    id: int = Field(..., description="Event id")
    start_time: Optional[str] = Field(None, alias="startTime")
    end_time: Optional[str] = Field(None, alias="endTime")
    callback_id: Optional[str] = Field(None, alias="callbackId")
    server_slug: Optional[str] = Field(None, alias="serverSlug")
    event_type: Optional[str] = Field(None, alias="eventType")
    action: Optional[str] = None
    action_data: Optional[str] = Field(None, alias="actionData")
    status: Optional[EventStatus] = None
    message: Optional[str] = None

    @property
    def is_finished(self) -> bool:
        return self.status in (EventStatus.FINISHED.value, EventStatus.ERROR.value)
