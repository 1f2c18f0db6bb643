"""
Location model for Webdock datacenters
"""
from typing import Optional
from pydantic import Field

from models.base import WebdockBaseModel


class Location(WebdockBaseModel):
    """Datacenter location a server can be provisioned in."""

    id: str = Field(..., description="Location id (e.g., 'fi', 'dk')")
    name: str = Field(..., description="Location name")
    city: Optional[str] = None
    country: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = Field(None, description="Flag icon URL")

    def __str__(self):
        return f"{self.name} ({self.id})"
