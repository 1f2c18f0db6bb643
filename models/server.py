"""
Server model for Webdock servers

Represents a provisioned virtual server and the payload used to create one.
"""
from typing import Optional, List
from pydantic import Field

from models.base import WebdockBaseModel


class Server(WebdockBaseModel):
    """Server model representing a Webdock server."""

    slug: str = Field(..., description="Unique server slug, used in URLs")
    name: str = Field(..., description="Display name")
    date: Optional[str] = Field(None, description="Creation timestamp")
    location: Optional[str] = Field(None, description="Location id (e.g., 'fi')")
    description: Optional[str] = Field(None, description="Free-form description")
    image: Optional[str] = Field(None, description="Image slug")
    profile: Optional[str] = Field(None, description="Profile slug")
    ipv4: Optional[str] = Field(None, description="Public IPv4 address")
    ipv6: Optional[str] = Field(None, description="Public IPv6 address")
    status: Optional[str] = Field(None, description="Server status (e.g., 'running', 'provisioning')")
    virtualization: Optional[str] = Field(None, description="Virtualization type")
    web_server: Optional[str] = Field(None, alias="webServer", description="Web server stack")
    webroot: Optional[str] = Field(None, description="Web root path")
    aliases: Optional[List[str]] = Field(None, description="Domain aliases")
    snapshot_run_time: Optional[int] = Field(None, alias="snapshotRunTime")
    wordpress_lockdown: Optional[bool] = Field(None, alias="WordPressLockDown")
    ssh_password_auth_enabled: Optional[bool] = Field(None, alias="SSHPasswordAuthEnabled")

    @property
    def is_running(self) -> bool:
        return self.status == "running"

    def __str__(self):
        return f"{self.name} ({self.slug})"


class ProvisionServerRequest(WebdockBaseModel):
    """Body for provisioning a new server."""

    name: str
    slug: str
    location_id: str = Field(..., alias="locationId")
    profile_slug: str = Field(..., alias="profileSlug")
    image_slug: str = Field(..., alias="imageSlug")
    snapshot_id: Optional[int] = Field(None, alias="snapshotId")
