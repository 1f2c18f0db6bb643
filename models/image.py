"""
Image model for Webdock server images
"""
from typing import Optional
from pydantic import Field

from models.base import WebdockBaseModel


class Image(WebdockBaseModel):
    """Operating system / stack image a server is built from."""

    slug: str = Field(..., description="Image slug used when provisioning")
    name: str = Field(..., description="Image name")
    web_server: Optional[str] = Field(None, alias="webServer")
    php_version: Optional[str] = Field(None, alias="phpVersion")
