"""
Script model for account scripts
"""
from typing import Optional
from pydantic import Field

from models.base import WebdockBaseModel


class Script(WebdockBaseModel):
    """Account script that can be deployed to servers."""

    id: int = Field(..., description="Script id")
    name: str = Field(..., description="Script name")
    description: Optional[str] = None
    filename: Optional[str] = Field(None, description="Filename on the server")
    content: Optional[str] = Field(None, description="Script body")
