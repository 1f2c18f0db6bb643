"""
Hook model for event callbacks
"""
from typing import Optional, List, Dict, Any
from pydantic import Field

from models.base import WebdockBaseModel


class Hook(WebdockBaseModel):
    """Event hook that calls back a URL when account events happen."""

    id: int = Field(..., description="Hook id")
    callback_url: str = Field(..., alias="callbackUrl", description="URL called on events")
    callback_id: Optional[int] = Field(None, alias="callbackId")
    filters: Optional[List[Dict[str, Any]]] = None
