"""
Public key model for account SSH keys
"""
from typing import Optional
from pydantic import Field

from models.base import WebdockBaseModel


class PublicKey(WebdockBaseModel):
    """SSH public key stored on the account."""

    id: int = Field(..., description="Public key id")
    name: str = Field(..., description="Key name")
    key: str = Field(..., description="Public key material")
    created: Optional[str] = Field(None, description="Creation timestamp")
