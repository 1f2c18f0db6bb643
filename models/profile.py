"""
Profile model for Webdock hardware profiles

A profile describes the CPU, memory, disk and price of a server size.
"""
from typing import Optional
from pydantic import Field

from models.base import WebdockBaseModel


class ProfileCPU(WebdockBaseModel):
    """CPU allocation of a profile."""

    cores: int
    threads: int


class ProfilePrice(WebdockBaseModel):
    """Monthly price of a profile, in minor currency units."""

    amount: int
    currency: str


class Profile(WebdockBaseModel):
    """Hardware profile model."""

    slug: str = Field(..., description="Profile slug used when provisioning")
    name: str = Field(..., description="Profile name")
    ram: Optional[int] = Field(None, description="Memory in MiB")
    disk: Optional[int] = Field(None, description="Disk in MiB")
    cpu: Optional[ProfileCPU] = None
    price: Optional[ProfilePrice] = None

    def __str__(self):
        return f"{self.name} ({self.slug})"
