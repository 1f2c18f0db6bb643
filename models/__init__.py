"""
Data models for the Webdock API client

Pydantic models for the resources exposed by the Webdock v1 API.
"""

from models.base import WebdockBaseModel
from models.server import Server, ProvisionServerRequest
from models.location import Location
from models.profile import Profile, ProfileCPU, ProfilePrice
from models.image import Image
from models.public_key import PublicKey
from models.script import Script
from models.hook import Hook
from models.event import Event, EventStatus

__all__ = [
    'WebdockBaseModel',
    'Server',
    'ProvisionServerRequest',
    'Location',
    'Profile',
    'ProfileCPU',
    'ProfilePrice',
    'Image',
    'PublicKey',
    'Script',
    'Hook',
    'Event',
    'EventStatus',
]
