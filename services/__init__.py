"""
Resource services for the Webdock API client

Service layer returning typed models on top of APIClient.
"""

from .base_service import BaseService
from .server_service import ServerService, server_service
from .location_service import LocationService, location_service
from .profile_service import ProfileService, profile_service
from .image_service import ImageService, image_service
from .public_key_service import PublicKeyService, public_key_service
from .script_service import ScriptService, script_service
from .hook_service import HookService, hook_service
from .event_service import EventService, event_service

__all__ = [
    'BaseService',
    'ServerService', 'server_service',
    'LocationService', 'location_service',
    'ProfileService', 'profile_service',
    'ImageService', 'image_service',
    'PublicKeyService', 'public_key_service',
    'ScriptService', 'script_service',
    'HookService', 'hook_service',
    'EventService', 'event_service',
]
