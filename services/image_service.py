"""
Image service for the Webdock API client
"""
from typing import Optional

from services.base_service import BaseService
from api.client import APIClient
from models.image import Image


class ImageService(BaseService[Image]):
    """Service for server images (read-only)."""

    def __init__(self, client: Optional[APIClient] = None):
        super().__init__(Image, 'images', client=client)


image_service = ImageService()
