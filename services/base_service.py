"""
Base service class for the Webdock API client

Provides common list/get/create/update/delete operations returning typed models.
"""
import logging
from typing import Optional, Type, TypeVar, Generic, Dict, Any, List, Tuple, Union

from pydantic import ValidationError

from api.client import get_global_client, APIClient, HTTPMethod
from models.base import WebdockBaseModel
from exceptions import WebdockException, ResponseDecodeException

logger = logging.getLogger(f'{__name__}.BaseService')

T = TypeVar('T', bound=WebdockBaseModel)


class BaseService(Generic[T]):
    """
    Base service class providing common operations for Webdock models.

    Features:
    - Generic type support for any WebdockBaseModel subclass
    - Automatic model validation and conversion
    - Client errors propagate unchanged
    - Connection management via global client
    """

    def __init__(self,
                 model_class: Type[T],
                 resource: str,
                 client: Optional[APIClient] = None):
        """
        Initialize base service.

        Args:
            model_class: Pydantic model class for this service
            resource: Resource name from the endpoint table (e.g., 'servers', 'pubkeys')
            client: Optional API client override (uses global client by default)
        """
        self.model_class = model_class
        self.resource = resource
        self._client = client
        self._cached_client: Optional[APIClient] = None

        logger.debug(f"Initialized {self.__class__.__name__} for {model_class.__name__} at resource '{resource}'")

    async def get_client(self) -> APIClient:
        """
        Get API client instance.

        Returns:
            The injected client, or the shared global client
        """
        if self._client:
            return self._client

        if self._cached_client is None:
            self._cached_client = await get_global_client()

        return self._cached_client

    def _to_model(self, data: Dict[str, Any]) -> T:
        """
        Convert one API object into a model.

        Raises:
            ResponseDecodeException: If the data does not match the model
        """
        try:
            return self.model_class.from_api_data(data)
        except (ValidationError, ValueError, TypeError) as e:
            raise ResponseDecodeException(f"Unexpected {self.model_class.__name__} data: {e}") from e

    def _extract_items(self, data: Any) -> List[Dict[str, Any]]:
        """
        Pull the list of objects out of a list response.

        The API returns bare JSON arrays; a wrapped {'<resource>': [...]} or
        {'items': [...]} form is accepted as well.
        """
        if isinstance(data, list):
            return data
        if isinstance(data, dict):
            for key in (self.resource, 'items'):
                if isinstance(data.get(key), list):
                    return data[key]
        raise ResponseDecodeException(f"Unexpected {self.resource} list response: {type(data).__name__}")

    async def get_all(self, params: Optional[List[Tuple[str, Any]]] = None) -> List[T]:
        """
        Get all objects with optional query parameters.

        Args:
            params: Query parameters as list of (key, value) tuples

        Returns:
            List of model instances
        """
        try:
            client = await self.get_client()
            data = await client.request(self.resource, HTTPMethod.GET, params=params)

            models = [self._to_model(item) for item in self._extract_items(data)]
            logger.debug(f"Retrieved {len(models)} {self.model_class.__name__} objects")
            return models

        except WebdockException:
            logger.error(f"API error retrieving {self.model_class.__name__} list")
            raise

    async def get_by_id(self, object_id: Union[str, int]) -> T:
        """
        Get single object by slug or id.

        Args:
            object_id: Server slug or numeric id

        Returns:
            Model instance
        """
        try:
            client = await self.get_client()
            data = await client.request(self.resource, HTTPMethod.GET, object_id=object_id)

            model = self._to_model(data)
            logger.debug(f"Retrieved {self.model_class.__name__} {object_id}: {model}")
            return model

        except WebdockException:
            logger.error(f"API error retrieving {self.model_class.__name__} {object_id}")
            raise

    async def create(self, model_data: Dict[str, Any]) -> Optional[T]:
        """
        Create new object from data dictionary.

        Args:
            model_data: Request body in API (camelCase) form

        Returns:
            Created model instance, or None when the API returned no body
        """
        try:
            client = await self.get_client()
            response = await self._send_create(client, model_data)

            if not response:
                logger.warning(f"No response body from {self.model_class.__name__} creation")
                return None

            model = self._to_model(response)
            logger.debug(f"Created {self.model_class.__name__}: {model}")
            return model

        except WebdockException:
            logger.error(f"API error creating {self.model_class.__name__}")
            raise

    async def _send_create(self, client: APIClient, model_data: Dict[str, Any]) -> Any:
        """Dispatch the create request; subclasses route through a validating client method."""
        return await client.request(self.resource, HTTPMethod.POST, data=model_data)

    async def update(self, object_id: Union[str, int], model_data: Dict[str, Any]) -> Optional[T]:
        """
        Update existing object with HTTP PATCH.

        Args:
            object_id: Slug or id of object to update
            model_data: Dictionary of fields to update

        Returns:
            Updated model instance, or None when the API returned no body
        """
        try:
            client = await self.get_client()
            response = await client.request(self.resource, HTTPMethod.PATCH, data=model_data, object_id=object_id)

            if not response:
                logger.debug(f"No response body from {self.model_class.__name__} {object_id} update")
                return None

            model = self._to_model(response)
            logger.debug(f"Updated {self.model_class.__name__} {object_id}: {model}")
            return model

        except WebdockException:
            logger.error(f"API error updating {self.model_class.__name__} {object_id}")
            raise

    async def delete(self, object_id: Union[str, int]) -> bool:
        """
        Delete object by slug or id.

        Args:
            object_id: Slug or id of object to delete

        Returns:
            True once the API acknowledged the deletion
        """
        try:
            client = await self.get_client()
            success = await client.request(self.resource, HTTPMethod.DELETE, object_id=object_id)

            logger.debug(f"Deleted {self.model_class.__name__} {object_id}")
            return success

        except WebdockException:
            logger.error(f"API error deleting {self.model_class.__name__} {object_id}")
            raise
