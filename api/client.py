"""
API client for the Webdock REST API

aiohttp-based HTTP client that maps resource calls onto the Webdock v1 endpoints.
Provides bearer authentication, status classification and session management.
"""
import asyncio
import json
from contextlib import asynccontextmanager
from enum import Enum
from types import MappingProxyType
from typing import Optional, List, Dict, Any, Tuple, Union
from urllib.parse import quote, urlencode

import aiohttp

from config import get_config
from constants import (
    ENDPOINTS,
    SUCCESS_STATUS_CODES,
    PROVISION_SERVER_FIELDS,
    CREATE_PUBLIC_KEY_FIELDS,
    CREATE_SCRIPT_FIELDS,
    CREATE_HOOK_FIELDS,
    LOG_TRUNCATE_LENGTH,
)
from exceptions import (
    ConfigurationException,
    ResponseDecodeException,
    ServiceException,
    TransportException,
    ValidationException,
)
from utils.logging import get_contextual_logger

logger = get_contextual_logger(f'{__name__}.APIClient')

JSONBody = Union[Dict[str, Any], List[Any]]
QueryParams = Optional[List[Tuple[str, Any]]]


class HTTPMethod(Enum):
    """HTTP verbs supported by the Webdock API."""
    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, method: Union[str, "HTTPMethod"]) -> "HTTPMethod":
        """
        Convert a verb string to an HTTPMethod.

        Raises:
            ValidationException: If the verb is not supported
        """
        if isinstance(method, cls):
            return method
        try:
            return cls(str(method).upper())
        except ValueError:
            raise ValidationException(f"Unsupported request type: {method}")


BODY_METHODS = frozenset({HTTPMethod.POST, HTTPMethod.PATCH})


def validate_required_fields(data: Any, required_fields: Tuple[str, ...]) -> Dict[str, Any]:
    """
    Check that a request body is a JSON object holding every required field.

    Args:
        data: Request body supplied by the caller
        required_fields: Keys that must be present

    Returns:
        The body, unchanged

    Raises:
        ValidationException: If the body is not a dict or a field is missing
    """
    if not isinstance(data, dict):
        raise ValidationException("Invalid data format")

    for field in required_fields:
        if field not in data:
            raise ValidationException(f"Required field {field} is missing.")

    return data


def _truncate(value: Any) -> str:
    text = str(value)
    if len(text) > LOG_TRUNCATE_LENGTH:
        return text[:LOG_TRUNCATE_LENGTH] + "..."
    return text


class APIClient:
    """
    Async HTTP client for Webdock API communication.

    Features:
    - Bearer token authentication with fixed default headers
    - Static endpoint table for URL construction
    - Status classification into service, transport and decode errors
    - Local validation of request bodies before dispatch
    - Lazy aiohttp session shared by all calls on this instance
    """

    def __init__(
        self,
        api_token: Optional[str] = None,
        base_url: Optional[str] = None,
        client_identifier: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        """
        Initialize API client with configuration.

        Args:
            api_token: Webdock API token (falls back to WEBDOCK_API_TOKEN)
            base_url: Override default API URL from config
            client_identifier: Value of the X-Client header
            timeout: Total request timeout in seconds

        Raises:
            ConfigurationException: If the token cannot be used as a header value
        """
        config = get_config()
        self.api_token = api_token if api_token is not None else config.api_token
        self.base_url = (base_url or config.base_url).rstrip('/')
        self.client_identifier = client_identifier or config.client_identifier
        self.timeout = timeout if timeout is not None else config.default_timeout
        self.endpoints = ENDPOINTS
        self._session: Optional[aiohttp.ClientSession] = None

        authorization = f'Bearer {self.api_token}'
        if not _is_valid_header_value(authorization):
            raise ConfigurationException("API token cannot be encoded as a header value")
        if not self.api_token:
            logger.warning("APIClient initialized without an API token")

        self._headers = MappingProxyType({
            'Content-Type': 'application/json',
            'Authorization': authorization,
            'X-Client': self.client_identifier
        })

        logger.debug(f"APIClient initialized with base_url: {self.base_url}")

    @property
    def headers(self) -> Dict[str, str]:
        """Get headers with authentication, content type and client identifier."""
        return dict(self._headers)

    def _build_url(self, resource: str, object_id: Optional[Union[str, int]] = None) -> str:
        """
        Build complete API URL for a resource.

        Args:
            resource: Logical resource name from the endpoint table
            object_id: Optional slug or id appended as a path segment

        Returns:
            Complete URL for API request

        Raises:
            KeyError: If the resource is not in the endpoint table
        """
        url = f"{self.base_url}/{self.endpoints[resource]}"
        if object_id is not None:
            url += f"/{quote(str(object_id), safe='')}"
        return url

    def _add_params(self, url: str, params: QueryParams = None) -> str:
        """
        Add query parameters to URL.

        Args:
            url: Base URL
            params: List of (key, value) tuples

        Returns:
            URL with query parameters appended
        """
        if not params:
            return url

        separator = "&" if "?" in url else "?"
        return f"{url}{separator}{urlencode(params)}"

    async def _ensure_session(self) -> None:
        """Ensure aiohttp session exists and is not closed."""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout) if self.timeout else None

            session_kwargs: Dict[str, Any] = {'headers': self.headers}
            if timeout is not None:
                session_kwargs['timeout'] = timeout

            self._session = aiohttp.ClientSession(**session_kwargs)
            logger.debug("Created new aiohttp session")

    async def request(
        self,
        resource: str,
        method: Union[str, HTTPMethod],
        data: Optional[JSONBody] = None,
        object_id: Optional[Union[str, int]] = None,
        params: QueryParams = None
    ) -> Any:
        """
        Send a request to a resource and interpret the response.

        Args:
            resource: Logical resource name (e.g., 'servers', 'pubkeys')
            method: HTTP verb, as HTTPMethod or string
            data: JSON body, required for POST and PATCH
            object_id: Optional slug or id appended to the resource path
            params: Query parameters as list of (key, value) tuples

        Returns:
            Decoded JSON for GET/POST/PATCH (None for an empty POST/PATCH body),
            True for DELETE

        Raises:
            ValidationException: Unsupported verb or missing body
            ServiceException: Non-success HTTP status
            TransportException: Connection, TLS or timeout failure
            ResponseDecodeException: Success status with an undecodable body
            KeyError: Unknown resource name
        """
        verb = HTTPMethod.parse(method)
        url = self._add_params(self._build_url(resource, object_id), params)

        if verb in BODY_METHODS and data is None:
            raise ValidationException(f"{verb.value} request to '{resource}' requires a body")

        await self._ensure_session()

        kwargs: Dict[str, Any] = {}
        if verb in BODY_METHODS:
            kwargs['json'] = data

        try:
            logger.debug(f"{verb.value}: {resource} id: {object_id} params: {params}",
                         resource=resource, method=verb.value, url=url)

            async with self._session.request(verb.value, url, **kwargs) as response:
                return await self._handle_response(response, verb, url)

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"HTTP client error for {verb.value} {url}: {e}",
                         resource=resource, method=verb.value, url=url)
            raise TransportException(f"Network error: {e}", original=e) from e

    async def _handle_response(self, response: aiohttp.ClientResponse, verb: HTTPMethod, url: str) -> Any:
        """
        Classify the response status and decode the body when one is expected.

        Args:
            response: aiohttp response
            verb: Verb the request was sent with
            url: Request URL, for logging

        Returns:
            Decoded JSON, None or True (see request)
        """
        if response.status not in SUCCESS_STATUS_CODES:
            logger.error(f"API error {response.status}: {verb.value} {url}",
                         status=response.status, url=url)
            raise ServiceException(response.status, response.reason)

        # Some deletions return no content; the body is never decoded
        if verb is HTTPMethod.DELETE:
            logger.debug(f"DELETE successful: {url}", status=response.status)
            return True

        try:
            body = await response.text()
        except UnicodeDecodeError as e:
            raise ResponseDecodeException(f"Response from {url} is not valid text: {e}") from e

        if not body.strip():
            if verb in BODY_METHODS:
                logger.debug(f"{verb.value} returned empty body: {url}", status=response.status)
                return None
            raise ResponseDecodeException(f"Empty response body for {verb.value} {url}")

        try:
            result = json.loads(body)
        except ValueError as e:
            logger.error(f"Invalid JSON in response from {verb.value} {url}", status=response.status)
            raise ResponseDecodeException(f"Failed to decode response from {url}: {e}") from e

        logger.debug(f"Response: {_truncate(result)}", status=response.status)
        return result

    # Resource methods

    async def ping(self) -> Any:
        """Check that the API is reachable and the token is accepted."""
        return await self.request('ping', HTTPMethod.GET)

    async def servers(self) -> Any:
        """List all servers on the account."""
        return await self.request('servers', HTTPMethod.GET)

    async def get_server(self, slug: str) -> Any:
        """Get a single server by slug."""
        return await self.request('servers', HTTPMethod.GET, object_id=slug)

    async def provision_server(self, data: Dict[str, Any]) -> Any:
        """
        Provision a new server.

        Args:
            data: Server definition; must contain name, slug, locationId,
                profileSlug and imageSlug

        Returns:
            Decoded JSON response describing the new server

        Raises:
            ValidationException: If data is not a dict or a required field is missing
        """
        validate_required_fields(data, PROVISION_SERVER_FIELDS)
        return await self.request('servers', HTTPMethod.POST, data=data)

    async def update_server(self, slug: str, data: Dict[str, Any]) -> Any:
        """Update server metadata (name, description, ...)."""
        if not isinstance(data, dict):
            raise ValidationException("Invalid data format")
        return await self.request('servers', HTTPMethod.PATCH, data=data, object_id=slug)

    async def delete_server(self, slug: str) -> bool:
        """Delete a server by slug."""
        return await self.request('servers', HTTPMethod.DELETE, object_id=slug)

    async def locations(self) -> Any:
        """List datacenter locations."""
        return await self.request('locations', HTTPMethod.GET)

    async def profiles(self, location_id: Optional[str] = None) -> Any:
        """List hardware profiles, optionally for one location."""
        params = [('locationId', location_id)] if location_id else None
        return await self.request('profiles', HTTPMethod.GET, params=params)

    async def images(self) -> Any:
        """List server images."""
        return await self.request('images', HTTPMethod.GET)

    async def public_keys(self) -> Any:
        """List account public keys."""
        return await self.request('pubkeys', HTTPMethod.GET)

    async def create_public_key(self, data: Dict[str, Any]) -> Any:
        """Add a public key to the account; requires name and publicKey."""
        validate_required_fields(data, CREATE_PUBLIC_KEY_FIELDS)
        return await self.request('pubkeys', HTTPMethod.POST, data=data)

    async def delete_public_key(self, key_id: int) -> bool:
        return await self.request('pubkeys', HTTPMethod.DELETE, object_id=key_id)

    async def scripts(self) -> Any:
        """List account scripts."""
        return await self.request('scripts', HTTPMethod.GET)

    async def create_script(self, data: Dict[str, Any]) -> Any:
        """Create an account script; requires name, filename and content."""
        validate_required_fields(data, CREATE_SCRIPT_FIELDS)
        return await self.request('scripts', HTTPMethod.POST, data=data)

    async def delete_script(self, script_id: int) -> bool:
        return await self.request('scripts', HTTPMethod.DELETE, object_id=script_id)

    async def hooks(self) -> Any:
        """List event hooks."""
        return await self.request('hooks', HTTPMethod.GET)

    async def create_hook(self, data: Dict[str, Any]) -> Any:
        """Register an event hook; requires callbackUrl."""
        validate_required_fields(data, CREATE_HOOK_FIELDS)
        return await self.request('hooks', HTTPMethod.POST, data=data)

    async def delete_hook(self, hook_id: int) -> bool:
        return await self.request('hooks', HTTPMethod.DELETE, object_id=hook_id)

    async def events(self, callback_id: Optional[str] = None, event_type: Optional[str] = None) -> Any:
        """
        List account events.

        Args:
            callback_id: Only events for this callback id
            event_type: Only events of this type (e.g., 'provision')
        """
        params = []
        if callback_id:
            params.append(('callbackId', callback_id))
        if event_type:
            params.append(('eventType', event_type))
        return await self.request('events', HTTPMethod.GET, params=params or None)

    async def close(self) -> None:
        """Close the HTTP session and clean up resources."""
        if self._session and not self._session.closed:
            await self._session.close()
            logger.debug("Closed aiohttp session")

    async def __aenter__(self):
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit with cleanup."""
        await self.close()


def _is_valid_header_value(value: str) -> bool:
    """Visible ASCII and tabs only; anything else cannot go into a header."""
    return all(c == '\t' or 32 <= ord(c) < 127 for c in value)


@asynccontextmanager
async def get_api_client(**kwargs):
    """
    Get API client as async context manager.

    Usage:
        async with get_api_client(api_token="...") as client:
            servers = await client.servers()
    """
    client = APIClient(**kwargs)
    try:
        yield client
    finally:
        await client.close()


# Global API client instance for reuse
_global_client: Optional[APIClient] = None


async def get_global_client() -> APIClient:
    """
    Get global API client instance with automatic session management.

    Returns:
        Shared APIClient instance configured from the environment
    """
    global _global_client
    if _global_client is None:
        _global_client = APIClient()

    await _global_client._ensure_session()
    return _global_client


async def cleanup_global_client() -> None:
    """Clean up global API client. Call during application shutdown."""
    global _global_client
    if _global_client:
        await _global_client.close()
        _global_client = None
