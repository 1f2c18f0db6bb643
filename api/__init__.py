"""
API client layer for the Webdock REST API

HTTP client for communicating with api.webdock.io.
"""
from .client import (
    APIClient,
    HTTPMethod,
    validate_required_fields,
    get_api_client,
    get_global_client,
    cleanup_global_client,
)

__all__ = [
    'APIClient',
    'HTTPMethod',
    'validate_required_fields',
    'get_api_client',
    'get_global_client',
    'cleanup_global_client',
]
