"""
Static constants for the Webdock API client

Endpoint table, success codes and required request fields.
Runtime settings (token, base URL, timeout) live in config.py.
"""
from types import MappingProxyType

# Logical resource name -> URL path segment under the base URL
ENDPOINTS = MappingProxyType({
    "ping": "ping",
    "servers": "servers",
    "locations": "locations",
    "profiles": "profiles",
    "images": "images",
    "pubkeys": "account/publicKeys",
    "scripts": "scripts",
    "hooks": "hooks",
    "events": "events",
})

# 418 is what the API returns for some idempotent ping calls
SUCCESS_STATUS_CODES = frozenset({200, 201, 202, 418})

# Required body fields, checked locally before a request is sent
PROVISION_SERVER_FIELDS = ("name", "slug", "locationId", "profileSlug", "imageSlug")
CREATE_PUBLIC_KEY_FIELDS = ("name", "publicKey")
CREATE_SCRIPT_FIELDS = ("name", "filename", "content")
CREATE_HOOK_FIELDS = ("callbackUrl",)

# Response bodies longer than this are truncated in debug logs
LOG_TRUNCATE_LENGTH = 1200
