"""
Custom exceptions for the Webdock API client

Every failure the client can report maps to one of these classes.
Nothing is retried or swallowed inside the client; callers decide on recovery.
"""
from typing import Optional


class WebdockException(Exception):
    """Base exception for all client-related errors."""
    pass


class TransportException(WebdockException):
    """Raised when the request never produced an HTTP response (connection, TLS, timeout)."""

    def __init__(self, message: str = "", original: Optional[BaseException] = None):
        super().__init__(message)
        self.original = original


class ServiceException(WebdockException):
    """Raised when the API answers with a non-success status code."""

    def __init__(self, status_code: int, reason: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason or ""
        super().__init__(f"{status_code} Error: {self.reason}")


class ValidationException(WebdockException):
    """Exception for local input errors detected before any request is sent."""
    pass


class ResponseDecodeException(WebdockException):
    """Raised when a successful response body cannot be decoded."""
    pass


class ConfigurationException(WebdockException):
    """Exception for configuration-related errors."""
    pass
