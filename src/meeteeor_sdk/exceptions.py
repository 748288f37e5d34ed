"""
Exception classes for Meeteeor Python SDK
"""

from typing import Optional, Dict, Any, Mapping


class MeeteeorSDKError(Exception):
    """Base exception for all Meeteeor SDK errors"""

    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ConfigurationError(MeeteeorSDKError):
    """Exception raised for invalid client, credential or transport configuration"""

    def __init__(self, message: str, error_code: str = "INVALID_CONFIG", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class ConnectionException(MeeteeorSDKError):
    """Exception raised when the transport fails before an HTTP status is known"""

    def __init__(self, message: str, error_code: str = "CONNECTION_ERROR",
                 url: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)
        self.url = url


class VersioningException(MeeteeorSDKError):
    """
    Exception raised when the server answers with 409 Conflict.

    The resource was modified since it was read; callers may re-read it
    and retry the update.
    """

    def __init__(self, resource_path: str):
        super().__init__(
            f"The object '{resource_path}' could not be updated because it was modified concurrently. "
            "Read the object again and retry the update.",
            "VERSION_CONFLICT",
            {"resource_path": resource_path}
        )
        self.resource_path = resource_path


class ApiException(MeeteeorSDKError):
    """Exception raised for any non-2xx response other than 409"""

    def __init__(self, message: str, status_code: int = 0,
                 headers: Optional[Mapping[str, str]] = None, response_body: Any = None):
        super().__init__(message, "API_ERROR", {"status_code": status_code})
        self.status_code = status_code
        self.headers = dict(headers or {})
        self.response_body = response_body
