"""
Client configuration for Meeteeor Python SDK

Provides the immutable configuration the API client is built from, together
with loaders for JSON strings and files. Every ``with_*`` method returns a new
configuration; an existing configuration is never mutated.
"""

import json
import os
import tempfile
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import urlsplit

import certifi

from ..exceptions import ConfigurationError
from ..version import __version__

DEFAULT_BASE_PATH = 'https://paymentshub.weareplanet.com:443/api'
INITIAL_CONNECTION_TIMEOUT = 25
DEFAULT_USER_AGENT = f'Python-Client/{__version__}/python'


@dataclass(frozen=True)
class ClientConfig:
    """
    API client configuration

    Attributes:
        base_path: Base URL of the API endpoint (trailing slash stripped)
        certificate_authority: CA bundle file; None selects the certifi bundle
        certificate_authority_check: Whether the server certificate chain is verified
        connection_timeout: Connection timeout in seconds
        http_client_type: Transport type; None selects the first available one
        user_agent: Value of the User-Agent header
        default_headers: Headers added to every request
        debugging: Whether request/response debug logging is enabled
        debug_file: Debug output file; None writes to stdout
        temp_folder_path: Folder for downloaded files; None selects the system temp dir
    """
    base_path: str = DEFAULT_BASE_PATH
    certificate_authority: Optional[str] = None
    certificate_authority_check: bool = True
    connection_timeout: float = INITIAL_CONNECTION_TIMEOUT
    http_client_type: Optional[str] = None
    user_agent: str = DEFAULT_USER_AGENT
    default_headers: Mapping[str, str] = field(default_factory=dict)
    debugging: bool = False
    debug_file: Optional[str] = None
    temp_folder_path: Optional[str] = None

    def __post_init__(self):
        """Validate and normalize configuration"""
        if not self.base_path or not isinstance(self.base_path, str):
            raise ConfigurationError("Base path cannot be empty")
        parsed = urlsplit(self.base_path)
        if parsed.scheme not in ('http', 'https') or not parsed.hostname:
            raise ConfigurationError(
                f"Invalid base path format: {self.base_path}",
                details={'base_path': self.base_path}
            )
        object.__setattr__(self, 'base_path', self.base_path.rstrip('/'))

        if self.certificate_authority is not None and not os.path.isfile(self.certificate_authority):
            raise ConfigurationError(
                'The certificate authority file does not exist.',
                details={'certificate_authority': self.certificate_authority}
            )

        validate_timeout(self.connection_timeout)

        if not isinstance(self.user_agent, str):
            raise ConfigurationError('User-agent must be a string.')

        headers = {}
        for key, value in dict(self.default_headers).items():
            _validate_header(key, value)
            headers[key] = value
        object.__setattr__(self, 'default_headers', MappingProxyType(headers))

    @property
    def effective_certificate_authority(self) -> str:
        """CA bundle used when the authority check is enabled."""
        return self.certificate_authority or certifi.where()

    @property
    def effective_temp_folder_path(self) -> str:
        """Folder downloaded files are written to."""
        return self.temp_folder_path or tempfile.gettempdir()

    def with_base_path(self, base_path: str) -> 'ClientConfig':
        return replace(self, base_path=base_path)

    def with_certificate_authority(self, certificate_authority_file: str) -> 'ClientConfig':
        """
        Override the CA bundle used to verify the remote server.

        To turn the check off use :meth:`with_certificate_authority_check`.
        """
        return replace(self, certificate_authority=certificate_authority_file)

    def with_certificate_authority_check(self, enabled: bool = True) -> 'ClientConfig':
        return replace(self, certificate_authority_check=enabled)

    def with_connection_timeout(self, connection_timeout: float) -> 'ClientConfig':
        return replace(self, connection_timeout=connection_timeout)

    def reset_connection_timeout(self) -> 'ClientConfig':
        return replace(self, connection_timeout=INITIAL_CONNECTION_TIMEOUT)

    def with_http_client_type(self, http_client_type: Optional[str]) -> 'ClientConfig':
        """Select a transport type, or None to auto-detect one."""
        return replace(self, http_client_type=http_client_type)

    def with_user_agent(self, user_agent: str) -> 'ClientConfig':
        return replace(self, user_agent=user_agent)

    def with_default_header(self, key: str, value: str) -> 'ClientConfig':
        """Add a header sent with every request; later values win."""
        _validate_header(key, value)
        headers = dict(self.default_headers)
        headers[key] = value
        return replace(self, default_headers=headers)

    def with_debugging(self, enabled: bool = True, debug_file: Optional[str] = None) -> 'ClientConfig':
        return replace(self, debugging=enabled, debug_file=debug_file if debug_file is not None else self.debug_file)

    def with_temp_folder_path(self, temp_folder_path: Optional[str]) -> 'ClientConfig':
        return replace(self, temp_folder_path=temp_folder_path)

    def to_dict(self) -> Dict[str, Any]:
        """Return the configuration as plain JSON-compatible values."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data['default_headers'] = dict(self.default_headers)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ClientConfig':
        """
        Build a configuration from a mapping of field names.

        Raises:
            ConfigurationError: On unknown keys or invalid values
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError("Configuration must be a JSON object", "INVALID_FORMAT")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys: {', '.join(unknown)}",
                "INVALID_FORMAT",
                {'unknown_keys': unknown}
            )

        return cls(**dict(data))


def validate_timeout(timeout: Any) -> None:
    """
    Check a timeout in seconds.

    Raises:
        ConfigurationError: If the timeout is not a positive number
    """
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigurationError(
            'Timeout value must be numeric and a positive number.',
            details={'timeout': repr(timeout)}
        )


def _validate_header(key: Any, value: Any) -> None:
    if not isinstance(key, str) or not key:
        raise ConfigurationError('The header key must be a non-empty string.', details={'key': repr(key)})
    if not isinstance(value, str):
        raise ConfigurationError(
            f"The value of header '{key}' must be a string.",
            details={'key': key, 'value_type': type(value).__name__}
        )


def load_client_config_from_json(json_string: str) -> ClientConfig:
    """Load client configuration from a JSON string"""
    try:
        data = json.loads(json_string)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Failed to parse configuration JSON: {e}", "PARSE_ERROR")
    return ClientConfig.from_dict(data)


def load_client_config_from_file(file_path: Union[str, Path]) -> ClientConfig:
    """Load client configuration from a JSON file"""
    try:
        with open(Path(file_path), 'r', encoding='utf-8') as f:
            json_string = f.read()
    except OSError as e:
        raise ConfigurationError(f"Failed to read configuration file: {e}", "FILE_ERROR")
    return load_client_config_from_json(json_string)
