"""
Transport selection

Transports are probed in a fixed priority order, richest first. An explicit
transport type is used on its own; if it cannot be used the selection fails
instead of falling back to another transport.
"""

import importlib
import importlib.util
import logging
from typing import Dict, List, Optional, Tuple, Type

from ..exceptions import ConfigurationError
from .transport import HttpTransport

logger = logging.getLogger(__name__)


class HttpClientFactory:
    """Factory returning transports by type"""

    TYPE_REQUESTS = 'requests'
    TYPE_HTTPX = 'httpx'
    TYPE_SOCKET = 'socket'

    # type -> (module, class name), in priority order
    _TRANSPORTS: Dict[str, Tuple[str, str]] = {
        TYPE_REQUESTS: ('meeteeor_sdk.http.requests_transport', 'RequestsTransport'),
        TYPE_HTTPX: ('meeteeor_sdk.http.httpx_transport', 'HttpxTransport'),
        TYPE_SOCKET: ('meeteeor_sdk.http.socket_transport', 'SocketTransport'),
    }

    # Module each transport needs at runtime; probed without importing it
    _REQUIRED_MODULES: Dict[str, str] = {
        TYPE_REQUESTS: 'requests',
        TYPE_HTTPX: 'httpx',
        TYPE_SOCKET: 'ssl',
    }

    @classmethod
    def transport_types(cls) -> List[str]:
        """Transport types in priority order."""
        return list(cls._TRANSPORTS)

    @classmethod
    def is_available(cls, transport_type: str) -> bool:
        """Check whether a transport type can be used in this runtime."""
        if transport_type not in cls._TRANSPORTS:
            return False
        return importlib.util.find_spec(cls._REQUIRED_MODULES[transport_type]) is not None

    @classmethod
    def available_transports(cls) -> Dict[str, bool]:
        """Probe every transport type."""
        return {transport_type: cls.is_available(transport_type) for transport_type in cls._TRANSPORTS}

    @classmethod
    def get_transport_class(cls, transport_type: str) -> Type[HttpTransport]:
        module_name, class_name = cls._TRANSPORTS[transport_type]
        module = importlib.import_module(module_name)
        return getattr(module, class_name)

    @classmethod
    def get_client(cls, transport_type: Optional[str] = None) -> HttpTransport:
        """
        Return a transport instance.

        Args:
            transport_type: Explicit transport type, or None to auto-detect

        Returns:
            HttpTransport: New transport instance

        Raises:
            ConfigurationError: If the type is unknown, unavailable, or no
                transport can be used at all
        """
        if transport_type is not None:
            if transport_type not in cls._TRANSPORTS:
                raise ConfigurationError(
                    f"Unknown http client type: {transport_type}",
                    "UNKNOWN_TRANSPORT",
                    {"available_types": cls.transport_types()}
                )
            if not cls.is_available(transport_type):
                raise ConfigurationError(
                    f"The http client type '{transport_type}' is not available in this environment.",
                    "TRANSPORT_UNAVAILABLE",
                    {"transport_type": transport_type}
                )
            logger.debug(f"Using configured transport: {transport_type}")
            return cls.get_transport_class(transport_type)()

        for candidate in cls._TRANSPORTS:
            if cls.is_available(candidate):
                logger.debug(f"Auto-selected transport: {candidate}")
                return cls.get_transport_class(candidate)()

        raise ConfigurationError(
            "No http client is available in this environment.",
            "NO_TRANSPORT",
            {"available_types": cls.transport_types()}
        )
