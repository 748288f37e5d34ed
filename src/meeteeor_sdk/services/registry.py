"""
Service registry

Maps service names to service classes and keeps one instance of each per
API client.
"""

import threading
from typing import TYPE_CHECKING, Dict, List, Type

from ..exceptions import ConfigurationError
from .base import ApiService
from .refund_service import RefundService
from .transaction_service import TransactionService

if TYPE_CHECKING:
    from ..api_client import ApiClient

SERVICE_CLASSES: Dict[str, Type[ApiService]] = {
    'refund': RefundService,
    'transaction': TransactionService,
}


def register_service(name: str, service_class: Type[ApiService]) -> None:
    """Register a service class under a name for all clients."""
    if not isinstance(service_class, type) or not issubclass(service_class, ApiService):
        raise ConfigurationError(
            f"Service '{name}' must be an ApiService subclass",
            details={'service': name}
        )
    SERVICE_CLASSES[name] = service_class


def list_services() -> List[str]:
    return sorted(SERVICE_CLASSES)


class ServiceRegistry:
    """Per-client, thread-safe memo of service instances"""

    def __init__(self, api_client: 'ApiClient'):
        self._api_client = api_client
        self._instances: Dict[str, ApiService] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> ApiService:
        """
        Return the service instance for a name, creating it once.

        Raises:
            ConfigurationError: If no service is registered under the name
        """
        with self._lock:
            service = self._instances.get(name)
            if service is None:
                service_class = SERVICE_CLASSES.get(name)
                if service_class is None:
                    raise ConfigurationError(
                        f"Unknown service: {name}",
                        "UNKNOWN_SERVICE",
                        {'available_services': list_services()}
                    )
                service = service_class(self._api_client)
                self._instances[name] = service
            return service
