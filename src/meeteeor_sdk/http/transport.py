"""
Transport abstraction

A transport physically sends an ``HttpRequest`` and returns an
``HttpResponse``. Failures before an HTTP status is known are raised as
``ConnectionException``; transports never retry.
"""

import logging
import ssl
import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..config import ClientConfig
from .request import HttpRequest
from .response import HttpResponse

if TYPE_CHECKING:
    from ..api_client import ApiClient

logger = logging.getLogger(__name__)


class HttpTransport(ABC):
    """Base class for transports"""

    #: Transport type name used in configuration
    name: str = ''

    def send(self, client: 'ApiClient', request: HttpRequest) -> HttpResponse:
        """
        Send a request.

        Args:
            client: API client the request belongs to
            request: Request to send

        Returns:
            HttpResponse: Response received from the server

        Raises:
            ConnectionException: On network, TLS or timeout failures
        """
        config = client.config
        started = time.perf_counter()
        if config.debugging:
            logger.debug(f"[{self.name}] {request.method} {request.url} (token {request.idempotency_token})")
            logger.debug(f"[{self.name}] request headers: {request.headers}")

        response = self._send(config, request)

        if config.debugging:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.debug(
                f"[{self.name}] {request.method} {request.url} -> {response.status_code} "
                f"in {elapsed_ms:.1f}ms"
            )
            logger.debug(f"[{self.name}] response body: {response.text}")

        return response

    @abstractmethod
    def _send(self, config: ClientConfig, request: HttpRequest) -> HttpResponse:
        """Transport specific send"""

    def close(self) -> None:
        """Release pooled connections."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


def build_ssl_context(config: ClientConfig) -> ssl.SSLContext:
    """
    Build the TLS context for a configuration.

    The certificate chain is verified against the configured CA bundle unless
    the authority check is disabled.
    """
    if not config.certificate_authority_check:
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        return context

    return ssl.create_default_context(cafile=config.effective_certificate_authority)
