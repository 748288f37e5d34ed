"""
API client for the Meeteeor payment service

The client builds every request, signs it with the application user's key,
sends it through the bound transport and classifies the response. It never
retries; errors propagate unchanged to the caller.
"""

import logging
import platform
import threading
from typing import Any, Dict, Iterable, Mapping, Optional, Union
from urllib.parse import urlencode

from .api_response import ApiResponse, ResponseKind, classify_response
from .config import ClientConfig, validate_timeout
from .http.factory import HttpClientFactory
from .http.request import HttpRequest
from .http.transport import HttpTransport
from .logging_config import enable_debug_output
from .serializer import ObjectSerializer
from .services.registry import ServiceRegistry
from .signing.mac_signer import MacSigner
from .signing.types import Credentials, TimestampGenerator
from .version import __version__

logger = logging.getLogger(__name__)

SDK_PROVIDER = 'Meeteeor'
SDK_LANGUAGE = 'python'


def sdk_headers() -> Dict[str, str]:
    """Identification headers sent with every request."""
    return {
        'x-meta-sdk-version': __version__,
        'x-meta-sdk-language': SDK_LANGUAGE,
        'x-meta-sdk-provider': SDK_PROVIDER,
        'x-meta-sdk-language-version': platform.python_version(),
    }


class ApiClient:
    """
    Sends API calls to the endpoint.

    The configuration is immutable; use :meth:`with_config` to obtain a
    client with different settings. The transport is bound on the first call
    and kept for the lifetime of the client.
    """

    def __init__(
        self,
        user_id: int,
        application_key: str,
        config: Optional[ClientConfig] = None,
        *,
        transport: Optional[HttpTransport] = None,
        timestamp_generator: Optional[TimestampGenerator] = None
    ):
        """
        Initialize the API client.

        Args:
            user_id: The application user's id
            application_key: The application user's base64 encoded security key
            config: Client configuration; defaults apply when omitted
            transport: Transport to use instead of the configured/auto-detected one
            timestamp_generator: Optional clock for the signer

        Raises:
            ConfigurationError: If the credentials or configuration are invalid
        """
        self._credentials = Credentials(user_id, application_key)
        self._config = config or ClientConfig()
        self._signer = MacSigner(self._credentials, timestamp_generator)
        self._serializer = ObjectSerializer(self._config.effective_temp_folder_path)
        self._transport = transport
        self._transport_injected = transport is not None
        self._transport_lock = threading.Lock()
        self._services = ServiceRegistry(self)

        if self._config.debugging:
            enable_debug_output(self._config.debug_file)

        logger.debug(f"Initialized API client for {self._config.base_path} (user {user_id})")

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def signer(self) -> MacSigner:
        return self._signer

    @property
    def serializer(self) -> ObjectSerializer:
        return self._serializer

    @property
    def base_path(self) -> str:
        return self._config.base_path

    @property
    def default_headers(self) -> Dict[str, str]:
        """SDK identification headers overlaid with the configured default headers."""
        headers = sdk_headers()
        headers.update(self._config.default_headers)
        return headers

    def with_config(self, config: ClientConfig) -> 'ApiClient':
        """
        Return a new client with the same credentials and another configuration.

        A transport passed to the constructor is shared with the new client as
        long as the configured transport type stays the same; otherwise the new
        client selects its own transport on first use.
        """
        transport = None
        if self._transport_injected and config.http_client_type == self._config.http_client_type:
            transport = self._transport
        return ApiClient(
            self._credentials.user_id,
            self._credentials.application_key,
            config,
            transport=transport,
            timestamp_generator=self._signer.timestamp_generator
        )

    def get_transport(self) -> HttpTransport:
        """
        Return the bound transport, selecting it on first use.

        Raises:
            ConfigurationError: If the configured transport cannot be used
        """
        with self._transport_lock:
            if self._transport is None:
                self._transport = HttpClientFactory.get_client(self._config.http_client_type)
                logger.debug(f"Bound transport: {self._transport.name}")
            return self._transport

    @staticmethod
    def select_header_accept(accept: Iterable[str]) -> Optional[str]:
        """Return the Accept header value, preferring JSON."""
        accept = [value for value in accept if value]
        if not accept:
            return None
        if any('application/json' in value.lower() for value in accept):
            return 'application/json'
        return ','.join(accept)

    @staticmethod
    def select_header_content_type(content_types: Iterable[str]) -> str:
        """Return the Content-Type header value, defaulting to JSON."""
        content_types = [value for value in content_types if value]
        if not content_types:
            return 'application/json'
        if any('application/json' in value.lower() for value in content_types):
            return 'application/json'
        return ','.join(content_types)

    def build_request_url(self, resource_path: str, query_params: Optional[Mapping[str, Any]] = None) -> str:
        """
        Build the request URL.

        Args:
            resource_path: Path of the endpoint resource
            query_params: Query parameters, appended in order

        Returns:
            str: Base path + resource path (+ ``?`` query string)
        """
        url = self._config.base_path + resource_path
        if query_params:
            pairs = self._serializer.to_query_pairs(query_params)
            if pairs:
                url = f"{url}?{urlencode(pairs)}"
        return url

    def call_api(
        self,
        resource_path: str,
        method: str,
        query_params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        header_params: Optional[Mapping[str, Union[str, int]]] = None,
        response_kind: ResponseKind = ResponseKind.JSON,
        endpoint_path: Optional[str] = None,
        timeout: Optional[float] = None
    ) -> ApiResponse:
        """
        Make the HTTP call (synchronously).

        Args:
            resource_path: Path to the endpoint resource
            method: HTTP method
            query_params: Query parameters
            body: Request body (model object, mapping, str or bytes)
            header_params: Header parameters of the call
            response_kind: How a successful body is returned
            endpoint_path: Endpoint path before parameter expansion, for logging
            timeout: Timeout override in seconds

        Returns:
            ApiResponse: Result of a 2xx response

        Raises:
            ApiException: On non-2xx responses other than 409
            VersioningException: On 409 responses
            ConnectionException: When the transport fails
            ConfigurationError: When the timeout override is invalid or no usable
                transport is configured
        """
        if timeout is None:
            timeout = self._config.connection_timeout
        else:
            validate_timeout(timeout)

        request = HttpRequest(
            method=method,
            url=self.build_request_url(resource_path, query_params),
            timeout=timeout
        )
        request.set_user_agent(self._config.user_agent)
        request.add_headers(self.default_headers)
        if header_params:
            request.add_headers({name: value for name, value in header_params.items() if value is not None})
        # Signed last so it always reflects the final method and path
        auth_headers = self._signer.authentication_headers(request.method, request.path)
        request.add_headers(auth_headers.as_headers())
        request.set_body(self._serializer.serialize_body(body))

        logger.debug(f"Calling {request.method} {endpoint_path or resource_path}")

        response = self.get_transport().send(self, request)

        return classify_response(
            response,
            request.url,
            resource_path,
            response_kind,
            self._serializer
        )

    def service(self, name: str):
        """
        Return the service registered under a name.

        Raises:
            ConfigurationError: If no service is registered under the name
        """
        return self._services.get(name)

    @property
    def transaction_service(self):
        return self._services.get('transaction')

    @property
    def refund_service(self):
        return self._services.get('refund')

    def close(self) -> None:
        """Release the transport's pooled connections."""
        with self._transport_lock:
            if self._transport is not None:
                self._transport.close()

    def __enter__(self) -> 'ApiClient':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"ApiClient(user_id={self._credentials.user_id}, base_path={self._config.base_path!r})"
