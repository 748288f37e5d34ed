"""
Transport based on the requests library
"""

import logging
import threading

import requests

from ..config import ClientConfig
from ..exceptions import ConnectionException
from .request import HttpRequest
from .response import HttpResponse
from .transport import HttpTransport

logger = logging.getLogger(__name__)


class RequestsTransport(HttpTransport):
    """
    Feature-rich transport using a pooled ``requests.Session``.

    The session is created on first use and shared by all calls made through
    this transport. No retry adapter is mounted.
    """

    name = 'requests'

    def __init__(self):
        self._session = None
        self._lock = threading.Lock()

    @property
    def session(self) -> requests.Session:
        with self._lock:
            if self._session is None:
                self._session = self._create_session()
            return self._session

    def _create_session(self) -> requests.Session:
        session = requests.Session()
        # Every header is set explicitly per request
        session.headers.clear()
        return session

    def _send(self, config: ClientConfig, request: HttpRequest) -> HttpResponse:
        verify = config.effective_certificate_authority if config.certificate_authority_check else False

        try:
            response = self.session.request(
                request.method,
                request.url,
                headers=request.headers,
                data=request.body,
                timeout=request.timeout,
                verify=verify,
                allow_redirects=False,
            )
        except requests.exceptions.Timeout as e:
            raise ConnectionException(
                f"Request timeout after {request.timeout} seconds: {request.url}",
                "TIMEOUT",
                url=request.url,
                details={'original_error': str(e)}
            )
        except requests.exceptions.SSLError as e:
            raise ConnectionException(
                f"TLS error connecting to {request.url}: {e}",
                "SSL_ERROR",
                url=request.url
            )
        except requests.exceptions.ConnectionError as e:
            raise ConnectionException(f"Connection error: {e}", url=request.url)
        except requests.exceptions.RequestException as e:
            raise ConnectionException(f"Request failed: {e}", url=request.url)

        return HttpResponse.create(response.status_code, response.headers, response.content)

    def close(self) -> None:
        with self._lock:
            if self._session is not None:
                self._session.close()
                self._session = None
                logger.debug("HTTP session closed")
