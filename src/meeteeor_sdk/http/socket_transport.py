"""
Minimal transport over a plain socket connection

Uses only the standard library (``http.client`` and ``ssl``) and opens one
connection per request.
"""

import http.client
import logging
import socket
import ssl

from ..config import ClientConfig
from ..exceptions import ConnectionException
from .request import HttpRequest
from .response import HttpResponse
from .transport import HttpTransport, build_ssl_context

logger = logging.getLogger(__name__)


class SocketTransport(HttpTransport):
    """Transport without third-party dependencies"""

    name = 'socket'

    def _open_connection(self, config: ClientConfig, request: HttpRequest) -> http.client.HTTPConnection:
        if request.scheme == 'https':
            return http.client.HTTPSConnection(
                request.host,
                request.port,
                timeout=request.timeout,
                context=build_ssl_context(config),
            )
        return http.client.HTTPConnection(request.host, request.port, timeout=request.timeout)

    def _send(self, config: ClientConfig, request: HttpRequest) -> HttpResponse:
        connection = self._open_connection(config, request)
        headers = dict(request.headers)
        headers.setdefault('connection', 'close')

        try:
            connection.request(request.method, request.path, body=request.body, headers=headers)
            response = connection.getresponse()
            body = response.read()
            return HttpResponse.create(response.status, response.getheaders(), body)
        except socket.timeout as e:
            raise ConnectionException(
                f"Request timeout after {request.timeout} seconds: {request.url}",
                "TIMEOUT",
                url=request.url,
                details={'original_error': str(e)}
            )
        except ssl.SSLError as e:
            raise ConnectionException(
                f"TLS error connecting to {request.url}: {e}",
                "SSL_ERROR",
                url=request.url
            )
        except (OSError, http.client.HTTPException) as e:
            raise ConnectionException(f"Connection error: {e}", url=request.url)
        finally:
            connection.close()
