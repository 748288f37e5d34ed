"""
Tests for transport selection and the concrete transports
"""

import socket
import ssl
from unittest.mock import MagicMock, Mock, patch

import pytest
import requests

from meeteeor_sdk.config import ClientConfig
from meeteeor_sdk.exceptions import ConfigurationError, ConnectionException
from meeteeor_sdk.http import HttpRequest, HttpResponse, build_ssl_context
from meeteeor_sdk.http.factory import HttpClientFactory
from meeteeor_sdk.http.requests_transport import RequestsTransport
from meeteeor_sdk.http.socket_transport import SocketTransport

URL = 'https://api.example.com/api/transaction/read?spaceId=1&id=2'


def make_request(url=URL, method='GET', body=None):
    request = HttpRequest(method=method, url=url, timeout=7)
    request.add_header('x-mac-value', 'abc')
    request.set_body(body)
    return request


def client_with(config=None):
    client = Mock()
    client.config = config or ClientConfig()
    return client


class TestHttpClientFactory:
    """Test transport selection"""

    def test_priority_order(self):
        assert HttpClientFactory.transport_types() == ['requests', 'httpx', 'socket']

    def test_auto_selects_first_available(self):
        assert isinstance(HttpClientFactory.get_client(), RequestsTransport)

    def test_falls_back_in_priority_order(self):
        available = {'requests': False, 'httpx': False, 'socket': True}
        with patch.object(HttpClientFactory, 'is_available', side_effect=available.get):
            assert isinstance(HttpClientFactory.get_client(), SocketTransport)

    def test_no_transport(self):
        with patch.object(HttpClientFactory, 'is_available', return_value=False):
            with pytest.raises(ConfigurationError) as exc_info:
                HttpClientFactory.get_client()
        assert exc_info.value.error_code == 'NO_TRANSPORT'

    def test_explicit_type_does_not_fall_back(self):
        available = {'requests': True, 'httpx': False, 'socket': True}
        with patch.object(HttpClientFactory, 'is_available', side_effect=available.get):
            with pytest.raises(ConfigurationError) as exc_info:
                HttpClientFactory.get_client('httpx')
        assert exc_info.value.error_code == 'TRANSPORT_UNAVAILABLE'

    def test_unknown_type(self):
        with pytest.raises(ConfigurationError) as exc_info:
            HttpClientFactory.get_client('urllib3')
        assert exc_info.value.error_code == 'UNKNOWN_TRANSPORT'
        assert not HttpClientFactory.is_available('urllib3')

    def test_explicit_type(self):
        assert isinstance(HttpClientFactory.get_client('socket'), SocketTransport)

    def test_missing_module_is_unavailable(self):
        with patch('meeteeor_sdk.http.factory.importlib.util.find_spec', return_value=None):
            assert HttpClientFactory.available_transports() == {
                'requests': False, 'httpx': False, 'socket': False
            }


class TestSslContext:

    def test_verification_enabled(self):
        context = build_ssl_context(ClientConfig())
        assert context.verify_mode == ssl.CERT_REQUIRED
        assert context.check_hostname is True

    def test_verification_disabled(self):
        context = build_ssl_context(ClientConfig().with_certificate_authority_check(False))
        assert context.verify_mode == ssl.CERT_NONE
        assert context.check_hostname is False


class TestRequestsTransport:
    """Test the requests based transport with a patched session"""

    def setup_method(self):
        self.transport = RequestsTransport()
        self.session_response = Mock()
        self.session_response.status_code = 201
        self.session_response.headers = {'Content-Type': 'application/json'}
        self.session_response.content = b'{"id": 1}'

    def test_send(self):
        config = ClientConfig()
        with patch.object(self.transport.session, 'request', return_value=self.session_response) as mock_request:
            response = self.transport.send(client_with(config), make_request(method='POST', body=b'{}'))

        assert response == HttpResponse(201, {'content-type': 'application/json'}, b'{"id": 1}')
        args, kwargs = mock_request.call_args
        assert args == ('POST', URL)
        assert kwargs['data'] == b'{}'
        assert kwargs['timeout'] == 7
        assert kwargs['verify'] == config.effective_certificate_authority
        assert kwargs['allow_redirects'] is False
        assert kwargs['headers']['x-mac-value'] == 'abc'

    def test_verification_disabled(self):
        config = ClientConfig().with_certificate_authority_check(False)
        with patch.object(self.transport.session, 'request', return_value=self.session_response) as mock_request:
            self.transport.send(client_with(config), make_request())
        assert mock_request.call_args.kwargs['verify'] is False

    def test_session_has_no_default_headers(self):
        assert len(self.transport.session.headers) == 0

    @pytest.mark.parametrize('error, code', [
        (requests.exceptions.ConnectTimeout('slow'), 'TIMEOUT'),
        (requests.exceptions.ReadTimeout('slow'), 'TIMEOUT'),
        (requests.exceptions.SSLError('bad cert'), 'SSL_ERROR'),
        (requests.exceptions.ConnectionError('refused'), 'CONNECTION_ERROR'),
        (requests.exceptions.TooManyRedirects('loop'), 'CONNECTION_ERROR'),
    ])
    def test_errors_mapped(self, error, code):
        with patch.object(self.transport.session, 'request', side_effect=error):
            with pytest.raises(ConnectionException) as exc_info:
                self.transport.send(client_with(), make_request())
        assert exc_info.value.error_code == code
        assert exc_info.value.url == URL

    def test_close_resets_session(self):
        session = self.transport.session
        self.transport.close()
        assert self.transport.session is not session


class TestSocketTransport:
    """Test the standard library transport with a patched connection"""

    def setup_method(self):
        self.transport = SocketTransport()
        self.connection = MagicMock()
        raw_response = self.connection.getresponse.return_value
        raw_response.status = 200
        raw_response.getheaders.return_value = [('Content-Type', 'text/plain'), ('X-A', '1'), ('x-a', '2')]
        raw_response.read.return_value = b'ok'

    def test_send_https(self):
        with patch('meeteeor_sdk.http.socket_transport.http.client.HTTPSConnection',
                   return_value=self.connection) as mock_https:
            response = self.transport.send(client_with(), make_request(method='POST', body=b'{}'))

        args, kwargs = mock_https.call_args
        assert args == ('api.example.com', 443)
        assert kwargs['timeout'] == 7
        assert isinstance(kwargs['context'], ssl.SSLContext)

        method, path = self.connection.request.call_args.args
        assert (method, path) == ('POST', '/api/transaction/read?spaceId=1&id=2')
        sent = self.connection.request.call_args.kwargs
        assert sent['body'] == b'{}'
        assert sent['headers']['connection'] == 'close'
        assert sent['headers']['x-mac-value'] == 'abc'

        assert response.status_code == 200
        assert response.text == 'ok'
        assert response.headers == {'content-type': 'text/plain', 'x-a': '1, 2'}
        self.connection.close.assert_called_once()

    def test_send_http(self):
        with patch('meeteeor_sdk.http.socket_transport.http.client.HTTPConnection',
                   return_value=self.connection) as mock_http:
            self.transport.send(client_with(), make_request(url='http://localhost:8080/api/x'))
        assert mock_http.call_args.args == ('localhost', 8080)

    @pytest.mark.parametrize('error, code', [
        (socket.timeout('timed out'), 'TIMEOUT'),
        (ssl.SSLError('bad cert'), 'SSL_ERROR'),
        (ConnectionRefusedError('refused'), 'CONNECTION_ERROR'),
    ])
    def test_errors_mapped(self, error, code):
        self.connection.request.side_effect = error
        with patch('meeteeor_sdk.http.socket_transport.http.client.HTTPSConnection',
                   return_value=self.connection):
            with pytest.raises(ConnectionException) as exc_info:
                self.transport.send(client_with(), make_request())
        assert exc_info.value.error_code == code
        self.connection.close.assert_called_once()


class TestHttpxTransport:
    """Test the httpx transport against httpx.MockTransport"""

    def setup_method(self):
        self.httpx = pytest.importorskip('httpx')
        from meeteeor_sdk.http.httpx_transport import HttpxTransport
        self.seen = []

        def handler(request):
            self.seen.append(request)
            return self.httpx.Response(
                202,
                headers=[('Content-Type', 'application/json'), ('Set-Cookie', 'a=1'), ('Set-Cookie', 'b=2')],
                content=b'{"ok": true}'
            )

        self.transport = HttpxTransport(self.httpx.MockTransport(handler))

    def teardown_method(self):
        self.transport.close()

    def test_send(self):
        response = self.transport.send(client_with(), make_request(method='PUT', body=b'{}'))

        sent = self.seen[0]
        assert sent.method == 'PUT'
        assert str(sent.url) == URL
        assert sent.headers['x-mac-value'] == 'abc'
        assert sent.content == b'{}'

        assert response.status_code == 202
        assert response.get_header('set-cookie') == 'a=1, b=2'
        assert response.body == b'{"ok": true}'

    def test_client_reused_per_tls_setting(self):
        config = ClientConfig()
        self.transport.send(client_with(config), make_request())
        self.transport.send(client_with(config), make_request())
        self.transport.send(client_with(config.with_certificate_authority_check(False)), make_request())
        assert len(self.transport._clients) == 2

    def test_timeout_mapped(self):
        from meeteeor_sdk.http.httpx_transport import HttpxTransport

        def handler(request):
            raise self.httpx.ReadTimeout('slow', request=request)

        transport = HttpxTransport(self.httpx.MockTransport(handler))
        with pytest.raises(ConnectionException) as exc_info:
            transport.send(client_with(), make_request())
        assert exc_info.value.error_code == 'TIMEOUT'

    def test_connect_error_mapped(self):
        from meeteeor_sdk.http.httpx_transport import HttpxTransport

        def handler(request):
            raise self.httpx.ConnectError('refused', request=request)

        transport = HttpxTransport(self.httpx.MockTransport(handler))
        with pytest.raises(ConnectionException) as exc_info:
            transport.send(client_with(), make_request())
        assert exc_info.value.error_code == 'CONNECTION_ERROR'
