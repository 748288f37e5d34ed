"""
Shared fixtures for the Meeteeor SDK test suite
"""

import base64
from typing import List, Optional

import pytest

from meeteeor_sdk import ApiClient, ClientConfig
from meeteeor_sdk.http.request import HttpRequest
from meeteeor_sdk.http.response import HttpResponse
from meeteeor_sdk.http.transport import HttpTransport

USER_ID = 512
SECRET = b'meeteeor-test-shared-secret-0123456789'
APPLICATION_KEY = base64.b64encode(SECRET).decode('ascii')
FIXED_TIMESTAMP = 1700000000
BASE_PATH = 'https://api.example.com/api'


class RecordingTransport(HttpTransport):
    """In-memory transport returning queued responses and recording requests"""

    name = 'recording'

    def __init__(self, responses: Optional[List[HttpResponse]] = None):
        self.responses = list(responses or [])
        self.requests: List[HttpRequest] = []
        self.closed = False

    def respond_with(self, status_code: int, body: bytes = b'', headers=None) -> 'RecordingTransport':
        self.responses.append(HttpResponse.create(status_code, headers or {}, body))
        return self

    def _send(self, config, request):
        self.requests.append(request)
        if self.responses:
            return self.responses.pop(0)
        return HttpResponse(status_code=200, headers={'content-type': 'application/json'}, body=b'{}')

    @property
    def last_request(self) -> HttpRequest:
        return self.requests[-1]

    def close(self):
        self.closed = True


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def config():
    return ClientConfig(base_path=BASE_PATH)


@pytest.fixture
def client(config, transport):
    return ApiClient(
        USER_ID,
        APPLICATION_KEY,
        config,
        transport=transport,
        timestamp_generator=lambda: FIXED_TIMESTAMP
    )
