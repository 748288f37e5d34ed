"""
HTTP request model

One ``HttpRequest`` is built per API call. Header names are normalized to
lower case so lookups are case-insensitive and the last write wins.
"""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Union
from urllib.parse import urlsplit

from ..signing.utils import generate_idempotency_token, request_path

HEADER_USER_AGENT = 'user-agent'
HEADER_IDEMPOTENCY_KEY = 'idempotency-key'


@dataclass
class HttpRequest:
    """
    Request to be sent by a transport

    Attributes:
        method: HTTP method (upper case)
        url: Complete request URL
        timeout: Timeout in seconds enforced by the transport
        headers: Request headers, keyed by lower-case name
        body: Serialized request body
        idempotency_token: Unique token of this request
    """
    method: str
    url: str
    timeout: float
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None
    idempotency_token: str = field(default_factory=generate_idempotency_token)

    def __post_init__(self):
        """Validate request after initialization"""
        if not self.url:
            raise ValueError("Request URL cannot be empty")

        parts = urlsplit(self.url)
        if parts.scheme not in ('http', 'https') or not parts.hostname:
            raise ValueError(f"Invalid request URL: {self.url}")

        self.method = self.method.upper()
        self.headers = {k.lower(): v for k, v in self.headers.items()}
        self.headers[HEADER_IDEMPOTENCY_KEY] = self.idempotency_token

    @property
    def scheme(self) -> str:
        return urlsplit(self.url).scheme

    @property
    def host(self) -> str:
        return urlsplit(self.url).hostname

    @property
    def port(self) -> int:
        parts = urlsplit(self.url)
        if parts.port:
            return parts.port
        return 443 if parts.scheme == 'https' else 80

    @property
    def path(self) -> str:
        """Request-line path, including the query string."""
        return request_path(self.url)

    @property
    def user_agent(self) -> Optional[str]:
        return self.headers.get(HEADER_USER_AGENT)

    def set_user_agent(self, user_agent: str) -> None:
        self.headers[HEADER_USER_AGENT] = user_agent

    def add_header(self, name: str, value: Union[str, int]) -> None:
        self.headers[name.lower()] = str(value)

    def add_headers(self, headers: Mapping[str, Union[str, int]]) -> None:
        """Add headers in order; a later name overwrites an earlier one."""
        for name, value in headers.items():
            self.add_header(name, value)

    def get_header(self, name: str) -> Optional[str]:
        return self.headers.get(name.lower())

    def set_body(self, body: Optional[bytes]) -> None:
        self.body = body
