"""
HTTP response model
"""

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass(frozen=True)
class HttpResponse:
    """
    Response returned by a transport

    Attributes:
        status_code: HTTP status code
        headers: Response headers, keyed by lower-case name
        body: Raw response body
    """
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b''

    @property
    def text(self) -> str:
        """Body decoded as UTF-8, with undecodable bytes replaced."""
        return self.body.decode('utf-8', errors='replace')

    def get_header(self, name: str) -> Optional[str]:
        return self.headers.get(name.lower())

    @classmethod
    def create(cls, status_code: int, headers, body: Optional[bytes]) -> 'HttpResponse':
        """Build a response from any header mapping or (name, value) pairs."""
        items = headers.items() if hasattr(headers, 'items') else headers
        normalized = {}
        for name, value in items:
            key = name.lower()
            # Repeated headers are joined the way HTTP allows
            normalized[key] = f"{normalized[key]}, {value}" if key in normalized else value
        return cls(status_code=int(status_code), headers=normalized, body=body or b'')
