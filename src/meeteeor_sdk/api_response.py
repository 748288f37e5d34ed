"""
API response types and response classification

Every response ends in exactly one of three states: success (2xx), version
conflict (409) or API error (anything else). JSON decoding is lenient on both
paths; a body that is not JSON is returned as text.
"""

import json
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from .exceptions import ApiException, VersioningException
from .http.response import HttpResponse
from .serializer import ObjectSerializer

_FILENAME_PATTERN = re.compile(r'filename="?([^";]+)"?', re.IGNORECASE)


class ResponseKind(str, Enum):
    """How a successful response body is returned to the caller"""
    JSON = "json"       # decoded JSON, raw text when the body is not JSON
    STRING = "string"   # body text, unparsed
    BYTES = "bytes"     # raw body bytes
    FILE = "file"       # body stored in the temp folder, open binary file


@dataclass(frozen=True)
class ApiResponse:
    """
    Successful API call result

    Attributes:
        status_code: HTTP status code
        headers: Response headers
        data: Decoded JSON value, text, bytes or binary file depending on the response kind
    """
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    data: Any = None


def is_success(status_code: int) -> bool:
    return 200 <= status_code <= 299


def decode_body(response: HttpResponse) -> Any:
    """Decode a JSON body, falling back to the raw text."""
    text = response.text
    try:
        return json.loads(text)
    except ValueError:
        return text


def classify_response(
    response: HttpResponse,
    url: str,
    resource_path: str,
    response_kind: ResponseKind = ResponseKind.JSON,
    serializer: Optional[ObjectSerializer] = None
) -> ApiResponse:
    """
    Map a transport response to a result or an exception.

    Args:
        response: Response returned by the transport
        url: Request URL, used in error messages
        resource_path: Resource path, reported on version conflicts
        response_kind: How a successful body is returned
        serializer: Serializer used for file responses

    Returns:
        ApiResponse: Result for 2xx responses

    Raises:
        VersioningException: For 409 responses
        ApiException: For every other non-2xx response
    """
    status = response.status_code

    if is_success(status):
        if response_kind == ResponseKind.STRING:
            data = response.text
        elif response_kind == ResponseKind.BYTES:
            data = response.body
        elif response_kind == ResponseKind.FILE:
            data = (serializer or ObjectSerializer()).write_file(response.body, _filename(response))
        else:
            data = decode_body(response)
        return ApiResponse(status_code=status, headers=dict(response.headers), data=data)

    if status == 409:
        raise VersioningException(resource_path)

    raise ApiException(
        f"Error {status} connecting to the API ({url}) : {response.text}",
        status,
        response.headers,
        decode_body(response)
    )


def _filename(response: HttpResponse) -> Optional[str]:
    disposition = response.get_header('content-disposition')
    if not disposition:
        return None
    match = _FILENAME_PATTERN.search(disposition)
    return match.group(1) if match else None
