"""
Base class for per-resource services
"""

from typing import TYPE_CHECKING, Any, Mapping, Optional, Sequence

from ..api_response import ApiResponse, ResponseKind

if TYPE_CHECKING:
    from ..api_client import ApiClient

JSON_MEDIA_TYPES = ('application/json;charset=utf-8',)


class ApiService:
    """
    Thin proxy that turns resource operations into ``call_api`` calls.

    Errors raised by the client propagate unchanged.
    """

    def __init__(self, api_client: 'ApiClient'):
        self._api_client = api_client

    @property
    def api_client(self) -> 'ApiClient':
        return self._api_client

    def _call(
        self,
        method: str,
        resource_path: str,
        query_params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        response_kind: ResponseKind = ResponseKind.JSON,
        accept: Sequence[str] = JSON_MEDIA_TYPES,
        content_types: Sequence[str] = JSON_MEDIA_TYPES,
        timeout: Optional[float] = None
    ) -> ApiResponse:
        header_params = {}
        accept_header = self._api_client.select_header_accept(accept)
        if accept_header:
            header_params['Accept'] = accept_header
        header_params['Content-Type'] = self._api_client.select_header_content_type(content_types)

        return self._api_client.call_api(
            resource_path,
            method,
            query_params=query_params,
            body=body,
            header_params=header_params,
            response_kind=response_kind,
            endpoint_path=resource_path,
            timeout=timeout
        )
