"""
Refund service
"""

from typing import Any, BinaryIO, Dict, List, Mapping, Optional

from ..api_response import ResponseKind
from .base import ApiService


class RefundService(ApiService):
    """Operations on refunds"""

    def count(self, space_id: int, filter: Optional[Mapping[str, Any]] = None) -> int:
        return self._call('POST', '/refund/count', {'spaceId': space_id}, filter).data

    def read(self, space_id: int, id: int) -> Dict[str, Any]:
        return self._call('GET', '/refund/read', {'spaceId': space_id, 'id': id}, accept=('*/*',)).data

    def search(self, space_id: int, query: Any) -> List[Dict[str, Any]]:
        return self._call('POST', '/refund/search', {'spaceId': space_id}, query).data

    def refund(self, space_id: int, refund: Any) -> Dict[str, Any]:
        """Create and execute a refund."""
        return self._call('POST', '/refund/refund', {'spaceId': space_id}, refund).data

    def fail(self, space_id: int, refund_id: int) -> Dict[str, Any]:
        """Mark a manual refund as failed."""
        return self._call('POST', '/refund/fail', {'spaceId': space_id, 'refundId': refund_id}).data

    def succeed(self, space_id: int, refund_id: int) -> Dict[str, Any]:
        """Mark a manual refund as successful."""
        return self._call('POST', '/refund/succeed', {'spaceId': space_id, 'refundId': refund_id}).data

    def get_refund_document(self, space_id: int, id: int) -> BinaryIO:
        """Download the refund document into the configured temp folder."""
        return self._call(
            'GET',
            '/refund/getRefundDocument',
            {'spaceId': space_id, 'id': id},
            response_kind=ResponseKind.FILE,
            accept=('application/pdf',)
        ).data
