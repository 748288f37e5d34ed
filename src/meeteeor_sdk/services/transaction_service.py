"""
Transaction service
"""

from typing import Any, Dict, List, Mapping, Optional

from .base import ApiService


class TransactionService(ApiService):
    """Operations on transactions"""

    def count(self, space_id: int, filter: Optional[Mapping[str, Any]] = None) -> int:
        """Count the transactions matching the filter."""
        return self._call('POST', '/transaction/count', {'spaceId': space_id}, filter).data

    def create(self, space_id: int, transaction: Any) -> Dict[str, Any]:
        return self._call('POST', '/transaction/create', {'spaceId': space_id}, transaction).data

    def read(self, space_id: int, id: int) -> Dict[str, Any]:
        return self._call('GET', '/transaction/read', {'spaceId': space_id, 'id': id}, accept=('*/*',)).data

    def search(self, space_id: int, query: Any) -> List[Dict[str, Any]]:
        return self._call('POST', '/transaction/search', {'spaceId': space_id}, query).data

    def update(self, space_id: int, entity: Any) -> Dict[str, Any]:
        """
        Update a pending transaction.

        Raises:
            VersioningException: If the transaction changed since it was read
        """
        return self._call('POST', '/transaction/update', {'spaceId': space_id}, entity).data

    def confirm(self, space_id: int, transaction_model: Any) -> Dict[str, Any]:
        """
        Confirm a pending transaction so it can no longer be changed.

        Raises:
            VersioningException: If the transaction changed since it was read
        """
        return self._call('POST', '/transaction/confirm', {'spaceId': space_id}, transaction_model).data

    def process_without_user_interaction(self, space_id: int, id: int) -> Dict[str, Any]:
        return self._call(
            'POST',
            '/transaction/processWithoutUserInteraction',
            {'spaceId': space_id, 'id': id}
        ).data
