"""
Per-resource services for Meeteeor Python SDK
"""

from .base import ApiService
from .refund_service import RefundService
from .transaction_service import TransactionService
from .registry import ServiceRegistry, SERVICE_CLASSES, register_service, list_services

__all__ = [
    'ApiService',
    'RefundService',
    'TransactionService',
    'ServiceRegistry',
    'SERVICE_CLASSES',
    'register_service',
    'list_services',
]
