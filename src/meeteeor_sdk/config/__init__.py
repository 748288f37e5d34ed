"""
Configuration management for Meeteeor Python SDK

This module provides the immutable client configuration and its loaders.
"""

from .client_config import (
    ClientConfig,
    DEFAULT_BASE_PATH,
    DEFAULT_USER_AGENT,
    INITIAL_CONNECTION_TIMEOUT,
    load_client_config_from_json,
    load_client_config_from_file,
    validate_timeout,
)

__all__ = [
    'ClientConfig',
    'DEFAULT_BASE_PATH',
    'DEFAULT_USER_AGENT',
    'INITIAL_CONNECTION_TIMEOUT',
    'load_client_config_from_json',
    'load_client_config_from_file',
    'validate_timeout',
]
