"""
Debug output for Meeteeor Python SDK

Debug messages go to the ``meeteeor_sdk`` logger. When debugging is enabled on
a client, a handler writing to stdout or to the configured debug file is
attached once per target.
"""

import logging
import sys
import threading
from typing import Dict, Optional

SDK_LOGGER_NAME = 'meeteeor_sdk'
DEBUG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'

_handlers: Dict[str, logging.Handler] = {}
_lock = threading.Lock()


def enable_debug_output(debug_file: Optional[str] = None) -> logging.Handler:
    """
    Send SDK debug logging to a file or stdout.

    Args:
        debug_file: Path of the debug file; None writes to stdout

    Returns:
        logging.Handler: The handler attached for this target
    """
    target = debug_file or '<stdout>'
    sdk_logger = logging.getLogger(SDK_LOGGER_NAME)

    with _lock:
        handler = _handlers.get(target)
        if handler is None:
            if debug_file:
                handler = logging.FileHandler(debug_file, encoding='utf-8')
            else:
                handler = logging.StreamHandler(sys.stdout)
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
            sdk_logger.addHandler(handler)
            _handlers[target] = handler

    sdk_logger.setLevel(logging.DEBUG)
    return handler


def disable_debug_output(debug_file: Optional[str] = None) -> None:
    """Detach the handler of a debug target, if any."""
    target = debug_file or '<stdout>'
    with _lock:
        handler = _handlers.pop(target, None)
    if handler is not None:
        logging.getLogger(SDK_LOGGER_NAME).removeHandler(handler)
        handler.close()
