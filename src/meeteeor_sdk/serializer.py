"""
Request body and query parameter serialization

Model classes are plain field containers; anything with ``to_dict()``,
a dataclass, a mapping or a sequence of those is turned into JSON.
"""

import dataclasses
import datetime
import decimal
import enum
import json
import logging
import os
import tempfile
import uuid
from typing import Any, BinaryIO, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)


class ObjectSerializer:
    """Serializer for request bodies, query values and file downloads"""

    def __init__(self, temp_folder_path: Optional[str] = None):
        self.temp_folder_path = temp_folder_path or tempfile.gettempdir()

    def sanitize_for_serialization(self, data: Any) -> Any:
        """
        Convert data into JSON-compatible values.

        Args:
            data: Model object, dataclass, mapping, sequence or scalar

        Returns:
            JSON-compatible representation; ``None`` values in mappings are dropped
        """
        if data is None or isinstance(data, (str, int, float, bool)):
            return data
        if isinstance(data, enum.Enum):
            return self.sanitize_for_serialization(data.value)
        if isinstance(data, (datetime.datetime, datetime.date)):
            return data.isoformat()
        if isinstance(data, decimal.Decimal):
            return float(data)
        if isinstance(data, uuid.UUID):
            return str(data)
        if isinstance(data, (list, tuple, set)):
            return [self.sanitize_for_serialization(item) for item in data]
        if isinstance(data, Mapping):
            return {
                str(key): self.sanitize_for_serialization(value)
                for key, value in data.items()
                if value is not None
            }
        if hasattr(data, 'to_dict') and callable(data.to_dict):
            return self.sanitize_for_serialization(data.to_dict())
        if dataclasses.is_dataclass(data) and not isinstance(data, type):
            return self.sanitize_for_serialization(dataclasses.asdict(data))

        raise TypeError(f"Object of type {type(data).__name__} cannot be serialized")

    def serialize_body(self, body: Any) -> Optional[bytes]:
        """
        Serialize a request body.

        Bytes are sent unchanged, strings as UTF-8, everything else as JSON.
        """
        if body is None:
            return None
        if isinstance(body, bytes):
            return body
        if isinstance(body, str):
            return body.encode('utf-8')
        return json.dumps(self.sanitize_for_serialization(body), separators=(',', ':')).encode('utf-8')

    def to_query_value(self, value: Any) -> str:
        """Render a scalar query parameter value."""
        if isinstance(value, bool):
            return 'true' if value else 'false'
        if isinstance(value, enum.Enum):
            return self.to_query_value(value.value)
        if isinstance(value, (datetime.datetime, datetime.date)):
            return value.isoformat()
        return str(value)

    def to_query_pairs(self, query_params: Mapping[str, Any]) -> List[Tuple[str, str]]:
        """
        Flatten query parameters into ordered (name, value) pairs.

        ``None`` values are dropped and sequences repeat the parameter name.
        """
        pairs = []
        for name, value in query_params.items():
            if value is None:
                continue
            if isinstance(value, (list, tuple)):
                pairs.extend((name, self.to_query_value(item)) for item in value if item is not None)
            else:
                pairs.append((name, self.to_query_value(value)))
        return pairs

    def write_file(self, content: bytes, filename: Optional[str] = None) -> BinaryIO:
        """
        Store downloaded content in the temp folder.

        The suggested file name is used when it is a plain name that does not
        exist yet; otherwise a uniquely named file is created.

        Returns:
            Open binary file positioned at the start
        """
        os.makedirs(self.temp_folder_path, exist_ok=True)
        handle = None
        name = safe_filename(filename)
        if name:
            try:
                handle = open(os.path.join(self.temp_folder_path, name), 'x+b')
            except FileExistsError:
                logger.debug(f"{name} already exists in {self.temp_folder_path}, using a unique name")
        if handle is None:
            handle = tempfile.NamedTemporaryFile(
                dir=self.temp_folder_path,
                prefix='meeteeor-',
                suffix=os.path.splitext(name)[1] if name else '',
                delete=False
            )
        handle.write(content)
        handle.flush()
        handle.seek(0)
        logger.debug(f"Stored {len(content)} bytes in {handle.name}")
        return handle


def safe_filename(filename: Optional[str]) -> Optional[str]:
    """
    Reduce a server supplied file name to a plain name.

    Returns:
        The last path component, or None when nothing usable remains
    """
    if not filename:
        return None
    name = filename.replace('\\', '/').rsplit('/', 1)[-1].strip()
    if name in ('', '.', '..') or '\x00' in name:
        return None
    return name
