"""
Stable hashing of argument mappings.

Keys are serialized in sorted order so structurally-equal mappings hash
identically regardless of insertion order.
"""

import hashlib
import json
from datetime import date, datetime
from enum import Enum
from typing import Any, Mapping


def _default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    return str(value)


def canonical_json(data: Mapping[str, Any]) -> str:
    """Serialize a mapping to compact JSON with sorted keys."""
    return json.dumps(data, sort_keys=True, separators=(",", ":"), default=_default)


def stable_hash(data: Mapping[str, Any], algorithm: str = "sha256") -> str:
    """Hex digest of the canonical JSON form of ``data``."""
    return hashlib.new(algorithm, canonical_json(data).encode("utf-8")).hexdigest()
