# ABOUTME: Token models package exports
# ABOUTME: Exports the token version enum and the wire document models

from .enum import TokenVersion
from .wire import (
    FIELD_MAP_ADAPTER,
    JSON_OBJECT_ADAPTER,
    UnixTime,
    V4TokenDocument,
    V5Claims,
    V5TokenDocument,
)

__all__ = [
    "TokenVersion",
    "FIELD_MAP_ADAPTER",
    "JSON_OBJECT_ADAPTER",
    "UnixTime",
    "V4TokenDocument",
    "V5Claims",
    "V5TokenDocument",
]
