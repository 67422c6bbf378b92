# ABOUTME: Models package initialization
# ABOUTME: Exports the access token version enum and wire document models

from .token import TokenVersion, V4TokenDocument, V5Claims, V5TokenDocument

__all__ = [
    "TokenVersion",
    "V4TokenDocument",
    "V5TokenDocument",
    "V5Claims",
]
