# ABOUTME: Components package exports
# ABOUTME: Exports token format detection

from .token import TOKEN_VARIANTS, detect_token, new_token

__all__ = [
    "TOKEN_VARIANTS",
    "detect_token",
    "new_token",
]
