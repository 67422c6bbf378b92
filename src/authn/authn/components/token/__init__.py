# ABOUTME: Token components package exports
# ABOUTME: Exports format detection and the token factory

from .detector import TOKEN_VARIANTS, detect_token, new_token

__all__ = [
    "TOKEN_VARIANTS",
    "detect_token",
    "new_token",
]
