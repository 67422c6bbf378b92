# ABOUTME: Interfaces package exports
# ABOUTME: Exports the abstract access token contract

from .token import AbstractAuthnToken

__all__ = [
    "AbstractAuthnToken",
]
