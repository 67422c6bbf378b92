# ABOUTME: Exceptions package exports
# ABOUTME: Exports the structured exception hierarchy used by the token library

from authn.exceptions.base import (
    AuthnException,
    TokenFormatException,
    MalformedTokenError,
    UnrecognizedTokenFormatError,
    TokenFieldError,
    TokenSemanticError,
    TokenStateError,
    TokenNotParsedError,
    TokenAlreadyParsedError,
)

__all__ = [
    "AuthnException",
    "TokenFormatException",
    "MalformedTokenError",
    "UnrecognizedTokenFormatError",
    "TokenFieldError",
    "TokenSemanticError",
    "TokenStateError",
    "TokenNotParsedError",
    "TokenAlreadyParsedError",
]
