# ABOUTME: authn package initialization
# ABOUTME: Parses access tokens from the authentication service and decides when to refresh them

"""
Access token handling for authentication service clients.

The package detects the wire format of a raw access token (legacy v4 or
current v5), parses and validates it, and tells the client's token cache when
the token should be replaced. Use `new_token` as the entry point::

    token = new_token(response_body)
    ...
    if token.should_refresh():
        token = new_token(fetch_new_token())
"""

from loguru import logger

from authn.components.token import TOKEN_VARIANTS, detect_token, new_token
from authn.exceptions import (
    AuthnException,
    MalformedTokenError,
    TokenAlreadyParsedError,
    TokenFieldError,
    TokenFormatException,
    TokenNotParsedError,
    TokenSemanticError,
    TokenStateError,
    UnrecognizedTokenFormatError,
)
from authn.implementations.token import AuthnTokenV4, AuthnTokenV5
from authn.interfaces import AbstractAuthnToken
from authn.models.token import TokenVersion

__version__ = "0.1.0"

# Silent until the application opts in through authn.config.logging
logger.disable("authn")

__all__ = [
    "new_token",
    "detect_token",
    "TOKEN_VARIANTS",
    "AbstractAuthnToken",
    "AuthnTokenV4",
    "AuthnTokenV5",
    "TokenVersion",
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
