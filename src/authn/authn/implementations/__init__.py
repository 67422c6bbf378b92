# ABOUTME: Implementations package exports
# ABOUTME: Contains the concrete access token formats

from .token import AuthnTokenV4, AuthnTokenV5, BaseAuthnToken

__all__ = [
    "BaseAuthnToken",
    "AuthnTokenV4",
    "AuthnTokenV5",
]
