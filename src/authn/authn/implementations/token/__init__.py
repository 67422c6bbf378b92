# ABOUTME: Access token implementations package
# ABOUTME: Exports the concrete v4 and v5 token classes

from .base import BaseAuthnToken
from .v4 import AuthnTokenV4
from .v5 import AuthnTokenV5

__all__ = [
    "BaseAuthnToken",
    "AuthnTokenV4",
    "AuthnTokenV5",
]
