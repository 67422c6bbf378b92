# ABOUTME: Main configuration composition for the authn library.
# ABOUTME: Assembles configuration classes into a single, accessible object.

from functools import lru_cache

from ._base import BaseAuthnSettings


class AuthnSettings(BaseAuthnSettings):
    """Represents the complete, composed configuration for the library.

    Inherits from `BaseAuthnSettings`; embedding applications extend it with
    their own settings classes through inheritance.

    The `get_settings` function provides a singleton instance of this class.
    """

    pass


@lru_cache
def get_settings() -> AuthnSettings:
    """Provides a singleton instance of the library settings.

    Returns:
        A single, cached instance of the AuthnSettings class.
    """
    return AuthnSettings()
