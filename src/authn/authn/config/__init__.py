# ABOUTME: Configuration package initialization
# ABOUTME: Exports configuration classes and logging utilities for the authn library

from authn.config.settings import AuthnSettings, get_settings
from authn.config.logging import (
    LoggerConfig,
    LoggingSettings,
    setup_logging,
    get_logger,
    configure_for_testing,
    configure_for_production,
    configure_for_development,
    configure_from_settings,
)

__all__ = [
    "AuthnSettings",
    "get_settings",
    "LoggerConfig",
    "LoggingSettings",
    "setup_logging",
    "get_logger",
    "configure_for_testing",
    "configure_for_production",
    "configure_for_development",
    "configure_from_settings",
]
