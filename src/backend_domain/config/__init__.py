"""Configuration module for backend-domain."""

from .constants import CustomerLimits, DatabaseTables, MfaLimits, RuleMessages
from .logging_config import LoggingConfig, get_logger, setup_logging
from .settings import DomainSettings, get_settings

__all__ = [
    "CustomerLimits",
    "DatabaseTables",
    "MfaLimits",
    "RuleMessages",
    "LoggingConfig",
    "get_logger",
    "setup_logging",
    "DomainSettings",
    "get_settings",
]
