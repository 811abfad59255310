"""Common utilities and shared functionality."""

from .exceptions import (
    AwgInterfaceError,
    ConfigurationError,
    ParcelError,
)
from .logging import get_logger, mask_key_material, setup_logging
from .settings import LoggingConfig
from .utils import (
    MAX_UINT16,
    MAX_UINT32,
    mask_sensitive_data,
    parse_decimal,
    sanitize_log_data,
    validate_range,
)

__all__ = [
    # Exceptions
    "AwgInterfaceError",
    "ConfigurationError",
    "ParcelError",
    # Logging
    "get_logger",
    "setup_logging",
    "mask_key_material",
    "LoggingConfig",
    # Utils
    "parse_decimal",
    "validate_range",
    "mask_sensitive_data",
    "sanitize_log_data",
    "MAX_UINT16",
    "MAX_UINT32",
]
