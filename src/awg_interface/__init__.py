"""AmneziaWG interface staging - editable configuration and validation."""

# Validated configuration
from .config import (
    BadConfigError,
    Interface,
    InterfaceBuilder,
    Location,
    Reason,
    Section,
)

# Common utilities
from .common.exceptions import AwgInterfaceError, ConfigurationError, ParcelError
from .common.logging import get_logger, setup_logging
from .common.settings import LoggingConfig
from .common.utils import mask_sensitive_data, sanitize_log_data

# Key facility
from .crypto import Key, KeyErrorType, KeyFormat, KeyFormatError, KeyPair

# Staging model
from .viewmodel import (
    InterfaceProxy,
    Observable,
    ObservableList,
    ParcelReader,
    ParcelWriter,
)

# Setup logging on package initialization
LoggingConfig.from_env().apply()

# Package level logger
logger = get_logger(__name__)

__version__ = "0.1.0"


__all__ = [
    # Staging model
    "InterfaceProxy",
    "Observable",
    "ObservableList",
    "ParcelReader",
    "ParcelWriter",
    # Validated configuration
    "Interface",
    "InterfaceBuilder",
    "BadConfigError",
    "Section",
    "Location",
    "Reason",
    # Keys
    "Key",
    "KeyPair",
    "KeyFormat",
    "KeyErrorType",
    "KeyFormatError",
    # Exceptions
    "AwgInterfaceError",
    "ConfigurationError",
    "ParcelError",
    # Utilities
    "get_logger",
    "setup_logging",
    "LoggingConfig",
    "mask_sensitive_data",
    "sanitize_log_data",
]
