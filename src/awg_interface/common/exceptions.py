"""Custom exceptions for AmneziaWG interface staging."""


class AwgInterfaceError(Exception):
    """Base exception for all awg_interface errors."""
    pass


class ConfigurationError(AwgInterfaceError):
    """Raised when configuration is invalid."""
    pass


class ParcelError(AwgInterfaceError):
    """Raised when a serialized staging record cannot be decoded."""
    pass
