"""Utility functions for awg_interface."""

from typing import Any

# Unsigned integer bounds
MAX_UINT16 = 0xFFFF
MAX_UINT32 = 0xFFFFFFFF


def parse_decimal(text: str) -> int:
    """Parse a plain decimal integer from staged text.

    Args:
        text: Text to parse, surrounding whitespace allowed

    Returns:
        Parsed integer

    Raises:
        ValueError: If text is not an optionally signed run of ASCII digits
    """
    value = text.strip()
    digits = value[1:] if value[:1] in ("+", "-") else value
    if not digits or not digits.isascii() or not digits.isdigit():
        raise ValueError(f"'{text}' is not a decimal number")
    return int(value)


def validate_range(value: int, minimum: int, maximum: int, field_name: str) -> int:
    """Validate that an integer lies within an inclusive range.

    Args:
        value: Value to check
        minimum: Lowest accepted value
        maximum: Highest accepted value
        field_name: Name of the field for error messages

    Returns:
        The value unchanged

    Raises:
        ValueError: If value is outside [minimum, maximum]
    """
    if not (minimum <= value <= maximum):
        raise ValueError(f"{field_name} must be between {minimum} and {maximum}")
    return value


def mask_sensitive_data(
    value: str | None, mask_char: str = "*", show_chars: int = 4
) -> str:
    """Mask sensitive data for logging while preserving some characters for debugging.

    Args:
        value: Sensitive string to mask (e.g., a private key)
        mask_char: Character to use for masking
        show_chars: Number of characters to show at the end

    Returns:
        Masked string safe for logging
    """
    if not value:
        return "<None>"

    if len(value) <= show_chars:
        return mask_char * len(value)

    masked_length = len(value) - show_chars
    return mask_char * masked_length + value[-show_chars:]


def sanitize_log_data(data: dict[str, Any]) -> dict[str, Any]:
    """Sanitize dictionary data for safe logging by masking key material.

    Args:
        data: Dictionary potentially containing sensitive data

    Returns:
        Sanitized dictionary safe for logging
    """
    sensitive_fields = {"private_key", "privatekey", "secret", "preshared"}

    sanitized = {}
    for key, value in data.items():
        if any(sensitive_field in key.lower() for sensitive_field in sensitive_fields):
            sanitized[key] = mask_sensitive_data(str(value) if value else None)
        else:
            sanitized[key] = value

    return sanitized
