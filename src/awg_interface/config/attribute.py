"""Canonical rule for list-valued configuration attributes."""

from collections.abc import Iterable

SEPARATOR = ","


def join(values: Iterable[object]) -> str:
    """Join values into one comma-separated attribute string.

    Args:
        values: Items to join, rendered with ``str()``

    Returns:
        Items separated by ``", "``, in iteration order
    """
    return ", ".join(str(value) for value in values)


def split(text: str) -> list[str]:
    """Split an attribute string into its non-empty, stripped items.

    Args:
        text: Comma-separated attribute text

    Returns:
        Items in their original order
    """
    return [item.strip() for item in text.split(SEPARATOR) if item.strip()]
