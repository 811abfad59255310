"""Validated interface configuration and its builder."""

from . import attribute
from .builder import InterfaceBuilder
from .exceptions import BadConfigError, Location, Reason, Section
from .interface import Interface, is_hostname

__all__ = [
    "Interface",
    "InterfaceBuilder",
    "BadConfigError",
    "Section",
    "Location",
    "Reason",
    "attribute",
    "is_hostname",
]
