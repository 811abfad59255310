"""Editable staging model for interface configurations."""

from .observable import Observable, ObservableField, ObservableList, ObserverCallback
from .parcel import ParcelReader, ParcelWriter
from .proxy import PARCEL_VERSION, InterfaceProxy

__all__ = [
    "InterfaceProxy",
    "Observable",
    "ObservableField",
    "ObservableList",
    "ObserverCallback",
    "ParcelReader",
    "ParcelWriter",
    "PARCEL_VERSION",
]
