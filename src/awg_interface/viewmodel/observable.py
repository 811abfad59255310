"""Observable staging fields with synchronous change notification."""

from collections.abc import Callable, Iterable, MutableSequence
from typing import Any, overload

ObserverCallback = Callable[["Observable", str], None]


class Observable:
    """Broadcasts property changes to registered callbacks.

    Callbacks run synchronously, in registration order, on the thread that
    made the change. Registering or removing observers from inside a
    callback is allowed; the change takes effect for the next notification.
    """

    def __init__(self) -> None:
        self._observers: list[ObserverCallback] = []

    def add_observer(self, callback: ObserverCallback) -> None:
        """Register a callback receiving ``(sender, property_name)``."""
        if callback not in self._observers:
            self._observers.append(callback)

    def remove_observer(self, callback: ObserverCallback) -> None:
        """Unregister a callback; unknown callbacks are ignored."""
        if callback in self._observers:
            self._observers.remove(callback)

    def notify_property_changed(self, name: str) -> None:
        """Deliver a change of ``name`` to every current observer."""
        for callback in list(self._observers):
            callback(self, name)


class ObservableField:
    """Text field descriptor that notifies its owner on every assignment.

    ``None`` is stored as the empty string. Names listed in
    ``also_notify`` are announced after the field itself, for properties
    derived from it.
    """

    def __init__(self, default: str = "", also_notify: Iterable[str] = ()) -> None:
        self.default = default
        self.also_notify = tuple(also_notify)
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    @overload
    def __get__(self, instance: None, owner: type) -> "ObservableField": ...

    @overload
    def __get__(self, instance: Observable, owner: type) -> str: ...

    def __get__(self, instance: Observable | None, owner: type) -> Any:
        if instance is None:
            return self
        return instance.__dict__.get(self.name, self.default)

    def __set__(self, instance: Observable, value: str | None) -> None:
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise TypeError(f"{self.name} must be a string, not {type(value).__name__}")
        instance.__dict__[self.name] = value
        instance.notify_property_changed(self.name)
        for name in self.also_notify:
            instance.notify_property_changed(name)


class ObservableList(MutableSequence[str]):
    """List of strings that notifies its owner after each mutation."""

    def __init__(self, owner: Observable, name: str, items: Iterable[str] = ()) -> None:
        self._owner = owner
        self._name = name
        self._items: list[str] = list(items)

    def _changed(self) -> None:
        self._owner.notify_property_changed(self._name)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> list[str]: ...

    def __getitem__(self, index: int | slice) -> str | list[str]:
        return self._items[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        self._items[index] = value
        self._changed()

    def __delitem__(self, index: int | slice) -> None:
        del self._items[index]
        self._changed()

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, index: int, value: str) -> None:
        self._items.insert(index, value)
        self._changed()

    def extend(self, values: Iterable[str]) -> None:
        self._items.extend(values)
        self._changed()

    def clear(self) -> None:
        self._items.clear()
        self._changed()

    def replace(self, values: Iterable[str]) -> None:
        """Replace the whole content with one notification."""
        self._items = list(values)
        self._changed()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ObservableList):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ObservableList({self._items!r})"
