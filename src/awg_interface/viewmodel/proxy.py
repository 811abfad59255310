"""Editable staging record for one interface configuration."""

from collections.abc import Iterable
from typing import Any

from ..common.exceptions import ParcelError
from ..common.logging import get_logger
from ..config import Interface, InterfaceBuilder, attribute
from ..crypto import Key, KeyFormatError, KeyPair
from .observable import Observable, ObservableField, ObservableList
from .parcel import ParcelReader, ParcelWriter

logger = get_logger(__name__)

PARCEL_VERSION = 1


def _optional_text(value: int | None) -> str:
    return "" if value is None else str(value)


class InterfaceProxy(Observable):
    """Mutable, observable text fields mirroring an Interface.

    Fields hold raw user input; an empty string means the value is absent.
    ``public_key`` is derived from ``private_key`` on every read. Nothing
    is validated until :meth:`resolve` hands the fields to an
    :class:`InterfaceBuilder`.
    """

    addresses = ObservableField()
    dns_servers = ObservableField()
    listen_port = ObservableField()
    mtu = ObservableField()
    private_key = ObservableField(also_notify=("public_key",))
    jc = ObservableField()
    jmin = ObservableField()
    jmax = ObservableField()
    s1 = ObservableField()
    s2 = ObservableField()
    h1 = ObservableField()
    h2 = ObservableField()
    h3 = ObservableField()
    h4 = ObservableField()

    def __init__(self) -> None:
        super().__init__()
        self._excluded_applications = ObservableList(self, "excluded_applications")
        self._included_applications = ObservableList(self, "included_applications")

    @classmethod
    def from_interface(cls, other: Interface) -> "InterfaceProxy":
        """Project a validated interface into editable text fields."""
        proxy = cls()
        proxy.addresses = attribute.join(other.addresses)
        proxy.dns_servers = attribute.join(other.dns_entries)
        proxy.excluded_applications = other.excluded_applications
        proxy.included_applications = other.included_applications
        proxy.listen_port = _optional_text(other.listen_port)
        proxy.mtu = _optional_text(other.mtu)
        proxy.private_key = other.key_pair.private_key.to_base64()
        proxy.jc = _optional_text(other.jc)
        proxy.jmin = _optional_text(other.jmin)
        proxy.jmax = _optional_text(other.jmax)
        proxy.s1 = _optional_text(other.s1)
        proxy.s2 = _optional_text(other.s2)
        proxy.h1 = _optional_text(other.h1)
        proxy.h2 = _optional_text(other.h2)
        proxy.h3 = _optional_text(other.h3)
        proxy.h4 = _optional_text(other.h4)
        return proxy

    @property
    def excluded_applications(self) -> ObservableList:
        return self._excluded_applications

    @excluded_applications.setter
    def excluded_applications(self, values: Iterable[str]) -> None:
        self._excluded_applications.replace(values)

    @property
    def included_applications(self) -> ObservableList:
        return self._included_applications

    @included_applications.setter
    def included_applications(self, values: Iterable[str]) -> None:
        self._included_applications.replace(values)

    @property
    def public_key(self) -> str:
        """Base64 public key paired with ``private_key``, or ``""`` if it is malformed."""
        try:
            return KeyPair(Key.from_base64(self.private_key)).public_key.to_base64()
        except KeyFormatError:
            return ""

    def generate_key_pair(self) -> None:
        """Replace ``private_key`` with a freshly generated one.

        Observers hear ``private_key`` and ``public_key`` from the
        assignment, then both names again once generation completes.
        """
        key_pair = KeyPair()
        self.private_key = key_pair.private_key.to_base64()
        self.notify_property_changed("private_key")
        self.notify_property_changed("public_key")
        logger.debug("Generated key pair", public_key=key_pair.public_key.to_base64())

    def resolve(self) -> Interface:
        """Validate the staged fields into an Interface.

        Empty fields are left unset rather than cleared. Errors from the
        builder propagate unchanged.

        Raises:
            BadConfigError: Naming the first field that failed to validate
        """
        logger.debug("Resolving staged interface", **self.to_dict())
        builder = InterfaceBuilder()
        if self.addresses:
            builder.parse_addresses(self.addresses)
        if self.dns_servers:
            builder.parse_dns_servers(self.dns_servers)
        if self.excluded_applications:
            builder.exclude_applications(self.excluded_applications)
        if self.included_applications:
            builder.include_applications(self.included_applications)
        if self.listen_port:
            builder.parse_listen_port(self.listen_port)
        if self.mtu:
            builder.parse_mtu(self.mtu)
        if self.private_key:
            builder.parse_private_key(self.private_key)
        if self.jc:
            builder.parse_jc(self.jc)
        if self.jmin:
            builder.parse_jmin(self.jmin)
        if self.jmax:
            builder.parse_jmax(self.jmax)
        if self.s1:
            builder.parse_s1(self.s1)
        if self.s2:
            builder.parse_s2(self.s2)
        if self.h1:
            builder.parse_h1(self.h1)
        if self.h2:
            builder.parse_h2(self.h2)
        if self.h3:
            builder.parse_h3(self.h3)
        if self.h4:
            builder.parse_h4(self.h4)
        return builder.build()

    def write_to(self, writer: ParcelWriter) -> None:
        """Write the serialized fields in their fixed order.

        The obfuscation fields s1, s2 and h1 to h4 are not part of the
        record.
        """
        writer.write_string(self.addresses)
        writer.write_string(self.dns_servers)
        writer.write_string_list(self.excluded_applications)
        writer.write_string_list(self.included_applications)
        writer.write_string(self.listen_port)
        writer.write_string(self.mtu)
        writer.write_string(self.private_key)
        writer.write_string(self.jc)
        writer.write_string(self.jmin)
        writer.write_string(self.jmax)

    @classmethod
    def read_from(cls, reader: ParcelReader) -> "InterfaceProxy":
        """Read a proxy written by :meth:`write_to`."""
        proxy = cls()
        proxy.addresses = reader.read_string()
        proxy.dns_servers = reader.read_string()
        proxy.excluded_applications = reader.read_string_list()
        proxy.included_applications = reader.read_string_list()
        proxy.listen_port = reader.read_string()
        proxy.mtu = reader.read_string()
        proxy.private_key = reader.read_string()
        proxy.jc = reader.read_string()
        proxy.jmin = reader.read_string()
        proxy.jmax = reader.read_string()
        return proxy

    def to_bytes(self) -> bytes:
        """Serialize to a versioned byte record."""
        writer = ParcelWriter()
        writer.write_int(PARCEL_VERSION)
        self.write_to(writer)
        return writer.to_bytes()

    @classmethod
    def from_bytes(cls, data: bytes) -> "InterfaceProxy":
        """Deserialize a record produced by :meth:`to_bytes`.

        Raises:
            ParcelError: On an unknown version, truncated data or trailing bytes
        """
        reader = ParcelReader(data)
        version = reader.read_int()
        if version != PARCEL_VERSION:
            raise ParcelError(f"Unsupported record version {version}")
        proxy = cls.read_from(reader)
        reader.ensure_consumed()
        return proxy

    def to_dict(self) -> dict[str, Any]:
        """Snapshot of every staged field, lists copied."""
        return {
            "addresses": self.addresses,
            "dns_servers": self.dns_servers,
            "excluded_applications": list(self.excluded_applications),
            "included_applications": list(self.included_applications),
            "listen_port": self.listen_port,
            "mtu": self.mtu,
            "private_key": self.private_key,
            "jc": self.jc,
            "jmin": self.jmin,
            "jmax": self.jmax,
            "s1": self.s1,
            "s2": self.s2,
            "h1": self.h1,
            "h2": self.h2,
            "h3": self.h3,
            "h4": self.h4,
        }

    def __repr__(self) -> str:
        return (
            f"InterfaceProxy(addresses={self.addresses!r}, "
            f"public_key={self.public_key!r})"
        )
