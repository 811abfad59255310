"""Builder turning staged interface text into a validated Interface."""

import ipaddress
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from ..common.logging import get_logger
from ..common.utils import (
    MAX_UINT16,
    MAX_UINT32,
    mask_sensitive_data,
    parse_decimal,
    validate_range,
)
from ..crypto import Key, KeyFormatError, KeyPair
from . import attribute
from .exceptions import BadConfigError, Location, Reason, Section
from .interface import (
    MAX_JC,
    MAX_JUNK_SIZE,
    MAX_PADDING,
    MIN_MTU,
    Interface,
    is_hostname,
)

logger = get_logger(__name__)

# Field name, minimum, maximum for each numeric attribute
_NUMERIC_FIELDS: dict[Location, tuple[str, int, int]] = {
    Location.LISTEN_PORT: ("listen_port", 0, MAX_UINT16),
    Location.MTU: ("mtu", MIN_MTU, MAX_UINT16),
    Location.JC: ("jc", 0, MAX_JC),
    Location.JMIN: ("jmin", 0, MAX_JUNK_SIZE),
    Location.JMAX: ("jmax", 0, MAX_JUNK_SIZE),
    Location.S1: ("s1", 0, MAX_PADDING),
    Location.S2: ("s2", 0, MAX_PADDING),
    Location.H1: ("h1", 0, MAX_UINT32),
    Location.H2: ("h2", 0, MAX_UINT32),
    Location.H3: ("h3", 0, MAX_UINT32),
    Location.H4: ("h4", 0, MAX_UINT32),
}

_FIELD_LOCATIONS: dict[str, Location] = {
    "addresses": Location.ADDRESS,
    "dns_servers": Location.DNS,
    "dns_search_domains": Location.DNS,
    "excluded_applications": Location.EXCLUDED_APPLICATIONS,
    "included_applications": Location.INCLUDED_APPLICATIONS,
    "key_pair": Location.PRIVATE_KEY,
    **{name: location for location, (name, _, _) in _NUMERIC_FIELDS.items()},
}


def _error(
    location: Location,
    reason: Reason,
    text: str | None = None,
    cause: BaseException | None = None,
) -> BadConfigError:
    return BadConfigError(Section.INTERFACE, location, reason, text, cause)


class InterfaceBuilder:
    """Builder for Interface configurations.

    Every ``parse_*`` method validates its whole input before storing
    anything, so a failed call leaves the builder unchanged. Methods return
    the builder for chaining.
    """

    def __init__(self) -> None:
        """Initialize InterfaceBuilder with empty state."""
        self._addresses: list[ipaddress.IPv4Interface | ipaddress.IPv6Interface] = []
        self._dns_servers: list[ipaddress.IPv4Address | ipaddress.IPv6Address] = []
        self._dns_search_domains: list[str] = []
        self._excluded_applications: list[str] = []
        self._included_applications: list[str] = []
        self._key_pair: KeyPair | None = None
        self._numbers: dict[str, int] = {}

    def parse_addresses(self, text: str) -> "InterfaceBuilder":
        """Add comma-separated interface addresses such as ``10.0.0.2/32``.

        Raises:
            BadConfigError: If any entry is not an address with optional prefix
        """
        addresses = []
        for item in attribute.split(text):
            try:
                addresses.append(ipaddress.ip_interface(item))
            except ValueError as e:
                raise _error(Location.ADDRESS, Reason.SYNTAX_ERROR, item, e) from e

        self._addresses.extend(addresses)
        logger.debug("Addresses parsed", count=len(addresses))
        return self

    def parse_dns_servers(self, text: str) -> "InterfaceBuilder":
        """Add comma-separated DNS servers and search domains.

        IP literals become servers; other entries must be host names and
        become search domains.

        Raises:
            BadConfigError: If an entry is neither an IP address nor a host name
        """
        servers = []
        domains = []
        for item in attribute.split(text):
            try:
                servers.append(ipaddress.ip_address(item))
            except ValueError as e:
                if not is_hostname(item):
                    raise _error(Location.DNS, Reason.SYNTAX_ERROR, item, e) from e
                domains.append(item)

        self._dns_servers.extend(servers)
        self._dns_search_domains.extend(domains)
        logger.debug(
            "DNS servers parsed", servers=len(servers), search_domains=len(domains)
        )
        return self

    def exclude_applications(self, applications: Iterable[str]) -> "InterfaceBuilder":
        """Exclude applications from the tunnel.

        Raises:
            BadConfigError: If included applications are already set or an
                identifier is blank
        """
        apps = self._check_applications(
            applications, Location.EXCLUDED_APPLICATIONS, self._included_applications
        )
        self._excluded_applications = list(dict.fromkeys(self._excluded_applications + apps))
        return self

    def include_applications(self, applications: Iterable[str]) -> "InterfaceBuilder":
        """Route only the given applications through the tunnel.

        Raises:
            BadConfigError: If excluded applications are already set or an
                identifier is blank
        """
        apps = self._check_applications(
            applications, Location.INCLUDED_APPLICATIONS, self._excluded_applications
        )
        self._included_applications = list(dict.fromkeys(self._included_applications + apps))
        return self

    def _check_applications(
        self, applications: Iterable[str], location: Location, other: list[str]
    ) -> list[str]:
        apps = list(applications)
        if apps and other:
            raise _error(location, Reason.INVALID_VALUE, attribute.join(apps))
        for app in apps:
            if not app.strip():
                raise _error(location, Reason.INVALID_VALUE, app)
        return apps

    def parse_private_key(self, text: str) -> "InterfaceBuilder":
        """Set the key pair from a base64 private key.

        Raises:
            BadConfigError: If the key is malformed
        """
        try:
            key = Key.from_base64(text)
        except KeyFormatError as e:
            raise _error(
                Location.PRIVATE_KEY, Reason.INVALID_KEY, mask_sensitive_data(text), e
            ) from e

        self._key_pair = KeyPair(key)
        logger.debug(
            "Private key parsed", public_key=self._key_pair.public_key.to_base64()
        )
        return self

    def set_key_pair(self, key_pair: KeyPair) -> "InterfaceBuilder":
        """Set an already validated key pair."""
        self._key_pair = key_pair
        return self

    def parse_listen_port(self, text: str) -> "InterfaceBuilder":
        """Set the UDP listen port, 0 to 65535; ``0`` leaves the port unset."""
        return self._parse_number(Location.LISTEN_PORT, text)

    def parse_mtu(self, text: str) -> "InterfaceBuilder":
        """Set the MTU, 1280 to 65535."""
        return self._parse_number(Location.MTU, text)

    def parse_jc(self, text: str) -> "InterfaceBuilder":
        """Set the junk packet count Jc, 0 to 128."""
        return self._parse_number(Location.JC, text)

    def parse_jmin(self, text: str) -> "InterfaceBuilder":
        """Set the minimum junk packet size Jmin, 0 to 1280."""
        return self._parse_number(Location.JMIN, text)

    def parse_jmax(self, text: str) -> "InterfaceBuilder":
        """Set the maximum junk packet size Jmax, 0 to 1280."""
        return self._parse_number(Location.JMAX, text)

    def parse_s1(self, text: str) -> "InterfaceBuilder":
        """Set the init packet junk size S1, 0 to 1132."""
        return self._parse_number(Location.S1, text)

    def parse_s2(self, text: str) -> "InterfaceBuilder":
        """Set the response packet junk size S2, 0 to 1132."""
        return self._parse_number(Location.S2, text)

    def parse_h1(self, text: str) -> "InterfaceBuilder":
        """Set the magic header H1, 0 to 4294967295."""
        return self._parse_number(Location.H1, text)

    def parse_h2(self, text: str) -> "InterfaceBuilder":
        """Set the magic header H2, 0 to 4294967295."""
        return self._parse_number(Location.H2, text)

    def parse_h3(self, text: str) -> "InterfaceBuilder":
        """Set the magic header H3, 0 to 4294967295."""
        return self._parse_number(Location.H3, text)

    def parse_h4(self, text: str) -> "InterfaceBuilder":
        """Set the magic header H4, 0 to 4294967295."""
        return self._parse_number(Location.H4, text)

    def _parse_number(self, location: Location, text: str) -> "InterfaceBuilder":
        name, minimum, maximum = _NUMERIC_FIELDS[location]
        try:
            value = parse_decimal(text)
        except ValueError as e:
            raise _error(location, Reason.INVALID_NUMBER, text, e) from e
        try:
            validate_range(value, minimum, maximum, location.value)
        except ValueError as e:
            raise _error(location, Reason.INVALID_VALUE, text, e) from e

        if location is Location.LISTEN_PORT and value == 0:
            self._numbers.pop(name, None)
        else:
            self._numbers[name] = value
        logger.debug("Numeric field parsed", field=location.value, value=value)
        return self

    def build(self) -> Interface:
        """Build the validated interface.

        Returns:
            Frozen Interface instance

        Raises:
            BadConfigError: If the private key is missing or fields conflict
        """
        if self._key_pair is None:
            raise _error(Location.PRIVATE_KEY, Reason.MISSING_ATTRIBUTE)

        if self._excluded_applications and self._included_applications:
            raise _error(
                Location.INCLUDED_APPLICATIONS,
                Reason.INVALID_VALUE,
                attribute.join(self._included_applications),
            )

        jmin = self._numbers.get("jmin")
        jmax = self._numbers.get("jmax")
        if jmin is not None and jmax is not None and jmin > jmax:
            raise _error(
                Location.JMIN,
                Reason.INVALID_VALUE,
                str(jmin),
                ValueError(f"Jmin must not be greater than Jmax ({jmax})"),
            )

        try:
            interface = Interface(
                addresses=tuple(self._addresses),
                dns_servers=tuple(self._dns_servers),
                dns_search_domains=tuple(self._dns_search_domains),
                excluded_applications=tuple(self._excluded_applications),
                included_applications=tuple(self._included_applications),
                key_pair=self._key_pair,
                **self._numbers,
            )
        except ValidationError as e:
            raise _translate_validation_error(e) from e

        logger.debug("Interface built", addresses=len(interface.addresses))
        return interface


def _translate_validation_error(error: ValidationError) -> BadConfigError:
    """Attribute the first pydantic error to an interface field."""
    first: dict[str, Any] = dict(error.errors()[0])
    loc = first.get("loc") or ()
    location = _FIELD_LOCATIONS.get(str(loc[0]), Location.TOP_LEVEL) if loc else Location.TOP_LEVEL
    value = first.get("input")
    text = None if location is Location.TOP_LEVEL or value is None else str(value)
    return _error(location, Reason.INVALID_VALUE, text, ValueError(first.get("msg")))
