"""Validated, immutable configuration of one AmneziaWG interface."""

import re

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    IPvAnyAddress,
    IPvAnyInterface,
    field_validator,
    model_validator,
)

from ..common.utils import MAX_UINT16, MAX_UINT32
from ..crypto import KeyPair
from . import attribute

# Value ranges
MIN_LISTEN_PORT = 1
MIN_MTU = 1280
MAX_JC = 128
MAX_JUNK_SIZE = 1280
MAX_PADDING = 1132

_HOSTNAME_LABEL = re.compile(r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$")
MAX_HOSTNAME_LENGTH = 253


def is_hostname(value: str) -> bool:
    """Return True if value is a syntactically valid DNS host name."""
    name = value[:-1] if value.endswith(".") else value
    if not name or len(name) > MAX_HOSTNAME_LENGTH:
        return False
    return all(_HOSTNAME_LABEL.match(label) for label in name.split("."))


class Interface(BaseModel):
    """Interface section of a tunnel configuration.

    Instances are frozen. Optional numeric settings are ``None`` when
    absent; an interface always carries a key pair.
    """

    model_config = ConfigDict(
        frozen=True, arbitrary_types_allowed=True, extra="forbid"
    )

    addresses: tuple[IPvAnyInterface, ...] = Field(
        default=(), description="Interface addresses with prefix length"
    )
    dns_servers: tuple[IPvAnyAddress, ...] = Field(
        default=(), description="DNS server addresses"
    )
    dns_search_domains: tuple[str, ...] = Field(
        default=(), description="DNS search domains"
    )
    excluded_applications: tuple[str, ...] = Field(
        default=(), description="Applications routed outside the tunnel"
    )
    included_applications: tuple[str, ...] = Field(
        default=(), description="Only applications routed through the tunnel"
    )
    key_pair: KeyPair = Field(description="Interface key pair")
    listen_port: int | None = Field(
        default=None, ge=MIN_LISTEN_PORT, le=MAX_UINT16, description="UDP listen port"
    )
    mtu: int | None = Field(default=None, ge=MIN_MTU, le=MAX_UINT16)

    # Junk packet obfuscation
    jc: int | None = Field(default=None, ge=0, le=MAX_JC, description="Junk packet count")
    jmin: int | None = Field(default=None, ge=0, le=MAX_JUNK_SIZE)
    jmax: int | None = Field(default=None, ge=0, le=MAX_JUNK_SIZE)

    # Handshake padding and message header obfuscation
    s1: int | None = Field(default=None, ge=0, le=MAX_PADDING)
    s2: int | None = Field(default=None, ge=0, le=MAX_PADDING)
    h1: int | None = Field(default=None, ge=0, le=MAX_UINT32)
    h2: int | None = Field(default=None, ge=0, le=MAX_UINT32)
    h3: int | None = Field(default=None, ge=0, le=MAX_UINT32)
    h4: int | None = Field(default=None, ge=0, le=MAX_UINT32)

    @field_validator("dns_search_domains")
    @classmethod
    def validate_search_domains(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Validate search domain syntax."""
        for domain in v:
            if not is_hostname(domain):
                raise ValueError(f"Invalid search domain: {domain}")
        return v

    @field_validator("excluded_applications", "included_applications")
    @classmethod
    def validate_applications(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Reject blank application identifiers."""
        if any(not app.strip() for app in v):
            raise ValueError("Application identifiers cannot be empty")
        return v

    @model_validator(mode="after")
    def validate_cross_fields(self) -> "Interface":
        """Check constraints spanning more than one field."""
        if self.excluded_applications and self.included_applications:
            raise ValueError(
                "Excluded and included applications cannot both be set"
            )
        if self.jmin is not None and self.jmax is not None and self.jmin > self.jmax:
            raise ValueError("Jmin must not be greater than Jmax")
        return self

    @property
    def dns_entries(self) -> list[str]:
        """DNS servers in textual form followed by search domains."""
        return [str(server) for server in self.dns_servers] + list(
            self.dns_search_domains
        )

    def to_wg_quick_string(self) -> str:
        """Render the ``[Interface]`` section in wg-quick format."""
        lines = ["[Interface]"]

        if self.addresses:
            lines.append(f"Address = {attribute.join(self.addresses)}")
        if self.dns_entries:
            lines.append(f"DNS = {attribute.join(self.dns_entries)}")
        if self.excluded_applications:
            lines.append(
                f"ExcludedApplications = {attribute.join(self.excluded_applications)}"
            )
        if self.included_applications:
            lines.append(
                f"IncludedApplications = {attribute.join(self.included_applications)}"
            )
        if self.listen_port is not None:
            lines.append(f"ListenPort = {self.listen_port}")
        if self.mtu is not None:
            lines.append(f"MTU = {self.mtu}")

        obfuscation = (
            ("Jc", self.jc),
            ("Jmin", self.jmin),
            ("Jmax", self.jmax),
            ("S1", self.s1),
            ("S2", self.s2),
            ("H1", self.h1),
            ("H2", self.h2),
            ("H3", self.h3),
            ("H4", self.h4),
        )
        for name, value in obfuscation:
            if value is not None:
                lines.append(f"{name} = {value}")

        lines.append(f"PrivateKey = {self.key_pair.private_key.to_base64()}")
        return "\n".join(lines) + "\n"
