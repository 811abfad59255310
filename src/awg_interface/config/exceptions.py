"""Field-validation errors raised while building an interface."""

from enum import Enum

from ..common.exceptions import ConfigurationError


class Section(str, Enum):
    """Configuration section an error belongs to."""

    INTERFACE = "Interface"


class Location(str, Enum):
    """Configuration attribute an error is attributed to."""

    TOP_LEVEL = ""
    ADDRESS = "Address"
    DNS = "DNS"
    EXCLUDED_APPLICATIONS = "ExcludedApplications"
    INCLUDED_APPLICATIONS = "IncludedApplications"
    LISTEN_PORT = "ListenPort"
    MTU = "MTU"
    PRIVATE_KEY = "PrivateKey"
    JC = "Jc"
    JMIN = "Jmin"
    JMAX = "Jmax"
    S1 = "S1"
    S2 = "S2"
    H1 = "H1"
    H2 = "H2"
    H3 = "H3"
    H4 = "H4"


class Reason(str, Enum):
    """Category of a validation failure."""

    INVALID_KEY = "invalid key"
    INVALID_NUMBER = "invalid number"
    INVALID_VALUE = "invalid value"
    MISSING_ATTRIBUTE = "missing attribute"
    SYNTAX_ERROR = "syntax error"


class BadConfigError(ConfigurationError):
    """Raised when one staged field cannot be turned into a valid value.

    Attributes:
        section: Section holding the field
        location: Field the failure is attributed to
        reason: Category of the failure
        text: Offending input, if any
    """

    def __init__(
        self,
        section: Section,
        location: Location,
        reason: Reason,
        text: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.section = section
        self.location = location
        self.reason = reason
        self.text = text
        self.__cause__ = cause
        super().__init__(self._format_message(cause))

    def _format_message(self, cause: BaseException | None) -> str:
        where = self.location.value or self.section.value
        message = f"{where}: {self.reason.value}"
        if self.text is not None:
            message += f" '{self.text}'"
        if cause is not None:
            message += f" ({cause})"
        return message
