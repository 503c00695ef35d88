"""uricomponents.exceptions
Every error raised on purpose by this package derives from UriException.
"""

import enum

from typing import Self


class UriException(Exception):
    """Base class of the uricomponents errors."""


class UriSyntaxError(UriException, ValueError):
    """A value does not follow the grammar of the component it was given to."""


class OffsetOutOfBounds(UriSyntaxError, IndexError):
    """A label or segment offset lies outside the collection being modified."""

    def __init__(self: Self, offset: int, length: int) -> None:
        self.offset: int = offset
        self.length: int = length
        super().__init__(f"the offset `{offset}` is invalid for a collection of {length} item(s)")


class PortOutOfRange(UriSyntaxError):
    """A port given as an integer is negative."""

    def __init__(self: Self, port: int) -> None:
        self.port: int = port
        super().__init__(f"expected port to be a positive integer or 0; received {port}")


class IdnaError(enum.Flag):
    """UTS46 processing errors, one flag per failed rule."""

    NONE = 0
    EMPTY_LABEL = enum.auto()
    LABEL_TOO_LONG = enum.auto()
    DOMAIN_NAME_TOO_LONG = enum.auto()
    LEADING_HYPHEN = enum.auto()
    TRAILING_HYPHEN = enum.auto()
    HYPHEN_3_4 = enum.auto()
    LEADING_COMBINING_MARK = enum.auto()
    DISALLOWED = enum.auto()
    PUNYCODE = enum.auto()
    LABEL_HAS_DOT = enum.auto()
    INVALID_ACE_LABEL = enum.auto()
    BIDI = enum.auto()
    CONTEXTJ = enum.auto()

    def describe(self: Self) -> str:
        """Human-readable list of every reason held by this flag set."""
        reasons: list[str] = [_IDNA_ERROR_REASONS[member] for member in _IDNA_ERROR_REASONS if member in self]
        if len(reasons) == 0:
            return "Unknown IDNA conversion error."
        return ", ".join(reasons) + "."


_IDNA_ERROR_REASONS: dict[IdnaError, str] = {
    IdnaError.EMPTY_LABEL: "a non-final domain name label (or the whole domain name) is empty",
    IdnaError.LABEL_TOO_LONG: "a domain name label is longer than 63 bytes",
    IdnaError.DOMAIN_NAME_TOO_LONG: "a domain name is longer than 255 bytes in its storage form",
    IdnaError.LEADING_HYPHEN: 'a label starts with a hyphen-minus ("-")',
    IdnaError.TRAILING_HYPHEN: 'a label ends with a hyphen-minus ("-")',
    IdnaError.HYPHEN_3_4: 'a label contains hyphen-minus ("-") in the third and fourth positions',
    IdnaError.LEADING_COMBINING_MARK: "a label starts with a combining mark",
    IdnaError.DISALLOWED: "a label or domain name contains disallowed characters",
    IdnaError.PUNYCODE: 'a label starts with "xn--" but does not contain valid Punycode',
    IdnaError.LABEL_HAS_DOT: "a label contains a dot=full stop",
    IdnaError.INVALID_ACE_LABEL: "An ACE label does not contain a valid label string",
    IdnaError.BIDI: "a label does not meet the IDNA BiDi requirements (for right-to-left characters)",
    IdnaError.CONTEXTJ: "a label does not meet the IDNA CONTEXTJ requirements",
}


class IdnaConversionFailed(UriSyntaxError):
    """A host could not be converted with IDNA; `errors` tells why."""

    def __init__(self: Self, host: str, errors: IdnaError) -> None:
        self.host: str = host
        self.errors: IdnaError = errors
        super().__init__(f"`{host}` is an invalid domain name : {errors.describe()}")
