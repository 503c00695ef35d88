"""uricomponents.idna_codec
UTS46 conversion between Unicode and ASCII (punycode) host names.
Mapping relies on the idna distribution. Errors are gathered for the whole
name instead of stopping at the first failed rule, so that a host can report
every reason it was rejected.
"""

import dataclasses
import logging

from typing import Self

import idna

from .exceptions import IdnaError

logger = logging.getLogger(__name__)

ACE_PREFIX: str = "xn--"

_MAX_LABEL_LENGTH: int = 63
_MAX_DOMAIN_LENGTH: int = 253
_JOINERS: str = "\u200c\u200d"


@dataclasses.dataclass(frozen=True)
class IdnaResult:
    domain: str
    errors: IdnaError = IdnaError.NONE

    @property
    def failed(self: Self) -> bool:
        return bool(self.errors)


def _check_label(label: str) -> IdnaError:
    """Validity criteria of UTS46 section 4.1 for a Unicode label that went through mapping."""
    errors: IdnaError = IdnaError.NONE
    if label.startswith("-"):
        errors |= IdnaError.LEADING_HYPHEN
    if label.endswith("-"):
        errors |= IdnaError.TRAILING_HYPHEN
    if label[2:4] == "--":
        errors |= IdnaError.HYPHEN_3_4
    try:
        idna.check_initial_combiner(label)
    except idna.IDNAError:
        errors |= IdnaError.LEADING_COMBINING_MARK
    for pos, char in enumerate(label):
        if char in _JOINERS and not idna.valid_contextj(label, pos):
            errors |= IdnaError.CONTEXTJ
    try:
        idna.check_bidi(label)
    except idna.IDNABidiError:
        errors |= IdnaError.BIDI
    return errors


def _decode_ace(label: str) -> str:
    """xn--label -> Unicode label. Raises UnicodeError on bad punycode."""
    return label[len(ACE_PREFIX) :].encode("ascii").decode("punycode")


class IdnaCodec:
    """UTS46 ToASCII / ToUnicode.
    The defaults are non-transitional processing without the STD3 ASCII rules,
    with the BiDi and CONTEXTJ checks always on.
    """

    def __init__(self: Self, transitional: bool = False, std3_rules: bool = False) -> None:
        self.transitional: bool = transitional
        self.std3_rules: bool = std3_rules

    def __repr__(self: Self) -> str:
        return f"{self.__class__.__name__}(transitional={self.transitional!r}, std3_rules={self.std3_rules!r})"

    def _remap(self: Self, domain: str) -> str:
        return idna.uts46_remap(domain, std3_rules=self.std3_rules, transitional=self.transitional)

    def _ace_label_errors(self: Self, label: str) -> tuple[str, IdnaError]:
        try:
            unicode_label: str = _decode_ace(label)
        except UnicodeError:
            return label, IdnaError.PUNYCODE
        try:
            if self._remap(unicode_label) != unicode_label:
                return unicode_label, IdnaError.INVALID_ACE_LABEL
        except idna.IDNAError:
            return unicode_label, IdnaError.INVALID_ACE_LABEL
        return unicode_label, _check_label(unicode_label)

    def to_ascii(self: Self, domain: str) -> IdnaResult:
        try:
            mapped: str = self._remap(domain)
        except idna.IDNAError as e:
            logger.debug("UTS46 mapping of %r failed: %s", domain, e)
            return IdnaResult(domain, IdnaError.DISALLOWED)

        labels: list[str] = mapped.split(".")
        errors: IdnaError = IdnaError.NONE
        ascii_labels: list[str] = []
        for position, label in enumerate(labels):
            if label == "":
                # Only the root label may be empty.
                if position != len(labels) - 1 or len(labels) == 1:
                    errors |= IdnaError.EMPTY_LABEL
                ascii_labels.append(label)
                continue
            if label.startswith(ACE_PREFIX):
                errors |= self._ace_label_errors(label)[1]
                ascii_label: str = label
            else:
                errors |= _check_label(label)
                ascii_label = label
                if not label.isascii():
                    ascii_label = ACE_PREFIX + label.encode("punycode").decode("ascii")
            if len(ascii_label) > _MAX_LABEL_LENGTH:
                errors |= IdnaError.LABEL_TOO_LONG
            ascii_labels.append(ascii_label)

        result: str = ".".join(ascii_labels)
        if len(result.removesuffix(".")) > _MAX_DOMAIN_LENGTH:
            errors |= IdnaError.DOMAIN_NAME_TOO_LONG
        if errors:
            logger.debug("ToASCII conversion of %r failed: %s", domain, errors.describe())
        return IdnaResult(result, errors)

    def to_unicode(self: Self, domain: str) -> IdnaResult:
        errors: IdnaError = IdnaError.NONE
        unicode_labels: list[str] = []
        for label in domain.split("."):
            if label.lower().startswith(ACE_PREFIX):
                unicode_label, label_errors = self._ace_label_errors(label.lower())
                errors |= label_errors
                unicode_labels.append(unicode_label)
            else:
                unicode_labels.append(label)
        if errors:
            logger.debug("ToUnicode conversion of %r failed: %s", domain, errors.describe())
            return IdnaResult(domain, errors)
        return IdnaResult(".".join(unicode_labels), errors)
