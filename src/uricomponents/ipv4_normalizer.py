"""uricomponents.ipv4_normalizer
Rewrites registered names that browsers read as IPv4 addresses, e.g. "0x7f.1"
or "2130706433", into dotted-decimal notation.
"""

import ipaddress
import logging
import re

from typing import TypeVar

from .authority import Authority
from .host import Host

logger = logging.getLogger(__name__)

_AuthorityT = TypeVar("_AuthorityT", bound=Authority)

_MAX_IPV4_NUMBER: int = 2**32 - 1

# One to four dot-separated hexadecimal, octal or decimal numbers, with an optional trailing dot.
_IPV4_PART: str = r"(?:0x[0-9a-f]*|[0-9]+)"
_IPV4_HOST_PAT: re.Pattern[str] = re.compile(rf"(?:{_IPV4_PART}\.){{0,3}}{_IPV4_PART}\.?", re.IGNORECASE)

_NUMBER_PATS: tuple[tuple[re.Pattern[str], int], ...] = (
    (re.compile(r"0x(?P<number>[0-9a-f]*)", re.IGNORECASE), 16),
    (re.compile(r"0(?P<number>[0-7]*)"), 8),
    (re.compile(r"(?P<number>[0-9]+)"), 10),
)


def _to_number(label: str) -> int | None:
    for pattern, base in _NUMBER_PATS:
        m: re.Match[str] | None = pattern.fullmatch(label)
        if m is None:
            continue
        digits: str = m["number"].lstrip("0")
        if digits == "":
            return 0
        number: int = int(digits, base)
        if number <= _MAX_IPV4_NUMBER:
            return number
    return None


def to_ipv4(host: str | None) -> str | None:
    """The dotted-decimal IPv4 address `host` stands for, or None when it is not one.
    e.g. to_ipv4("0x7f.1") == "127.0.0.1"
    """
    if host is None or host == "" or _IPV4_HOST_PAT.fullmatch(host) is None:
        return None
    if host.endswith("."):
        host = host[:-1]

    numbers: list[int] = []
    for label in host.split("."):
        number: int | None = _to_number(label)
        if number is None:
            return None
        numbers.append(number)

    address: int = numbers.pop()
    # The last number fills every byte the previous ones leave out.
    if address >= 256 ** (4 - len(numbers)):
        return None
    for offset, number in enumerate(numbers):
        if number > 255:
            return None
        address += number * 256 ** (3 - offset)
    return str(ipaddress.IPv4Address(address))


def normalize_host(host: Host) -> Host:
    """A Host holding the dotted-decimal address when host is read as IPv4; otherwise host itself."""
    if not host.is_domain():
        return host
    ipv4: str | None = to_ipv4(host.content)
    if ipv4 is None:
        return host
    logger.debug("host %r normalized to the IPv4 address %r", host.content, ipv4)
    return Host(ipv4)


def normalize_authority(authority: _AuthorityT) -> _AuthorityT:
    host: Host = authority.host_component
    normalized: Host = normalize_host(host)
    if normalized is host:
        return authority
    return authority.with_host(normalized)
