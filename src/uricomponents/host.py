"""uricomponents.host
host = IP-literal / IPv4address / reg-name
"""

import ipaddress
import logging
import re

from typing import TYPE_CHECKING, Any, ClassVar, NamedTuple, Self
from urllib.parse import quote, unquote, unquote_to_bytes

from ._abnf import (
    DOMAIN_NAME_PAT,
    GEN_DELIMS_PAT,
    INVALID_HOST_CHARS_PAT,
    IPV4ADDRESS_PAT,
    IPV6ADDRESS_PAT,
    IPVFUTURE_PAT,
    REG_NAME_PAT,
)
from .codec import RFC3987, Encoding
from .component import Component
from .exceptions import IdnaConversionFailed, UriSyntaxError
from .idna_codec import ACE_PREFIX, IdnaCodec, IdnaResult

if TYPE_CHECKING:
    from .domain import Domain

logger = logging.getLogger(__name__)


class _ParsedHost(NamedTuple):
    host: str | None
    ip_version: str | None = None
    has_zone_identifier: bool = False
    is_domain: bool = False


def is_domain_name(name: str) -> bool:
    """Tells whether a registered name is a domain name (RFC 1123 section 2.1)."""
    max_length: int = 254 if name.endswith(".") else 253
    return len(name) <= max_length and DOMAIN_NAME_PAT.fullmatch(name) is not None


class Host(Component):
    """A registered name, an IPv4 address, an IPv6 address (with an optional zone identifier) or an IPvFuture.
    Registered names are stored in their ASCII form; IDNs go through `idna_codec`.
    """

    __slots__ = ("_host", "_ip_version", "_has_zone_identifier", "_is_domain")

    idna_codec: ClassVar[IdnaCodec] = IdnaCodec()

    def __init__(self: Self, host: Any = None) -> None:
        parsed: _ParsedHost = self._parse(self._filter(host))
        self._assign(
            _host=parsed.host,
            _ip_version=parsed.ip_version,
            _has_zone_identifier=parsed.has_zone_identifier,
            _is_domain=parsed.is_domain,
        )

    def _parse(self: Self, host: str | None) -> _ParsedHost:
        if host is None or host == "":
            return _ParsedHost(host)

        if IPV4ADDRESS_PAT.fullmatch(host) is not None:
            return _ParsedHost(host, ip_version="4")

        if host.startswith("[") and host.endswith("]"):
            literal: str = host[1:-1]
            ipv6: str | None = self._parse_ipv6(literal)
            if ipv6 is not None:
                return _ParsedHost(f"[{ipv6}]", ip_version="6", has_zone_identifier="%" in ipv6)
            m: re.Match[str] | None = IPVFUTURE_PAT.fullmatch(literal)
            if m is not None and m["version"] not in ("4", "6"):
                return _ParsedHost(host, ip_version=m["version"])
            raise UriSyntaxError(f"`{host}` is an invalid IP literal format")

        name: str = self._parse_registered_name(host)
        return _ParsedHost(name, is_domain=is_domain_name(name))

    @staticmethod
    def _parse_ipv6(literal: str) -> str | None:
        """IPv6address [ "%25" ZoneID ] (RFC 6874), a bare "%" zone being accepted too.
        Zones are only allowed on link-local addresses.
        """
        address, percent, zone = literal.partition("%")
        if IPV6ADDRESS_PAT.fullmatch(address) is None:
            return None
        address = address.lower()
        if not percent:
            return address
        if zone.startswith("25") and len(zone) > 2:
            zone = zone[2:]
        zone = unquote(zone)
        if (
            zone == ""
            or not zone.isascii()
            or GEN_DELIMS_PAT.search(zone) is not None
            or not ipaddress.IPv6Address(address).is_link_local
        ):
            return None
        return f"{address}%25{quote(zone, safe='')}"

    def _parse_registered_name(self: Self, host: str) -> str:
        try:
            name: str = unquote_to_bytes(host).decode("utf-8")
        except UnicodeDecodeError as e:
            raise UriSyntaxError(f"`{host}` is an invalid domain name : the host contains invalid characters") from e

        is_ascii: bool = name.isascii()
        if is_ascii:
            name = name.lower()
        if REG_NAME_PAT.fullmatch(name) is not None:
            if ACE_PREFIX in name:
                # ACE labels must hold valid Punycode.
                checked: IdnaResult = self.idna_codec.to_unicode(name)
                if checked.failed:
                    raise IdnaConversionFailed(host, checked.errors)
            return name

        if is_ascii or INVALID_HOST_CHARS_PAT.search(name) is not None:
            raise UriSyntaxError(f"`{host}` is an invalid domain name : the host contains invalid characters")

        result: IdnaResult = self.idna_codec.to_ascii(name)
        if result.failed:
            raise IdnaConversionFailed(host, result.errors)
        if REG_NAME_PAT.fullmatch(result.domain) is None:
            raise UriSyntaxError(f"`{host}` is an invalid domain name")
        logger.debug("IDN host %r converted to %r", host, result.domain)
        return result.domain

    @classmethod
    def from_ip(cls: type[Self], ip: str, version: str = "") -> Self:
        """Builds a host from an IP address; `version` is only used for IPvFuture addresses.
        e.g. Host.from_ip("fe80::1%eth0") == Host("[fe80::1%25eth0]")
        """
        if IPV4ADDRESS_PAT.fullmatch(ip) is not None:
            return cls(ip)
        if IPV6ADDRESS_PAT.fullmatch(ip) is not None:
            return cls(f"[{ip}]")
        if "%" in ip:
            address, _, zone = unquote(ip).partition("%")
            return cls(f"[{address}%25{quote(zone, safe='')}]")
        if version != "":
            return cls(f"[v{version}.{ip}]")
        raise UriSyntaxError(f"`{ip}` is an invalid IP host")

    def _format(self: Self, encoding: Encoding) -> str | None:
        if encoding is RFC3987:
            return self.to_unicode()
        return self._host

    def to_ascii(self: Self) -> str | None:
        return self._host

    def to_unicode(self: Self) -> str | None:
        if self._ip_version is not None or self._host is None or ACE_PREFIX not in self._host:
            return self._host
        result: IdnaResult = self.idna_codec.to_unicode(self._host)
        if result.failed:
            raise IdnaConversionFailed(self._host, result.errors)
        return result.domain

    @property
    def ip_version(self: Self) -> str | None:
        return self._ip_version

    @property
    def ip(self: Self) -> str | None:
        """The IP address without its brackets; zone identifiers are decoded."""
        if self._ip_version is None or self._host is None:
            return None
        if self._ip_version == "4":
            return self._host
        literal: str = self._host[1:-1]
        if self._ip_version != "6":
            return literal.partition(".")[2]
        address, percent, zone = literal.partition("%25")
        if not percent:
            return address
        return f"{address}%{unquote(zone)}"

    def is_ip(self: Self) -> bool:
        return self._ip_version is not None

    def is_ipv4(self: Self) -> bool:
        return self._ip_version == "4"

    def is_ipv6(self: Self) -> bool:
        return self._ip_version == "6"

    def is_ip_future(self: Self) -> bool:
        return self._ip_version not in (None, "4", "6")

    def is_registered_name(self: Self) -> bool:
        return self._ip_version is None and self._host is not None

    def is_domain(self: Self) -> bool:
        return self._is_domain

    def is_absolute(self: Self) -> bool:
        return self._is_domain and self._host is not None and self._host.endswith(".")

    def has_zone_identifier(self: Self) -> bool:
        return self._has_zone_identifier

    def without_zone_identifier(self: Self) -> Self:
        if not self._has_zone_identifier or self._host is None:
            return self
        address, _, _ = self._host[1:-1].partition("%")
        return self.from_ip(address)

    def _as_domain(self: Self) -> "Domain":
        from .domain import Domain

        return Domain(self)

    def labels(self: Self) -> list[str]:
        return self._as_domain().labels()

    def get_label(self: Self, offset: int) -> str | None:
        return self._as_domain().get(offset)

    def with_label(self: Self, offset: int, label: Any) -> Self:
        return self.with_content(self._as_domain().with_label(offset, label))

    def without_label(self: Self, *offsets: int) -> Self:
        return self.with_content(self._as_domain().without_label(*offsets))

    def prepend(self: Self, label: Any) -> Self:
        return self.with_content(self._as_domain().prepend(label))

    def append(self: Self, label: Any) -> Self:
        return self.with_content(self._as_domain().append(label))

    def with_root_label(self: Self) -> Self:
        return self.with_content(self._as_domain().with_root_label())

    def without_root_label(self: Self) -> Self:
        return self.with_content(self._as_domain().without_root_label())
