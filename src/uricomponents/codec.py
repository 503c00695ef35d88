"""uricomponents.codec
Percent-encoding shared by every component.
Decoding leaves alone whatever would change the meaning of a component once decoded;
encoding never touches a percent-encoded sequence that is already valid.
"""

import enum
import functools
import re

from urllib.parse import quote, unquote_to_bytes

from ._abnf import GEN_DELIMS_CHARS, PCT_ENCODED_RUN_PAT, SUB_DELIMS_CHARS, UNRESERVED_CHARS


class Encoding(enum.Enum):
    """How a component serializes its content."""

    RFC1738 = "RFC1738"
    RFC3986 = "RFC3986"
    RFC3987 = "RFC3987"
    NONE = "NONE"


RFC1738: Encoding = Encoding.RFC1738
RFC3986: Encoding = Encoding.RFC3986
RFC3987: Encoding = Encoding.RFC3987
NO_ENCODING: Encoding = Encoding.NONE

# Characters kept percent-encoded by decode() unless a component asks otherwise.
RESERVED_CHARS: str = GEN_DELIMS_CHARS + SUB_DELIMS_CHARS + "%"

# ASCII characters that are never valid in an IRI component, encoded whatever the component.
IRI_UNSAFE_CHARS: str = "\"<>[\\]^`{|}"


def capitalize_percent_encodings(string: str) -> str:
    """Returns string with all percent-encoded sequences expressed in capital letters.
    e.g. capitalize_percent_encodings("example%2ecom") == "example%2Ecom"
    """
    # Capitalize each percent-encoded sequence that uses lowercase letters.
    # Does not change length of string.
    for m in re.finditer(r"%(?:[a-f][0-9A-Fa-f]|[0-9A-Fa-f][a-f])", string):
        string = string[: m.start()] + string[m.start() : m.end()].upper() + string[m.end() :]
    return string


def _utf8_sequence_length(lead: int) -> int:
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def _decode_run(run: str, preserve: str) -> str:
    raw: bytes = unquote_to_bytes(run)
    result: str = ""
    i: int = 0
    while i < len(raw):
        byte: int = raw[i]
        if byte < 0x80:
            char: str = chr(byte)
            if char in preserve or byte < 0x20 or byte == 0x7F:
                result += f"%{byte:02X}"
            else:
                result += char
            i += 1
            continue
        length: int = _utf8_sequence_length(byte)
        chunk: bytes = raw[i : i + length]
        if length > 0 and len(chunk) == length:
            try:
                result += chunk.decode("utf-8")
                i += length
                continue
            except UnicodeDecodeError:
                pass
        # Bytes outside a valid UTF-8 sequence stay encoded.
        result += f"%{byte:02X}"
        i += 1
    return result


def decode(string: str | None, preserve: str = RESERVED_CHARS) -> str | None:
    """Decodes every percent-encoded sequence except those in `preserve`, controls and invalid UTF-8.
    Sequences left encoded are capitalized.
    e.g. decode("b%c3%a9b%c3%a9%2fa") == "bébé%2Fa"
    """
    if string is None:
        return None
    return PCT_ENCODED_RUN_PAT.sub(lambda m: _decode_run(m[0], preserve), string)


@functools.lru_cache(maxsize=64)
def _encoder_pattern(safe: str) -> re.Pattern[str]:
    allowed: str = re.escape(UNRESERVED_CHARS + safe.replace("%", ""))
    return re.compile(rf"%[0-9A-Fa-f]{{2}}|[^{allowed}%]+|%")


@functools.lru_cache(maxsize=64)
def _iri_encoder_pattern(unsafe: str) -> re.Pattern[str]:
    escaped: str = re.escape(unsafe.replace("%", ""))
    return re.compile(rf"%[0-9A-Fa-f]{{2}}|[\x00-\x20\x7f{escaped}]+|%")


def _encode_match(m: re.Match[str]) -> str:
    if len(m[0]) == 3 and m[0].startswith("%"):
        return capitalize_percent_encodings(m[0])
    return quote(m[0], safe="", errors="surrogateescape")


def encode(string: str | None, safe: str = "") -> str | None:
    """Percent-encodes (as UTF-8) every character that is neither unreserved nor in `safe`.
    Valid percent-encoded sequences are kept and capitalized, a lone "%" is encoded.
    """
    if string is None:
        return None
    return _encoder_pattern(safe).sub(_encode_match, string)


def encode_iri(string: str | None, unsafe: str = "") -> str | None:
    """RFC 3987 flavour of encode(): only controls, space, a lone "%" and `unsafe` are encoded."""
    if string is None:
        return None
    return _iri_encoder_pattern(unsafe).sub(_encode_match, string)


def to_rfc1738(string: str | None) -> str | None:
    if string is None:
        return None
    return string.replace("+", "%2B").replace("~", "%7E")


def encode_as(string: str | None, encoding: Encoding, safe: str, iri_unsafe: str) -> str | None:
    """Serializes a decoded component value following `encoding`."""
    if not isinstance(encoding, Encoding):
        raise TypeError(f"unknown encoding `{encoding!r}`")
    if string is None or encoding is Encoding.NONE:
        return string
    if encoding is Encoding.RFC3987:
        return encode_iri(string, IRI_UNSAFE_CHARS + iri_unsafe)
    encoded: str | None = encode(string, safe)
    if encoding is Encoding.RFC1738:
        return to_rfc1738(encoded)
    return encoded
