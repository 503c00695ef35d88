"""uricomponents.query_string
Conversion between a query string and its ordered list of (key, value) pairs.

query = *( pchar / "/" / "?" )

A pair without "=" has a None value, so "a" and "a=" are different pairs.
"""

import html
import re

from typing import Any, Iterable, Iterator, Mapping
from urllib.parse import quote, quote_plus, unquote

from ._abnf import CONTROL_CHARS_PAT, PCT_ENCODED_RUN_PAT
from .codec import RFC1738, RFC3986, Encoding
from .exceptions import UriSyntaxError

Pair = tuple[str, str | None]

# Characters that stay as-is in a key/value, on top of the unreserved ones.
_KEY_SAFE: str = "!$'()*+,;:@?/"
_VALUE_SAFE: str = "!$'()*+,;=:@?/&"
_RFC1738_KEY_SAFE: str = "*"
_RFC1738_VALUE_SAFE: str = "*=&"

_INTEGER_PAT: re.Pattern[str] = re.compile(r"-?[1-9][0-9]*|0")


def _filter_separator(separator: str) -> str:
    if not isinstance(separator, str):
        raise TypeError(f"expected the separator to be a string; got {type(separator).__name__}")
    if separator == "":
        raise UriSyntaxError("the separator can not be the empty string")
    if "%" in separator:
        raise UriSyntaxError(f"the separator `{separator}` can not contain `%`")
    return separator


def _filter_encoding(encoding: Encoding) -> Encoding:
    if not isinstance(encoding, Encoding):
        raise TypeError(f"unknown encoding `{encoding!r}`")
    if encoding not in (RFC1738, RFC3986):
        raise UriSyntaxError(f"unsupported query encoding `{encoding.value}`")
    return encoding


def _decode(string: str) -> str:
    return PCT_ENCODED_RUN_PAT.sub(lambda m: unquote(m[0], errors="surrogateescape"), string)


def parse(query: str | None, separator: str = "&", encoding: Encoding = RFC3986) -> list[Pair]:
    """Splits a query string into its decoded (key, value) pairs.
    e.g. parse("a=1&b&c=") == [("a", "1"), ("b", None), ("c", "")]
    """
    separator = _filter_separator(separator)
    encoding = _filter_encoding(encoding)
    if query is None:
        return []
    if not isinstance(query, str):
        raise TypeError(f"expected the query to be a string or None; got {type(query).__name__}")
    if CONTROL_CHARS_PAT.search(query) is not None:
        raise UriSyntaxError(f"`{query!r}` contains invalid characters")

    if encoding is RFC1738:
        query = query.replace("+", " ")

    pairs: list[Pair] = []
    for token in query.split(separator):
        key, equal, value = token.partition("=")
        pairs.append((_decode(key), _decode(value) if equal else None))
    return pairs


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value
    raise UriSyntaxError(f"`{value!r}` can not be used in a query pair")


def _iter_pairs(pairs: Iterable[Any]) -> Iterator[tuple[str, str | None]]:
    for pair in pairs:
        try:
            key, value = pair
        except (TypeError, ValueError) as e:
            raise UriSyntaxError(f"`{pair!r}` is not a (key, value) pair") from e
        yield _stringify(key), None if value is None else _stringify(value)


def _escape_marker(token: str, separator: str) -> str:
    # Unreserved characters are never encoded by quote(), so a separator
    # starting with one, e.g. "x", is escaped by hand inside the pairs.
    marker: str = separator[0]
    if marker == "=":
        return token
    return token.replace(marker, "".join(f"%{byte:02X}" for byte in marker.encode("utf-8")))


def build(pairs: Iterable[Any], separator: str = "&", encoding: Encoding = RFC3986) -> str | None:
    """Joins (key, value) pairs into a query string, or None when there is no pair.
    Booleans are written as "1" and "0", numbers as their decimal representation.
    """
    separator = _filter_separator(separator)
    encoding = _filter_encoding(encoding)

    key_safe, value_safe = (_RFC1738_KEY_SAFE, _RFC1738_VALUE_SAFE) if encoding is RFC1738 else (_KEY_SAFE, _VALUE_SAFE)
    # The separator may be given as an HTML entity, e.g. "&amp;".
    for char in html.unescape(separator):
        key_safe = key_safe.replace(char, "")
        value_safe = value_safe.replace(char, "")

    tokens: list[str] = []
    for key, value in _iter_pairs(pairs):
        token: str = quote(key, safe=key_safe, errors="surrogateescape")
        if value is not None:
            token += "=" + quote(value, safe=value_safe, errors="surrogateescape")
        if encoding is RFC1738:
            token = token.replace("+", "%2B").replace("%20", "+")
        tokens.append(_escape_marker(token, separator))

    if not tokens:
        return None
    return separator.join(tokens)


def _form_quote(string: str) -> str:
    return quote_plus(string, safe="*", errors="surrogateescape").replace("~", "%7E")


def build_form_data(pairs: Iterable[Any], separator: str = "&") -> str | None:
    """application/x-www-form-urlencoded serialization of the pairs.
    Only ASCII alphanumerics and "*-._" are left as-is, a space becomes "+".
    e.g. build_form_data([("a b", "c~d")]) == "a+b=c%7Ed"
    """
    separator = _filter_separator(separator)
    tokens: list[str] = []
    for key, value in _iter_pairs(pairs):
        token: str = _form_quote(key)
        if value is not None:
            token += "=" + _form_quote(value)
        tokens.append(_escape_marker(token, separator))

    if not tokens:
        return None
    return separator.join(tokens)


def _next_index(data: dict[Any, Any]) -> int:
    return max((key for key in data if isinstance(key, int)), default=-1) + 1


def _index(name: str) -> int | str:
    return int(name) if _INTEGER_PAT.fullmatch(name) is not None else name


def _extract_variable(data: dict[Any, Any], name: str, value: str) -> None:
    """Stores value under a PHP-like variable name, e.g. "a[b][]"."""
    if name == "":
        return
    left: int = name.find("[")
    if left == -1:
        data[_index(name)] = value
        return
    right: int = name.find("]", left)
    if right == -1:
        data[_index(name)] = value
        return

    key: int | str = _index(name[:left])
    index: str = name[left + 1 : right]
    remaining: str = name[right + 1 :]
    if not remaining.startswith("[") or "]" not in remaining:
        remaining = ""

    if not isinstance(data.get(key), dict):
        data[key] = {}
    child: dict[Any, Any] = data[key]
    if index == "":
        index = str(_next_index(child))
    _extract_variable(child, f"{index}{remaining}", value)


def _listify(data: Any) -> Any:
    if not isinstance(data, dict):
        return data
    data = {key: _listify(value) for key, value in data.items()}
    if list(data) == list(range(len(data))):
        return list(data.values())
    return data


def convert(pairs: Iterable[Pair]) -> dict[str, Any]:
    """Rebuilds the nested variables PHP would see for the given pairs.
    Sequentially indexed containers come back as lists.
    e.g. convert([("a[b][]", "1"), ("a[b][]", "2")]) == {"a": {"b": ["1", "2"]}}
    """
    data: dict[Any, Any] = {}
    for key, value in pairs:
        _extract_variable(data, key, "" if value is None else value)
    return {str(key): _listify(value) for key, value in data.items()}


def extract(query: str | None, separator: str = "&", encoding: Encoding = RFC3986) -> dict[str, Any]:
    return convert(parse(query, separator, encoding))


def flatten(params: Mapping[Any, Any], prefix: str = "") -> list[Pair]:
    """Inverse of convert(): nested mappings and sequences become bracketed keys.
    None values are skipped.
    e.g. flatten({"a": [1, 2]}) == [("a[0]", "1"), ("a[1]", "2")]
    """
    pairs: list[Pair] = []
    for name, value in params.items():
        key: str = f"{prefix}[{name}]" if prefix else str(name)
        if value is None:
            continue
        if isinstance(value, Mapping):
            pairs.extend(flatten(value, key))
        elif isinstance(value, (list, tuple)):
            pairs.extend(flatten(dict(enumerate(value)), key))
        else:
            pairs.append((key, _stringify(value)))
    return pairs
