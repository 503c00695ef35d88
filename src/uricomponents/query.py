"""uricomponents.query
The query component seen as an ordered list of (key, value) pairs.
Keys may repeat; a None value means the pair has no "=".
"""

import re

from typing import Any, Iterable, Iterator, Mapping, Self

from .codec import IRI_UNSAFE_CHARS, NO_ENCODING, RESERVED_CHARS, RFC1738, RFC3986, RFC3987, Encoding, decode
from .component import Component
from .exceptions import UriSyntaxError
from .query_string import Pair, build, build_form_data, convert, flatten, parse

_NUMERIC_INDEX_PAT: re.Pattern[str] = re.compile(r"\[[0-9]+\]")


class Query(Component):
    __slots__ = ("_pairs", "_separator")

    def __init__(self: Self, query: Any = None, separator: str = "&", encoding: Encoding = RFC3986) -> None:
        separator = self._filter_separator(separator)
        self._assign(
            _pairs=tuple(parse(self._filter(query), separator, encoding)),
            _separator=separator,
        )

    @staticmethod
    def _filter_separator(separator: str) -> str:
        if separator == "=":
            raise UriSyntaxError("the separator can not be `=`")
        if not isinstance(separator, str) or separator == "":
            raise UriSyntaxError(f"invalid separator `{separator!r}`")
        return separator

    @classmethod
    def from_rfc3986(cls: type[Self], query: Any = None, separator: str = "&") -> Self:
        return cls(query, separator, RFC3986)

    @classmethod
    def from_rfc1738(cls: type[Self], query: Any = None, separator: str = "&") -> Self:
        """Reads a query where "+" stands for a space (application/x-www-form-urlencoded)."""
        return cls(query, separator, RFC1738)

    @classmethod
    def from_form_data(cls: type[Self], query: Any = None, separator: str = "&") -> Self:
        return cls(query, separator, RFC1738)

    @classmethod
    def from_pairs(cls: type[Self], pairs: Iterable[Any], separator: str = "&") -> Self:
        """e.g. Query.from_pairs([("a", "1"), ("b", None)]).content == "a=1&b" """
        return cls(build(pairs, separator), separator)

    @classmethod
    def from_params(cls: type[Self], params: Mapping[Any, Any], separator: str = "&") -> Self:
        """Builds a query from nested variables, PHP style.
        e.g. Query.from_params({"a": {"b": [1, 2]}}).content == "a%5Bb%5D%5B0%5D=1&a%5Bb%5D%5B1%5D=2"
        """
        if not isinstance(params, Mapping):
            raise TypeError(f"expected a mapping; got {type(params).__name__}")
        return cls.from_pairs(flatten(params), separator)

    def _new(self: Self, pairs: Iterable[Pair], separator: str | None = None) -> Self:
        pairs = tuple(pairs)
        separator = self._separator if separator is None else separator
        if pairs == self._pairs and separator == self._separator:
            return self
        return self.__class__(build(pairs, separator), separator)

    def _format(self: Self, encoding: Encoding) -> str | None:
        if not isinstance(encoding, Encoding):
            raise TypeError(f"unknown encoding `{encoding!r}`")
        if encoding is RFC1738:
            return build(self._pairs, self._separator, RFC1738)
        query: str | None = build(self._pairs, self._separator, RFC3986)
        if encoding is RFC3987 or encoding is NO_ENCODING:
            return decode(query, RESERVED_CHARS + IRI_UNSAFE_CHARS + " " + self._separator[0])
        return query

    def to_rfc3986(self: Self) -> str | None:
        return self._format(RFC3986)

    def to_rfc1738(self: Self) -> str | None:
        return self._format(RFC1738)

    def to_form_data(self: Self) -> str | None:
        return build_form_data(self._pairs, self._separator)

    @property
    def uri_component(self: Self) -> str:
        if not self._pairs:
            return ""
        return f"?{self.content}"

    def with_content(self: Self, value: Any) -> Self:
        new: Self = self.__class__(value, self._separator)
        if new == self:
            return self
        return new

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, Query) or type(other) is not type(self):
            return NotImplemented
        return self.content == other.content and self._separator == other._separator

    def __hash__(self: Self) -> int:
        return hash((self.__class__, self.content, self._separator))

    @property
    def separator(self: Self) -> str:
        return self._separator

    def with_separator(self: Self, separator: str) -> Self:
        if separator == self._separator:
            return self
        return self._new(self._pairs, self._filter_separator(separator))

    def __len__(self: Self) -> int:
        return len(self._pairs)

    def __iter__(self: Self) -> Iterator[Pair]:
        return iter(self._pairs)

    def pairs(self: Self) -> list[Pair]:
        return list(self._pairs)

    def has(self: Self, key: str, *keys: str) -> bool:
        """Tells whether every given key is used by at least one pair."""
        present: set[str] = {k for k, _ in self._pairs}
        return all(k in present for k in (key, *keys))

    def has_pair(self: Self, key: str, value: str | None) -> bool:
        return (key, value) in self._pairs

    def get(self: Self, key: str) -> str | None:
        """The value of the first pair using key; None if there is none, or if that pair has no value."""
        for k, value in self._pairs:
            if k == key:
                return value
        return None

    def get_all(self: Self, key: str) -> list[str | None]:
        return [value for k, value in self._pairs if k == key]

    def params(self: Self) -> dict[str, Any]:
        """The pairs seen as PHP variables.
        e.g. Query("a[]=1&a[]=2&b=3").params() == {"a": ["1", "2"], "b": "3"}
        """
        return convert(self._pairs)

    @staticmethod
    def _filter_pair(key: Any, value: Any) -> Pair:
        pairs: list[Pair] = parse(build([(key, value)]))
        return pairs[0]

    @staticmethod
    def _with_pair(pairs: list[Pair], pair: Pair) -> list[Pair]:
        result: list[Pair] = []
        replaced: bool = False
        for current in pairs:
            if current[0] != pair[0]:
                result.append(current)
            elif not replaced:
                result.append(pair)
                replaced = True
        if not replaced:
            result.append(pair)
        return result

    def with_pair(self: Self, key: Any, value: Any) -> Self:
        """Sets the value of key: the first pair using key is replaced, the others are removed.
        The pair is appended when key is not used yet.
        """
        return self._new(self._with_pair(list(self._pairs), self._filter_pair(key, value)))

    def _parse_other(self: Self, query: Any) -> list[Pair]:
        if isinstance(query, Query):
            return list(query._pairs)
        return parse(self._filter(query), self._separator)

    def merge(self: Self, query: Any) -> Self:
        """Applies with_pair() for every pair of query, in order."""
        pairs: list[Pair] = list(self._pairs)
        for pair in self._parse_other(query):
            pairs = self._with_pair(pairs, pair)
        return self._new(pairs)

    def append(self: Self, query: Any) -> Self:
        """Adds the pairs of query after the current ones.
        The empty pair (an empty key without a value) is dropped from the result.
        """
        pairs: list[Pair] = [*self._pairs, *self._parse_other(query)]
        return self._new(pair for pair in pairs if pair != ("", None))

    def append_to(self: Self, key: Any, value: Any) -> Self:
        return self._new([*self._pairs, self._filter_pair(key, value)])

    def sort(self: Self) -> Self:
        """Groups pairs by key, keys ordered by first appearance, pairs of a key in their original order."""
        groups: dict[str, list[Pair]] = {}
        for pair in self._pairs:
            groups.setdefault(pair[0], []).append(pair)
        return self._new(pair for group in groups.values() for pair in group)

    def without_duplicates(self: Self) -> Self:
        """Removes the pairs that repeat an earlier (key, value) pair."""
        seen: set[Pair] = set()
        pairs: list[Pair] = []
        for pair in self._pairs:
            if pair not in seen:
                seen.add(pair)
                pairs.append(pair)
        return self._new(pairs)

    def without_empty_pairs(self: Self) -> Self:
        """Drops every pair with an empty key and a None or empty value."""
        return self._new((key, value) for key, value in self._pairs if key != "" or value not in (None, ""))

    def without_numeric_indices(self: Self) -> Self:
        """e.g. "a[0]=1&a[1]=2" becomes "a[]=1&a[]=2" (brackets encoded)."""
        return self._new((_NUMERIC_INDEX_PAT.sub("[]", key), value) for key, value in self._pairs)

    def without_pair(self: Self, *keys: str) -> Self:
        removed: set[str] = set(keys)
        return self._new(pair for pair in self._pairs if pair[0] not in removed)

    def without_pair_by_value(self: Self, *values: Any) -> Self:
        """Removes every pair whose value is one of `values`; None matches the pairs without "=".
        e.g. Query("a=1&b&c=1").without_pair_by_value("1").content == "b"
        """
        if not values:
            return self
        removed: list[str | None] = [self._filter_pair("", value)[1] for value in values]
        return self._new(pair for pair in self._pairs if pair[1] not in removed)

    def without_pair_by_key_value(self: Self, key: str, value: Any) -> Self:
        removed: Pair = self._filter_pair(key, value)
        return self._new(pair for pair in self._pairs if pair != removed)

    def without_param(self: Self, *names: str) -> Self:
        """Removes the pairs of the PHP variables `names`, "a" matching "a", "a[]" and "a[b][c]" alike."""
        if not names:
            return self
        pattern: re.Pattern[str] = re.compile(rf"(?:{'|'.join(map(re.escape, names))})(?:\[.*\].*)?", re.DOTALL)
        return self._new(pair for pair in self._pairs if pattern.fullmatch(pair[0]) is None)
