"""uricomponents.domain
Domain names seen as a sequence of labels.
"""

from typing import Any, Iterable, Iterator, Self

from .exceptions import OffsetOutOfBounds, UriSyntaxError
from .host import Host

_SEPARATOR: str = "."


class Domain(Host):
    """A host that is a domain name.
    Labels are indexed from the right: offset 0 is the top-level label, and the
    root label of an absolute domain name is the empty string at offset 0.
    """

    __slots__ = ("_labels",)

    def __init__(self: Self, host: Any) -> None:
        super().__init__(host)
        if self._host is None:
            raise UriSyntaxError("a domain name can not be null")
        if not self._is_domain:
            raise UriSyntaxError(f"`{self._host}` is an invalid domain name")
        self._assign(_labels=tuple(reversed(self._host.split(_SEPARATOR))))

    @classmethod
    def from_labels(cls: type[Self], labels: Iterable[Any]) -> Self:
        """Builds a domain from its labels, top-level label first."""
        host_labels: list[str] = []
        for label in labels:
            value: str | None = cls._filter(label)
            if value is None:
                raise TypeError("a label can not be None")
            host_labels.append(value)
        return cls(_SEPARATOR.join(reversed(host_labels)))

    def __len__(self: Self) -> int:
        return len(self._labels)

    def __iter__(self: Self) -> Iterator[str]:
        return iter(self._labels)

    def get(self: Self, offset: int) -> str | None:
        """Negative offsets count from the leftmost label; missing labels are None."""
        if offset < 0:
            offset += len(self._labels)
        if 0 <= offset < len(self._labels):
            return self._labels[offset]
        return None

    def keys(self: Self, label: str | None = None) -> list[int]:
        if label is None:
            return list(range(len(self._labels)))
        return [offset for offset, value in enumerate(self._labels) if value == label]

    def labels(self: Self) -> list[str]:
        return list(self._labels)

    def is_absolute(self: Self) -> bool:
        return len(self._labels) > 1 and self._labels[0] == ""

    def prepend(self: Self, label: Any) -> Self:
        """Adds a label on the left; a trailing "." on `label` is not doubled."""
        value: str | None = self._filter(label)
        if value is None:
            return self
        if value.endswith(_SEPARATOR):
            return self.__class__(f"{value}{self._host}")
        return self.__class__(f"{value}{_SEPARATOR}{self._host}")

    def append(self: Self, label: Any) -> Self:
        """Adds a label on the right, before the root label of an absolute domain name.
        e.g. Domain("example.com.").append("org").content == "example.com.org."
        """
        value: str | None = self._filter(label)
        if value is None:
            return self
        if not self.is_absolute():
            return self.__class__(f"{self._host}{_SEPARATOR}{value}")
        if value.endswith(_SEPARATOR):
            return self.__class__(f"{self._host}{value}")
        return self.__class__(f"{self._host}{value}{_SEPARATOR}")

    def with_label(self: Self, offset: int, label: Any) -> Self:
        """Replaces the label at `offset`.
        `len(domain)` appends a label, `-len(domain) - 1` prepends one.
        """
        count: int = len(self._labels)
        if offset < -count - 1 or offset > count:
            raise OffsetOutOfBounds(offset, count)
        if offset < 0:
            offset += count
        if offset == count:
            return self.append(label)
        if offset == -1:
            return self.prepend(label)

        value: str | None = Host(label).content
        if value == self._labels[offset]:
            return self
        labels: list[str] = list(self._labels)
        labels[offset] = value or ""
        return self.__class__(_SEPARATOR.join(reversed(labels)))

    def without_label(self: Self, *offsets: int) -> Self:
        if len(offsets) == 0:
            return self
        count: int = len(self._labels)
        deleted: set[int] = set()
        for offset in offsets:
            if offset < -count or offset > count - 1:
                raise OffsetOutOfBounds(offset, count)
            deleted.add(offset + count if offset < 0 else offset)
        return self.from_labels(label for offset, label in enumerate(self._labels) if offset not in deleted)

    def with_root_label(self: Self) -> Self:
        if self._labels[0] == "":
            return self
        return self.append("")

    def without_root_label(self: Self) -> Self:
        if self._labels[0] != "":
            return self
        return self.from_labels(self._labels[1:])

    def first(self: Self) -> str:
        return self._labels[0]

    def last(self: Self) -> str:
        return self._labels[-1]

    def index_of(self: Self, label: str) -> int | None:
        """Offset of the first occurrence of label, counted from the right."""
        offsets: list[int] = self.keys(label)
        return offsets[0] if offsets else None

    def last_index_of(self: Self, label: str) -> int | None:
        offsets: list[int] = self.keys(label)
        return offsets[-1] if offsets else None

    def contains(self: Self, label: str) -> bool:
        return label in self._labels

    def slice(self: Self, offset: int, length: int | None = None) -> Self | None:
        """Keeps `length` labels starting at `offset`, as list slicing does with
        labels[offset:offset + length]; a negative length leaves out that many labels on the left.
        None is returned when no label is kept.
        e.g. Domain("www.example.com").slice(1).content == "www.example"
        """
        count: int = len(self._labels)
        if offset < -count or offset > count:
            raise OffsetOutOfBounds(offset, count)
        start: int = offset + count if offset < 0 else offset
        if length is None:
            labels: tuple[str, ...] = self._labels[start:]
        elif length < 0:
            labels = self._labels[start:length]
        else:
            labels = self._labels[start : start + length]
        if labels == self._labels:
            return self
        if len(labels) == 0:
            return None
        return self.from_labels(labels)

    @classmethod
    def _try_new(cls: type[Self], host: Any) -> Self | None:
        if isinstance(host, cls):
            return host
        try:
            return cls(host)
        except UriSyntaxError:
            return None

    def parent_host(self: Self) -> Self | None:
        """The domain without its leftmost label, None for a single label domain.
        The root label is dropped.
        """
        return self.without_root_label().slice(0, -1)

    def is_subdomain_of(self: Self, parent: Any) -> bool:
        """e.g. Domain("www.example.com").is_subdomain_of("example.com") is True"""
        parent_domain: Domain | None = Domain._try_new(parent)
        if parent_domain is None:
            return False
        child_domain: Domain = self.without_root_label()
        parent_domain = parent_domain.without_root_label()
        return len(child_domain) > len(parent_domain) and (child_domain.content or "").endswith(
            _SEPARATOR + (parent_domain.content or "")
        )

    def has_subdomain(self: Self, child: Any) -> bool:
        child_domain: Domain | None = Domain._try_new(child)
        return child_domain is not None and child_domain.is_subdomain_of(self)

    def is_sibling_of(self: Self, sibling: Any) -> bool:
        """Tells whether both domains are different and share the same parent host."""
        sibling_domain: Domain | None = Domain._try_new(sibling)
        if sibling_domain is None or sibling_domain.content == self.content:
            return False
        return self.parent_host() == sibling_domain.parent_host()

    def common_ancestor_with(self: Self, other: Any) -> "Domain | None":
        """The rightmost labels both domains share, root label excluded; None when they share none.
        e.g. Domain("www.example.com").common_ancestor_with("shop.example.com").content == "example.com"
        """
        other_domain: Domain | None = Domain._try_new(other)
        if other_domain is None:
            return None
        other_domain = other_domain.without_root_label()
        labels: list[str] = []
        for offset, label in enumerate(self.without_root_label()):
            if label != other_domain.get(offset):
                break
            labels.append(label)
        if len(labels) == 0:
            return None
        return Domain.from_labels(labels)
