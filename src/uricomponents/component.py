"""uricomponents.component
Base class of every URI component.
"""

from typing import Any, NoReturn, Self

from ._abnf import CONTROL_CHARS_PAT
from .codec import RFC3986, RFC3987, Encoding
from .exceptions import UriSyntaxError


class Component:
    """An immutable URI component.
    `content` is the RFC 3986 representation of the component, or None when the component is absent.
    Every with_* method returns a new component, or the very same one if nothing changed.
    """

    __slots__ = ()

    def __setattr__(self: Self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"{self.__class__.__name__} instances are immutable")

    def __delattr__(self: Self, name: str) -> NoReturn:
        raise AttributeError(f"{self.__class__.__name__} instances are immutable")

    def _assign(self: Self, **fields: Any) -> None:
        for name, value in fields.items():
            object.__setattr__(self, name, value)

    @staticmethod
    def _filter(value: Any) -> str | None:
        """Accepts a string, None, or another component whose content is used."""
        if isinstance(value, Component):
            value = value.content
        if value is None:
            return None
        if not isinstance(value, str):
            raise TypeError(f"expected a string, None or a component; got {type(value).__name__}")
        if CONTROL_CHARS_PAT.search(value) is not None:
            raise UriSyntaxError(f"`{value!r}` contains invalid characters")
        return value

    def _format(self: Self, encoding: Encoding) -> str | None:
        raise NotImplementedError

    @property
    def content(self: Self) -> str | None:
        return self._format(RFC3986)

    def to_iri(self: Self) -> str | None:
        return self._format(RFC3987)

    @property
    def uri_component(self: Self) -> str:
        """The content as it appears inside a URI, delimiter included when the component is present."""
        return self.content or ""

    def is_null(self: Self) -> bool:
        return self.content is None

    def is_empty(self: Self) -> bool:
        return self.content in (None, "")

    def with_content(self: Self, value: Any) -> Self:
        value = self._filter(value)
        if value == self.content:
            return self
        new: Self = self.__class__(value)
        if new == self:
            return self
        return new

    def __str__(self: Self) -> str:
        return self.content or ""

    def __repr__(self: Self) -> str:
        return f"{self.__class__.__name__}({self.content!r})"

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, Component) or type(other) is not type(self):
            return NotImplemented
        return self.content == other.content

    def __hash__(self: Self) -> int:
        return hash((self.__class__, self.content))
