"""uricomponents.scheme"""

from typing import Any, Self

from ._abnf import SCHEME_PAT
from .codec import Encoding
from .component import Component
from .exceptions import UriSyntaxError


class Scheme(Component):
    """scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
    Schemes are case-insensitive, so they are stored in lowercase.
    """

    __slots__ = ("_scheme",)

    def __init__(self: Self, scheme: Any = None) -> None:
        value: str | None = self._filter(scheme)
        if value is not None:
            if SCHEME_PAT.fullmatch(value) is None:
                raise UriSyntaxError(f"`{value}` is an invalid scheme")
            value = value.lower()
        self._assign(_scheme=value)

    def _format(self: Self, encoding: Encoding) -> str | None:
        return self._scheme

    @property
    def uri_component(self: Self) -> str:
        if self._scheme is None:
            return ""
        return f"{self._scheme}:"
