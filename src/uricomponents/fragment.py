"""uricomponents.fragment"""

from typing import Any, Self
from urllib.parse import unquote

from ._abnf import SUB_DELIMS_CHARS
from .codec import Encoding, decode, encode_as
from .component import Component

# fragment = *( pchar / "/" / "?" )
_FRAGMENT_SAFE: str = SUB_DELIMS_CHARS + ":@/?"


class Fragment(Component):
    __slots__ = ("_fragment",)

    def __init__(self: Self, fragment: Any = None) -> None:
        self._assign(_fragment=decode(self._filter(fragment)))

    def _format(self: Self, encoding: Encoding) -> str | None:
        return encode_as(self._fragment, encoding, _FRAGMENT_SAFE, "#")

    def decoded(self: Self) -> str | None:
        content: str | None = self.content
        if content is None:
            return None
        return unquote(content)

    @property
    def uri_component(self: Self) -> str:
        content: str | None = self.content
        if content is None:
            return ""
        return f"#{content}"
