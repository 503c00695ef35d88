"""uricomponents.path
path = path-abempty / path-absolute / path-noscheme / path-rootless / path-empty
"""

import re

from typing import Any, Self
from urllib.parse import unquote

from ._abnf import SUB_DELIMS_CHARS
from .codec import Encoding, decode, encode_as
from .component import Component

# segment = *pchar
_PATH_SAFE: str = SUB_DELIMS_CHARS + ":@/"
_PATH_IRI_UNSAFE: str = "#?"

_DOT_SEGMENTS: tuple[str, ...] = (".", "..")


def remove_dot_segments(path: str) -> str:
    """The "remove_dot_segments" routine from RFC 3986 section 5.2.4, applied segment by segment
    so that a relative path stays relative.
    e.g. remove_dot_segments("/a/b/c/./../../g") == "/a/g"
    """
    if "." not in path:
        return path
    is_absolute: bool = path.startswith("/")
    segments: list[str] = (path[1:] if is_absolute else path).split("/")
    result: list[str] = []
    for segment in segments:
        if segment == "..":
            if len(result) > 0:
                result.pop()
        elif segment != ".":
            result.append(segment)
    new_path: str = "/".join(result)
    if is_absolute:
        new_path = f"/{new_path}"
    # A path ending with a dot-segment refers to a directory.
    if segments[-1] in _DOT_SEGMENTS and new_path != "" and not new_path.endswith("/"):
        new_path += "/"
    return new_path


class Path(Component):
    """A generic path. It is never absent: the smallest path is the empty string."""

    __slots__ = ("_path",)

    def __init__(self: Self, path: Any = "") -> None:
        value: str | None = self._filter(path)
        if value is None:
            raise TypeError("a path can not be None")
        self._assign(_path=decode(value))

    def _format(self: Self, encoding: Encoding) -> str | None:
        return encode_as(self._path, encoding, _PATH_SAFE, _PATH_IRI_UNSAFE)

    @property
    def content(self: Self) -> str:
        return self._format(Encoding.RFC3986) or ""

    def decoded(self: Self) -> str:
        return unquote(self.content)

    def is_absolute(self: Self) -> bool:
        return self._path.startswith("/")

    def has_trailing_slash(self: Self) -> bool:
        return self._path.endswith("/")

    def with_trailing_slash(self: Self) -> Self:
        if self.has_trailing_slash():
            return self
        return self.with_content(f"{self.content}/")

    def without_trailing_slash(self: Self) -> Self:
        if not self.has_trailing_slash():
            return self
        return self.with_content(self.content[:-1])

    def with_leading_slash(self: Self) -> Self:
        if self.is_absolute():
            return self
        return self.with_content(f"/{self.content}")

    def without_leading_slash(self: Self) -> Self:
        if not self.is_absolute():
            return self
        return self.with_content(self.content[1:])

    def without_dot_segments(self: Self) -> Self:
        return self.with_content(remove_dot_segments(self.content))

    def without_empty_segments(self: Self) -> Self:
        return self.with_content(re.sub(r"/+", "/", self.content))
