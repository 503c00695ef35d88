"""uricomponents.hierarchical_path"""

from typing import Any, Iterable, Iterator, Self

from .exceptions import OffsetOutOfBounds, UriSyntaxError
from .path import Path

_SEPARATOR: str = "/"


class HierarchicalPath(Path):
    """A path seen as a sequence of segments.
    The leading slash of an absolute path is not a segment: "/" and "" both have one empty segment.
    """

    __slots__ = ("_segments",)

    def __init__(self: Self, path: Any = "") -> None:
        super().__init__(path)
        path_data: str = self._path[1:] if self.is_absolute() else self._path
        self._assign(_segments=tuple(path_data.split(_SEPARATOR)))

    @classmethod
    def from_segments(cls: type[Self], segments: Iterable[Any], absolute: bool = False) -> Self:
        values: list[str] = []
        for segment in segments:
            value: str | None = cls._filter(segment)
            if value is None:
                raise TypeError("a segment can not be None")
            values.append(value)
        path: str = _SEPARATOR.join(values)
        if not absolute:
            return cls(path.lstrip(_SEPARATOR))
        if not path.startswith(_SEPARATOR):
            path = _SEPARATOR + path
        return cls(path)

    @classmethod
    def from_relative_segments(cls: type[Self], segments: Iterable[Any]) -> Self:
        return cls.from_segments(segments, absolute=False)

    @classmethod
    def from_absolute_segments(cls: type[Self], segments: Iterable[Any]) -> Self:
        return cls.from_segments(segments, absolute=True)

    def _rebuild(self: Self, segments: Iterable[str]) -> Self:
        path: str = _SEPARATOR.join(segments)
        if self.is_absolute():
            path = _SEPARATOR + path
        return self.with_content(path)

    def _segment(self: Self, segment: Any) -> str:
        value: str | None = self._filter(segment)
        if value is None:
            raise TypeError("a segment can not be None")
        return value

    def __len__(self: Self) -> int:
        return len(self._segments)

    def __iter__(self: Self) -> Iterator[str]:
        return iter(self._segments)

    def segments(self: Self) -> list[str]:
        return list(self._segments)

    def get(self: Self, offset: int) -> str | None:
        if offset < 0:
            offset += len(self._segments)
        if 0 <= offset < len(self._segments):
            return self._segments[offset]
        return None

    def keys(self: Self, segment: str | None = None) -> list[int]:
        if segment is None:
            return list(range(len(self._segments)))
        return [offset for offset, value in enumerate(self._segments) if value == segment]

    def append(self: Self, segment: Any) -> Self:
        value: str = self._segment(segment)
        return self.with_content(f"{self.content.rstrip(_SEPARATOR)}{_SEPARATOR}{value.lstrip(_SEPARATOR)}")

    def prepend(self: Self, segment: Any) -> Self:
        value: str = self._segment(segment)
        return self.with_content(f"{value.rstrip(_SEPARATOR)}{_SEPARATOR}{self.content.lstrip(_SEPARATOR)}")

    def with_segment(self: Self, offset: int, segment: Any) -> Self:
        """Replaces the segment at `offset`.
        `len(path)` appends a segment, `-len(path) - 1` prepends one.
        """
        count: int = len(self._segments)
        if offset < -count - 1 or offset > count:
            raise OffsetOutOfBounds(offset, count)
        if offset < 0:
            offset += count
        if offset == count:
            return self.append(segment)
        if offset == -1:
            return self.prepend(segment)

        value: str = self._segment(segment)
        if value == self._segments[offset]:
            return self
        segments: list[str] = list(self._segments)
        segments[offset] = value
        return self._rebuild(segments)

    def without_segment(self: Self, *offsets: int) -> Self:
        if len(offsets) == 0:
            return self
        count: int = len(self._segments)
        deleted: set[int] = set()
        for offset in offsets:
            if offset < -count or offset > count - 1:
                raise OffsetOutOfBounds(offset, count)
            deleted.add(offset + count if offset < 0 else offset)
        return self._rebuild(segment for offset, segment in enumerate(self._segments) if offset not in deleted)

    def get_dirname(self: Self) -> str:
        """Everything before the basename, without a trailing slash unless it is the root.
        e.g. HierarchicalPath("/path/to/file").get_dirname() == "/path/to"
        """
        path: str = self.content
        stripped: str = path.rstrip(_SEPARATOR)
        if stripped == "":
            return _SEPARATOR if path.startswith(_SEPARATOR) else ""
        dirname, separator, _ = stripped.rpartition(_SEPARATOR)
        if not separator:
            return ""
        return dirname.rstrip(_SEPARATOR) or _SEPARATOR

    def get_basename(self: Self) -> str:
        return self._segments[-1]

    def get_extension(self: Self) -> str:
        """The extension of the basename, ignoring its ";parameters" part."""
        name: str = self.get_basename().partition(";")[0]
        _, dot, extension = name.rpartition(".")
        return extension if dot else ""

    def with_dirname(self: Self, dirname: Any) -> Self:
        value: str = self._segment(dirname)
        if value == self.get_dirname():
            return self
        if value.endswith(_SEPARATOR):
            value = value[:-1]
        return self.with_content(f"{value}{_SEPARATOR}{self.get_basename()}")

    def with_basename(self: Self, basename: Any) -> Self:
        value: str = self._segment(basename)
        if _SEPARATOR in value:
            raise UriSyntaxError("the basename can not contain the path separator")
        return self.with_segment(-1, value)

    def with_extension(self: Self, extension: Any) -> Self:
        """Replaces the extension of the basename, keeping any ";parameters" part.
        An empty extension removes it.
        """
        value: str = self._segment(extension).strip()
        if _SEPARATOR in value:
            raise UriSyntaxError("an extension can not contain the path separator")
        if value.startswith("."):
            raise UriSyntaxError("an extension can not start with a dot")

        basename: str = self.get_basename()
        name, _, parameters = basename.partition(";")
        if name == "":
            return self
        stem, dot, _ = name.rpartition(".")
        if not dot:
            stem = name
        new_basename: str = stem
        if value != "":
            new_basename += f".{value}"
        if parameters.strip() != "":
            new_basename += f";{parameters.strip()}"
        if new_basename == basename:
            return self
        return self.with_segment(-1, new_basename)
