"""uricomponents.data_path
The path of a data URI (RFC 2397):

dataurl   = "data:" [ mediatype ] [ ";base64" ] "," data
mediatype = [ type "/" subtype ] *( ";" parameter )
"""

import base64
import binascii
import logging
import mimetypes
import pathlib
import re

from typing import Any, Self
from urllib.parse import quote, quote_from_bytes, unquote_to_bytes

from .exceptions import UriSyntaxError
from .path import Path

logger = logging.getLogger(__name__)

_DEFAULT_MIMETYPE: str = "text/plain"
_DEFAULT_PARAMETER: str = "charset=us-ascii"
_BINARY_PARAMETER: str = "base64"

_MIMETYPE_PAT: re.Pattern[str] = re.compile(r"\w+/[-.\w]+(?:\+[-.\w]+)?", re.ASCII)
_MEDIATYPE_WITHOUT_PARAMETERS_PAT: re.Pattern[str] = re.compile(r"\w+/[-.\w]+(?:\+[-.\w]+)?;,", re.ASCII)
_BINARY_FLAG_PAT: re.Pattern[str] = re.compile(rf"(?:;|^){_BINARY_PARAMETER}$")
_DATA_ENCODING_PAT: re.Pattern[str] = re.compile(r"[^A-Za-z0-9_\-.~!$&'()*+,;=%:/@]+|%(?![A-Fa-f0-9]{2})")


def _format(mimetype: str, parameters: str, is_binary_data: bool, data: str) -> str:
    if parameters != "":
        parameters = f";{parameters}"
    if is_binary_data:
        parameters += f";{_BINARY_PARAMETER}"
    return _DATA_ENCODING_PAT.sub(lambda m: quote(m[0], safe=""), f"{mimetype}{parameters},{data}")


class DataPath(Path):
    """mimetype;parameters[;base64],document
    The document of binary data is base64 that survives a decode/encode round trip.
    """

    __slots__ = ("_mimetype", "_parameters", "_is_binary_data", "_document")

    def __init__(self: Self, path: Any = "") -> None:
        value: str | None = self._filter(path)
        if value is None:
            raise TypeError("a path can not be None")
        super().__init__(self._fill_defaults(value))

        mediatype, _, document = self.content.partition(",")
        mimetype, _, parameters = mediatype.partition(";")
        is_binary_data: bool = _BINARY_FLAG_PAT.search(parameters) is not None
        self._assign(
            _mimetype=self._filter_mimetype(mimetype),
            _parameters=self._filter_parameters(parameters),
            _is_binary_data=is_binary_data,
            _document=document,
        )
        if is_binary_data:
            self._validate_document(document)

    @staticmethod
    def _fill_defaults(path: str) -> str:
        if path in ("", ","):
            return f"{_DEFAULT_MIMETYPE};{_DEFAULT_PARAMETER},"
        if _MEDIATYPE_WITHOUT_PARAMETERS_PAT.fullmatch(path) is not None:
            return f"{path[:-1]}{_DEFAULT_PARAMETER},"
        if not path.isascii() and "," not in path:
            raise UriSyntaxError(f"the path `{path}` is invalid according to RFC 2397")
        return path

    @staticmethod
    def _filter_mimetype(mimetype: str) -> str:
        if mimetype == "":
            return _DEFAULT_MIMETYPE
        if _MIMETYPE_PAT.fullmatch(mimetype) is None:
            raise UriSyntaxError(f"invalid mimetype `{mimetype}`")
        return mimetype

    @staticmethod
    def _filter_parameters(parameters: str) -> tuple[str, ...]:
        if parameters == "":
            return (_DEFAULT_PARAMETER,)
        m: re.Match[str] | None = _BINARY_FLAG_PAT.search(parameters)
        if m is not None:
            parameters = parameters[: m.start()]
        params: tuple[str, ...] = tuple(param for param in parameters.split(";") if param != "")
        for param in params:
            properties: list[str] = param.split("=")
            if len(properties) != 2 or properties[0].lower() == _BINARY_PARAMETER:
                raise UriSyntaxError(f"invalid mediatype parameters `{parameters}`")
        return params

    @staticmethod
    def _validate_document(document: str) -> None:
        try:
            data: bytes = base64.b64decode(document, validate=True)
        except binascii.Error as e:
            raise UriSyntaxError(f"invalid base64 document `{document}`") from e
        if base64.b64encode(data).decode("ascii") != document:
            raise UriSyntaxError(f"invalid base64 document `{document}`")

    @classmethod
    def from_file_contents(cls: type[Self], path: str | pathlib.Path) -> Self:
        """Reads a whole file and stores it as base64 data."""
        try:
            content: bytes = pathlib.Path(path).read_bytes()
        except OSError as e:
            raise UriSyntaxError(f"`{path}` failed to open stream") from e

        mimetype: str = mimetypes.guess_type(str(path))[0] or "application/octet-stream"
        charset: str = "binary"
        if mimetype.startswith("text/"):
            if content.isascii():
                charset = "us-ascii"
            else:
                try:
                    content.decode("utf-8")
                    charset = "utf-8"
                except UnicodeDecodeError:
                    charset = "binary"
        logger.debug("read %d bytes of %s from %s", len(content), mimetype, path)
        return cls(f"{mimetype};charset={charset};{_BINARY_PARAMETER},{base64.b64encode(content).decode('ascii')}")

    @property
    def mimetype(self: Self) -> str:
        return self._mimetype

    @property
    def parameters(self: Self) -> str:
        return ";".join(self._parameters)

    @property
    def mediatype(self: Self) -> str:
        return f"{self._mimetype};{self.parameters}"

    @property
    def data(self: Self) -> str:
        return self._document

    def is_binary_data(self: Self) -> bool:
        return self._is_binary_data

    def save(self: Self, path: str | pathlib.Path, mode: str = "wb") -> pathlib.Path:
        """Writes the decoded document to `path`."""
        if self._is_binary_data:
            data: bytes = base64.b64decode(self._document, validate=True)
        else:
            data = unquote_to_bytes(self._document)
        target: pathlib.Path = pathlib.Path(path)
        with target.open(mode) as f:
            f.write(data)
        logger.debug("wrote %d bytes to %s", len(data), target)
        return target

    def to_binary(self: Self) -> Self:
        if self._is_binary_data:
            return self
        data: str = base64.b64encode(unquote_to_bytes(self._document)).decode("ascii")
        return self.__class__(_format(self._mimetype, self.parameters, True, data))

    def to_ascii(self: Self) -> Self:
        if not self._is_binary_data:
            return self
        data: str = quote_from_bytes(base64.b64decode(self._document, validate=True), safe="")
        return self.__class__(_format(self._mimetype, self.parameters, False, data))

    def with_parameters(self: Self, parameters: str) -> Self:
        if not isinstance(parameters, str):
            raise TypeError(f"expected parameters to be a string; received {type(parameters).__name__}")
        if parameters == self.parameters:
            return self
        return self.__class__(_format(self._mimetype, parameters, self._is_binary_data, self._document))

    def without_dot_segments(self: Self) -> Self:
        return self
