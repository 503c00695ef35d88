"""uricomponents.port"""

import re

from typing import Any, Self

from .codec import Encoding
from .component import Component
from .exceptions import PortOutOfRange, UriSyntaxError

# port = *DIGIT
_PORT_PAT: re.Pattern[str] = re.compile(r"[0-9]+")


class Port(Component):
    """A non-negative integer, or None when the port is absent."""

    __slots__ = ("_port",)

    def __init__(self: Self, port: Any = None) -> None:
        self._assign(_port=self._validate(port))

    @classmethod
    def _validate(cls: type[Self], port: Any) -> int | None:
        if isinstance(port, bool):
            raise TypeError("a port can not be a boolean")
        if isinstance(port, int):
            if port < 0:
                raise PortOutOfRange(port)
            return port
        value: str | None = cls._filter(port)
        if value is None:
            return None
        if _PORT_PAT.fullmatch(value) is None:
            raise UriSyntaxError(f"expected port to be a positive integer or 0; received `{value}`")
        # Leading zeros are dropped.
        return int(value, base=10)

    @classmethod
    def from_int(cls: type[Self], port: int) -> Self:
        if not isinstance(port, int) or isinstance(port, bool):
            raise TypeError(f"expected an integer; got {type(port).__name__}")
        return cls(port)

    def to_int(self: Self) -> int | None:
        return self._port

    def _format(self: Self, encoding: Encoding) -> str | None:
        if self._port is None:
            return None
        return str(self._port)

    @property
    def uri_component(self: Self) -> str:
        if self._port is None:
            return ""
        return f":{self._port}"

    def with_content(self: Self, value: Any) -> Self:
        new: Self = self.__class__(value)
        if new == self:
            return self
        return new
