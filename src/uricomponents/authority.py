"""uricomponents.authority
authority = [ userinfo "@" ] host [ ":" port ]
"""

import re

from typing import Any, Self

from .codec import RFC1738, Encoding
from .component import Component
from .exceptions import UriSyntaxError
from .host import Host
from .port import Port
from .userinfo import UserInfo

# Brackets keep the colons of an IP literal out of the port.
_HOST_PORT_PAT: re.Pattern[str] = re.compile(r"(?P<host>\[.*\]|[^:]*)(?::(?P<port>.*))?", re.DOTALL)


class Authority(Component):
    """UserInfo, Host and Port put together.
    A present authority always has a host, possibly empty.
    """

    __slots__ = ("_user_info", "_host", "_port")

    def __init__(self: Self, authority: Any = None) -> None:
        user_info, host, port = self._parse(self._filter(authority))
        self._assign(_user_info=user_info, _host=host, _port=port)
        self._validate()

    @staticmethod
    def _parse(authority: str | None) -> tuple[UserInfo, Host, Port]:
        if authority is None:
            return UserInfo(), Host(), Port()

        user_info: UserInfo = UserInfo()
        host_port: str = authority
        if "@" in authority:
            raw_user_info, _, host_port = authority.partition("@")
            user_info = UserInfo.from_content(raw_user_info)

        m: re.Match[str] | None = _HOST_PORT_PAT.fullmatch(host_port)
        if m is None:
            raise UriSyntaxError(f"the authority `{authority}` is invalid")
        # "host:" has an empty, hence absent, port.
        return user_info, Host(m["host"]), Port(m["port"] or None)

    @classmethod
    def _new(cls: type[Self], user_info: UserInfo, host: Host, port: Port) -> Self:
        authority: Self = cls.__new__(cls)
        authority._assign(_user_info=user_info, _host=host, _port=port)
        authority._validate()
        return authority

    def _validate(self: Self) -> None:
        if self._host.content is None and (self._user_info.content is not None or self._port.content is not None):
            raise UriSyntaxError("an authority with a user info or a port must have a host")

    def _format(self: Self, encoding: Encoding) -> str | None:
        host: str | None = self._host._format(encoding)
        if host is None:
            return None
        result: str = host
        port: str | None = self._port.content
        if port is not None:
            result += f":{port}"
        user_info: str | None = self._user_info._format(encoding)
        if user_info is not None:
            result = f"{user_info}@{result}"
        return result

    def to_rfc1738(self: Self) -> str | None:
        return self._format(RFC1738)

    @property
    def uri_component(self: Self) -> str:
        content: str | None = self.content
        if content is None:
            return ""
        return f"//{content}"

    @property
    def host(self: Self) -> str | None:
        return self._host.content

    @property
    def port(self: Self) -> int | None:
        return self._port.to_int()

    @property
    def user_info(self: Self) -> str | None:
        return self._user_info.content

    @property
    def host_component(self: Self) -> Host:
        return self._host

    @property
    def port_component(self: Self) -> Port:
        return self._port

    @property
    def user_info_component(self: Self) -> UserInfo:
        return self._user_info

    def with_host(self: Self, host: Any) -> Self:
        new_host: Host = Host(host)
        if new_host == self._host:
            return self
        return self._new(self._user_info, new_host, self._port)

    def with_port(self: Self, port: Any) -> Self:
        new_port: Port = Port(port)
        if new_port == self._port:
            return self
        return self._new(self._user_info, self._host, new_port)

    def with_user_info(self: Self, user: Any, password: Any = None) -> Self:
        new_user_info: UserInfo = UserInfo(user, password)
        if new_user_info == self._user_info:
            return self
        return self._new(new_user_info, self._host, self._port)
