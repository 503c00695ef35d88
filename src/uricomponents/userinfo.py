"""uricomponents.userinfo"""

from typing import Any, Self
from urllib.parse import unquote

from ._abnf import SUB_DELIMS_CHARS
from .codec import RFC1738, Encoding, decode, encode_as
from .component import Component

# userinfo = *( unreserved / pct-encoded / sub-delims / ":" )
# The first ":" separates the user from the password, so it is encoded in the user.
_USER_SAFE: str = SUB_DELIMS_CHARS
_PASSWORD_SAFE: str = SUB_DELIMS_CHARS + ":"
_USER_IRI_UNSAFE: str = "/?#@:"
_PASSWORD_IRI_UNSAFE: str = "/?#@"


class UserInfo(Component):
    """user[:password]
    Without a user there is no password either.
    """

    __slots__ = ("_user", "_password")

    def __init__(self: Self, user: Any = None, password: Any = None) -> None:
        decoded_user: str | None = decode(self._filter(user))
        decoded_password: str | None = decode(self._filter(password))
        if decoded_user is None or decoded_user == "":
            decoded_password = None
        self._assign(_user=decoded_user, _password=decoded_password)

    @classmethod
    def from_content(cls: type[Self], value: Any) -> Self:
        """Builds a UserInfo from its `user:password` form."""
        content: str | None = cls._filter(value)
        if content is None:
            return cls()
        user, sep, password = content.partition(":")
        return cls(user, password if sep else None)

    def _format(self: Self, encoding: Encoding) -> str | None:
        if self._user is None:
            return None
        user: str | None = encode_as(self._user, encoding, _USER_SAFE, _USER_IRI_UNSAFE)
        if self._password is None:
            return user
        return f"{user}:{encode_as(self._password, encoding, _PASSWORD_SAFE, _PASSWORD_IRI_UNSAFE)}"

    def to_rfc1738(self: Self) -> str | None:
        return self._format(RFC1738)

    @property
    def user(self: Self) -> str | None:
        if self._user is None:
            return None
        return unquote(self._user)

    @property
    def password(self: Self) -> str | None:
        if self._password is None:
            return None
        return unquote(self._password)

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
        return f"{content}@"

    def with_user_info(self: Self, user: Any, password: Any = None) -> Self:
        new: Self = self.__class__(user, password)
        if new == self:
            return self
        return new

    def with_content(self: Self, value: Any) -> Self:
        new: Self = self.from_content(value)
        if new == self:
            return self
        return new
