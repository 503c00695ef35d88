import pytest

from uricomponents import UserInfo


@pytest.mark.parametrize(
    "user, password, expected",
    [
        ("user", "pass", "user:pass"),
        ("user", None, "user"),
        ("us:er", "p:ass", "us%3Aer:p:ass"),
        ("foo%40bar", None, "foo%40bar"),
        ("bébé", None, "b%C3%A9b%C3%A9"),
        (None, "pass", None),
        ("", "pass", ""),
    ],
)
def test_content(user, password, expected):
    assert UserInfo(user, password).content == expected


def test_accessors():
    user_info = UserInfo("foo%40bar", "p%3Ass")
    assert user_info.user == "foo@bar"
    assert user_info.password == "p:ss"
    assert UserInfo(None, "pass").password is None


def test_from_content():
    user_info = UserInfo.from_content("foo:bar:baz")
    assert user_info.user == "foo"
    assert user_info.password == "bar:baz"
    assert UserInfo.from_content("foo:").password == ""
    assert UserInfo.from_content(None).content is None


def test_uri_component():
    assert UserInfo("user", "pass").uri_component == "user:pass@"
    assert UserInfo("").uri_component == "@"
    assert UserInfo().uri_component == ""


def test_encodings():
    assert UserInfo("a+b~").to_rfc1738() == "a%2Bb%7E"
    assert UserInfo("bébé", "p@ss").to_iri() == "bébé:p%40ss"
    assert UserInfo("a b").decoded() == "a b"


def test_with_user_info():
    user_info = UserInfo("user", "pass")
    assert user_info.with_user_info("user", "pass") is user_info
    assert user_info.with_user_info("john").content == "john"


def test_with_content():
    user_info = UserInfo("user", "pass")
    assert user_info.with_content("user:pass") is user_info
    assert user_info.with_content("a:b") == UserInfo("a", "b")
