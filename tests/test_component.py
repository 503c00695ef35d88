import pytest

from uricomponents import Fragment, Port, Scheme, UriSyntaxError


def test_components_are_immutable():
    scheme = Scheme("http")
    with pytest.raises(AttributeError):
        scheme._scheme = "ftp"
    with pytest.raises(AttributeError):
        del scheme._scheme


def test_component_input():
    assert Scheme(Scheme("HTTP")).content == "http"
    with pytest.raises(TypeError):
        Scheme(42)
    with pytest.raises(UriSyntaxError):
        Fragment("a\nb")


def test_null_and_empty():
    assert Fragment(None).is_null()
    assert Fragment(None).is_empty()
    assert not Fragment("").is_null()
    assert Fragment("").is_empty()
    assert str(Fragment(None)) == ""


def test_equality_and_hash():
    assert Scheme("HTTP") == Scheme("http")
    assert hash(Scheme("HTTP")) == hash(Scheme("http"))
    assert Scheme("http") != Fragment("http")
    assert len({Port(80), Port("80"), Port(443)}) == 2


def test_with_content_returns_same_instance():
    fragment = Fragment("foo")
    assert fragment.with_content("foo") is fragment
    assert fragment.with_content(Fragment("foo")) is fragment
    assert fragment.with_content("bar") == Fragment("bar")


def test_repr():
    assert repr(Scheme("http")) == "Scheme('http')"
