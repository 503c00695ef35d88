import pytest

from uricomponents import Scheme, UriSyntaxError


def test_scheme_is_lowercased():
    assert Scheme("HTTP").content == "http"
    assert Scheme("svn+SSH").content == "svn+ssh"


def test_uri_component():
    assert Scheme("http").uri_component == "http:"
    assert Scheme(None).uri_component == ""
    assert Scheme(None).content is None


@pytest.mark.parametrize("scheme", ["", "1http", "ht tp", "http:", "é"])
def test_invalid_scheme(scheme):
    with pytest.raises(UriSyntaxError):
        Scheme(scheme)
