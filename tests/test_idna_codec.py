import pytest

from uricomponents.exceptions import IdnaConversionFailed, IdnaError
from uricomponents.idna_codec import IdnaCodec, IdnaResult


@pytest.fixture
def codec():
    return IdnaCodec()


@pytest.mark.parametrize(
    "domain, expected",
    [
        ("مثال.إختبار", "xn--mgbh0fb.xn--kgbechtv"),
        ("bücher.example", "xn--bcher-kva.example"),
        ("BÜCHER", "xn--bcher-kva"),
        ("example.com.", "example.com."),
    ],
)
def test_to_ascii(codec, domain, expected):
    result = codec.to_ascii(domain)
    assert not result.failed
    assert result.domain == expected


@pytest.mark.parametrize(
    "domain, expected",
    [
        ("xn--mgbh0fb.xn--kgbechtv", "مثال.إختبار"),
        ("xn--bcher-kva.example", "bücher.example"),
        ("example.com", "example.com"),
    ],
)
def test_to_unicode(codec, domain, expected):
    result = codec.to_unicode(domain)
    assert not result.failed
    assert result.domain == expected


@pytest.mark.parametrize(
    "domain, error",
    [
        ("a..ä", IdnaError.EMPTY_LABEL),
        ("-ä", IdnaError.LEADING_HYPHEN),
        ("ä-", IdnaError.TRAILING_HYPHEN),
        ("ä" * 64, IdnaError.LABEL_TOO_LONG),
        ("a\ufffdb", IdnaError.DISALLOWED),
    ],
)
def test_to_ascii_errors(codec, domain, error):
    result = codec.to_ascii(domain)
    assert result.failed
    assert error in result.errors


def test_errors_are_gathered(codec):
    result = codec.to_ascii("-ä-")
    assert IdnaError.LEADING_HYPHEN | IdnaError.TRAILING_HYPHEN in result.errors


def test_result_without_errors():
    assert not IdnaResult("example.com").failed


def test_describe():
    errors = IdnaError.LEADING_HYPHEN | IdnaError.TRAILING_HYPHEN
    assert errors.describe() == 'a label starts with a hyphen-minus ("-"), a label ends with a hyphen-minus ("-").'
    assert IdnaError.NONE.describe() == "Unknown IDNA conversion error."


def test_conversion_failed_message():
    e = IdnaConversionFailed("-ä", IdnaError.LEADING_HYPHEN)
    assert e.host == "-ä"
    assert e.errors is IdnaError.LEADING_HYPHEN
    assert str(e) == '`-ä` is an invalid domain name : a label starts with a hyphen-minus ("-").'
    assert isinstance(e, ValueError)
