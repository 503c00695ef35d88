import pytest

from uricomponents import Port, PortOutOfRange, UriSyntaxError


@pytest.mark.parametrize(
    "port, expected",
    [
        (80, 80),
        ("443", 443),
        ("0080", 80),
        (0, 0),
        (None, None),
        (Port(8080), 8080),
    ],
)
def test_port(port, expected):
    assert Port(port).to_int() == expected


def test_content():
    assert Port("0080").content == "80"
    assert Port(None).content is None
    assert Port(443).uri_component == ":443"
    assert Port(None).uri_component == ""


@pytest.mark.parametrize("port", [-1, "-1", "a", "", "8 0", "1.5"])
def test_invalid_port(port):
    with pytest.raises(UriSyntaxError):
        Port(port)


def test_negative_port():
    with pytest.raises(PortOutOfRange) as e:
        Port(-8080)
    assert e.value.port == -8080
    with pytest.raises(PortOutOfRange):
        Port.from_int(-1)


def test_invalid_port_type():
    with pytest.raises(TypeError):
        Port(True)
    with pytest.raises(TypeError):
        Port(1.5)
    with pytest.raises(TypeError):
        Port.from_int("80")


def test_from_int():
    assert Port.from_int(8080).content == "8080"


def test_with_content():
    port = Port(80)
    assert port.with_content("80") is port
    assert port.with_content(443).to_int() == 443
    assert port.with_content(None).content is None
