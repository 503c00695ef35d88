import base64

import pytest

from uricomponents import DataPath, UriSyntaxError

BONJOUR = "text/plain;charset=us-ascii,Bonjour%20le%20monde%21"


@pytest.mark.parametrize(
    "path, expected",
    [
        ("", "text/plain;charset=us-ascii,"),
        (",", "text/plain;charset=us-ascii,"),
        ("text/plain;,", "text/plain;charset=us-ascii,"),
        (BONJOUR, BONJOUR),
        ("image/gif;base64,R0lGODlh", "image/gif;base64,R0lGODlh"),
    ],
)
def test_content(path, expected):
    assert DataPath(path).content == expected


def test_accessors():
    path = DataPath("text/plain;charset=us-ascii,Hello")
    assert path.mimetype == "text/plain"
    assert path.parameters == "charset=us-ascii"
    assert path.mediatype == "text/plain;charset=us-ascii"
    assert path.data == "Hello"
    assert not path.is_binary_data()


def test_binary_data():
    path = DataPath("image/gif;base64,R0lGODlh")
    assert path.is_binary_data()
    assert path.mimetype == "image/gif"
    assert path.data == "R0lGODlh"


@pytest.mark.parametrize(
    "path",
    [
        "text/plain;charset=us-ascii;base64,@@@",
        "text/plain;charset=us-ascii;base64,SGVsbG8",
        "text/plain;base64=yes,foo",
        "text/plain;foo,bar",
        "/plain,foo",
        "text plain,foo",
        "ä",
    ],
)
def test_invalid_data_path(path):
    with pytest.raises(UriSyntaxError):
        DataPath(path)


def test_data_path_is_never_null():
    with pytest.raises(TypeError):
        DataPath(None)


def test_to_binary():
    path = DataPath(BONJOUR).to_binary()
    assert path.is_binary_data()
    assert path.data == base64.b64encode(b"Bonjour le monde!").decode("ascii")
    assert path.to_binary() is path


def test_to_ascii():
    path = DataPath("text/plain;charset=us-ascii;base64,SGVsbG8gV29ybGQh").to_ascii()
    assert not path.is_binary_data()
    assert path.data == "Hello%20World%21"
    assert path.to_ascii() is path


def test_round_trip():
    path = DataPath(BONJOUR)
    assert path.to_binary().to_ascii() == path


def test_with_parameters():
    path = DataPath(BONJOUR)
    assert path.with_parameters("charset=utf-8").parameters == "charset=utf-8"
    assert path.with_parameters("charset=us-ascii") is path
    with pytest.raises(UriSyntaxError):
        path.with_parameters("charset")
    with pytest.raises(TypeError):
        path.with_parameters(None)


def test_path_modifiers():
    path = DataPath(BONJOUR)
    assert path.without_dot_segments() is path
    assert not path.is_absolute()
    with pytest.raises(UriSyntaxError):
        path.with_leading_slash()


def test_from_file_contents(tmp_path):
    text = tmp_path / "hello.txt"
    text.write_bytes(b"Hello")
    path = DataPath.from_file_contents(text)
    assert path.mimetype == "text/plain"
    assert path.parameters == "charset=us-ascii"
    assert path.is_binary_data()
    assert path.data == "SGVsbG8="


def test_from_binary_file_contents(tmp_path):
    image = tmp_path / "pixel.gif"
    image.write_bytes(b"GIF89a\x01\x00\x01\x00\x80\xff\x00")
    path = DataPath.from_file_contents(str(image))
    assert path.mimetype == "image/gif"
    assert path.parameters == "charset=binary"
    assert base64.b64decode(path.data) == image.read_bytes()


def test_from_missing_file(tmp_path):
    with pytest.raises(UriSyntaxError):
        DataPath.from_file_contents(tmp_path / "missing.txt")


def test_save(tmp_path):
    target = DataPath(BONJOUR).save(tmp_path / "out.txt")
    assert target.read_bytes() == b"Bonjour le monde!"
    target = DataPath("text/plain;charset=us-ascii;base64,SGVsbG8=").save(tmp_path / "hello.txt")
    assert target.read_bytes() == b"Hello"
