import pytest

from uricomponents import Path
from uricomponents.path import remove_dot_segments


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/a/b/c/./../../g", "/a/g"),
        ("mid/content=5/../6", "mid/6"),
        ("a/./b/", "a/b/"),
        ("/a/b/..", "/a/"),
        ("/a/b/.", "/a/b/"),
        ("../a", "a"),
        ("/../a", "/a"),
        ("..", ""),
        ("/", "/"),
        ("", ""),
    ],
)
def test_remove_dot_segments(path, expected):
    assert remove_dot_segments(path) == expected


@pytest.mark.parametrize("path", ["/a/b/c/./../../g", "a/../../b/./", "/./.././a//b/..", "."])
def test_remove_dot_segments_is_idempotent(path):
    once = remove_dot_segments(path)
    assert remove_dot_segments(once) == once


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/a b", "/a%20b"),
        ("€", "%E2%82%AC"),
        ("a?b#c", "a%3Fb%23c"),
        ("/a%2Fb", "/a%2Fb"),
        ("/a%2fb%41", "/a%2FbA"),
        ("/a:b@c;d=e", "/a:b@c;d=e"),
        ("", ""),
    ],
)
def test_content(path, expected):
    assert Path(path).content == expected


def test_path_is_never_null():
    with pytest.raises(TypeError):
        Path(None)
    assert Path().content == ""
    assert not Path().is_null()


def test_to_iri_and_decoded():
    assert Path("/%E2%82%AC%20").to_iri() == "/€%20"
    assert Path("/a%20b").decoded() == "/a b"


def test_slashes():
    assert Path("/foo").is_absolute()
    assert not Path("foo").is_absolute()
    assert Path("foo/").has_trailing_slash()
    assert Path("foo").with_leading_slash().content == "/foo"
    assert Path("/foo").without_leading_slash().content == "foo"
    assert Path("/foo").with_trailing_slash().content == "/foo/"
    assert Path("/foo/").without_trailing_slash().content == "/foo"


def test_unchanged_paths_are_returned_as_is():
    path = Path("/foo/")
    assert path.with_leading_slash() is path
    assert path.with_trailing_slash() is path
    assert path.without_dot_segments() is path
    assert path.without_empty_segments() is path


def test_without_dot_segments():
    assert Path("/a/b/../c").without_dot_segments().content == "/a/c"


def test_without_empty_segments():
    assert Path("//a///b/").without_empty_segments().content == "/a/b/"
