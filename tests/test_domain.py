import pytest

from uricomponents import Domain, Host, OffsetOutOfBounds, UriSyntaxError


def test_labels_are_reversed():
    domain = Domain("www.example.com")
    assert domain.labels() == ["com", "example", "www"]
    assert list(domain) == ["com", "example", "www"]
    assert len(domain) == 3
    assert domain.keys() == [0, 1, 2]
    assert domain.keys("example") == [1]
    assert domain.keys("foo") == []


@pytest.mark.parametrize("offset, expected", [(0, "com"), (2, "www"), (-1, "www"), (-3, "com"), (3, None), (-4, None)])
def test_get(offset, expected):
    assert Domain("www.example.com").get(offset) == expected


def test_absolute_domain():
    domain = Domain("example.com.")
    assert domain.is_absolute()
    assert domain.labels() == ["", "com", "example"]
    assert domain.without_root_label().content == "example.com"
    assert domain.with_root_label() is domain
    assert Domain("example.com").with_root_label().content == "example.com."


@pytest.mark.parametrize("host", [None, "127.0.0.1", "[::1]", "ex_ample.com", ""])
def test_invalid_domain(host):
    with pytest.raises(UriSyntaxError):
        Domain(host)


def test_from_labels():
    assert Domain.from_labels(["com", "example"]).content == "example.com"
    assert Domain(Host("example.com")).content == "example.com"
    with pytest.raises(TypeError):
        Domain.from_labels(["com", None])


def test_prepend_append():
    domain = Domain("example.com")
    assert domain.prepend("www").content == "www.example.com"
    assert domain.append("fr").content == "example.com.fr"
    assert domain.prepend(None) is domain
    assert domain.append(None) is domain


@pytest.mark.parametrize(
    "host, label, expected",
    [
        ("secure.example.com", "master", "master.secure.example.com"),
        ("secure.example.com.", "master", "master.secure.example.com."),
        ("secure.example.com", "127.", "127.secure.example.com"),
        ("secure.example.com.", "127.", "127.secure.example.com."),
        ("example.com", "www.", "www.example.com"),
    ],
)
def test_prepend(host, label, expected):
    assert Domain(host).prepend(label).content == expected


@pytest.mark.parametrize(
    "host, label, expected",
    [
        ("secure.example.com", "master", "secure.example.com.master"),
        ("secure.example.com", "master.", "secure.example.com.master."),
        ("example.com", "", "example.com."),
        ("secure.example.com.", "master", "secure.example.com.master."),
        ("secure.example.com.", "master.", "secure.example.com.master."),
        ("example.com.", "org", "example.com.org."),
    ],
)
def test_append(host, label, expected):
    assert Domain(host).append(label).content == expected


def test_append_invalid_label():
    with pytest.raises(UriSyntaxError):
        Domain("secure.example.com").append("master..")


@pytest.mark.parametrize(
    "offset, label, expected",
    [
        (0, "org", "www.example.org"),
        (-1, "shop", "shop.example.com"),
        (3, "fr", "www.example.com.fr"),
        (-4, "shop", "shop.www.example.com"),
        (1, "Bücher", "www.xn--bcher-kva.com"),
    ],
)
def test_with_label(offset, label, expected):
    assert Domain("www.example.com").with_label(offset, label).content == expected


@pytest.mark.parametrize(
    "offset, label, expected",
    [
        (3, "www", "example.com.www."),
        (-4, "www", "www.example.com."),
        (-4, "www.", "www.example.com."),
        (-1, "shop", "shop.com."),
    ],
)
def test_with_label_absolute(offset, label, expected):
    assert Domain("example.com.").with_label(offset, label).content == expected


def test_with_label_unchanged():
    domain = Domain("www.example.com")
    assert domain.with_label(1, "example") is domain


@pytest.mark.parametrize("offset", [4, -5])
def test_with_label_out_of_bounds(offset):
    with pytest.raises(OffsetOutOfBounds):
        Domain("www.example.com").with_label(offset, "foo")


def test_without_label():
    domain = Domain("www.example.com")
    assert domain.without_label(0, 0).content == "www.example"
    assert domain.without_label(-1).content == "example.com"
    assert domain.without_label() is domain


@pytest.mark.parametrize("offset", [3, -4])
def test_without_label_out_of_bounds(offset):
    with pytest.raises(OffsetOutOfBounds) as e:
        Domain("www.example.com").without_label(offset)
    assert e.value.offset == offset
    assert isinstance(e.value, IndexError)


def test_label_lookup():
    domain = Domain("www.example.com.example")
    assert domain.first() == "example"
    assert domain.last() == "www"
    assert domain.index_of("example") == 0
    assert domain.last_index_of("example") == 2
    assert domain.index_of("foo") is None
    assert domain.last_index_of("foo") is None
    assert domain.contains("com")
    assert not domain.contains("org")


@pytest.mark.parametrize(
    "offset, length, expected",
    [
        (0, None, "www.example.com"),
        (1, None, "www.example"),
        (0, 2, "example.com"),
        (0, -1, "example.com"),
        (-1, None, "www"),
        (-2, 1, "example"),
        (3, None, None),
        (0, 0, None),
    ],
)
def test_slice(offset, length, expected):
    sliced = Domain("www.example.com").slice(offset, length)
    assert (sliced.content if sliced is not None else None) == expected


def test_slice_unchanged():
    domain = Domain("www.example.com")
    assert domain.slice(0) is domain
    assert domain.slice(-3, 3) is domain


@pytest.mark.parametrize("offset", [4, -4])
def test_slice_out_of_bounds(offset):
    with pytest.raises(OffsetOutOfBounds):
        Domain("www.example.com").slice(offset)


@pytest.mark.parametrize(
    "host, expected",
    [
        ("www.example.com", "example.com"),
        ("www.example.com.", "example.com"),
        ("com", None),
    ],
)
def test_parent_host(host, expected):
    parent = Domain(host).parent_host()
    assert (parent.content if parent is not None else None) == expected


@pytest.mark.parametrize(
    "child, parent, expected",
    [
        ("www.example.com", "example.com", True),
        ("www.example.com.", "example.com", True),
        ("www.example.com", "example.com.", True),
        ("shop.www.example.com", Domain("example.com"), True),
        ("example.com", "example.com", False),
        ("example.com.", "example.com", False),
        ("wwwexample.com", "example.com", False),
        ("www.example.com", "127.0.0.1", False),
        ("www.example.com", None, False),
    ],
)
def test_is_subdomain_of(child, parent, expected):
    assert Domain(child).is_subdomain_of(parent) is expected


def test_has_subdomain():
    domain = Domain("example.com")
    assert domain.has_subdomain("www.example.com")
    assert not domain.has_subdomain("example.org")
    assert not domain.has_subdomain("[::1]")


@pytest.mark.parametrize(
    "host, sibling, expected",
    [
        ("www.example.com", "shop.example.com", True),
        ("www.example.com.", "shop.example.com", True),
        ("www.example.com", "www.example.com", False),
        ("www.example.com", "www.example.org", False),
        ("www.example.com", "example.com", False),
        ("www.example.com", "ex_ample", False),
    ],
)
def test_is_sibling_of(host, sibling, expected):
    assert Domain(host).is_sibling_of(sibling) is expected


@pytest.mark.parametrize(
    "host, other, expected",
    [
        ("www.example.com", "shop.example.com", "example.com"),
        ("www.example.com.", "shop.example.com", "example.com"),
        ("www.example.com", "www.example.com", "www.example.com"),
        ("www.example.com", "example.org", None),
        ("www.example.com", "127.0.0.1", None),
    ],
)
def test_common_ancestor_with(host, other, expected):
    ancestor = Domain(host).common_ancestor_with(other)
    assert (ancestor.content if ancestor is not None else None) == expected
