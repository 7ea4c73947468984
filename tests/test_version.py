import pytest

from httptypes.version import Version


@pytest.mark.parametrize(
    "version, text",
    [
        (Version.HTTP_09, "HTTP/0.9"),
        (Version.HTTP_10, "HTTP/1.0"),
        (Version.HTTP_11, "HTTP/1.1"),
        (Version.HTTP_2, "HTTP/2.0"),
        (Version.HTTP_3, "HTTP/3.0"),
    ],
)
def test_str(version, text):
    assert str(version) == text


def test_default_is_http11():
    assert Version.default() is Version.HTTP_11


def test_versions_differ():
    assert (Version.default() == Version.HTTP_2) is False
    assert str(Version.default()) == "HTTP/1.1"
    assert str(Version.HTTP_2) == "HTTP/2.0"


def test_ordering_follows_declaration():
    ordered = [
        Version.HTTP_09,
        Version.HTTP_10,
        Version.default(),
        Version.HTTP_2,
        Version.HTTP_3,
    ]
    assert [str(v) for v in sorted(reversed(ordered))] == [
        "HTTP/0.9",
        "HTTP/1.0",
        "HTTP/1.1",
        "HTTP/2.0",
        "HTTP/3.0",
    ]
    assert Version.HTTP_10 < Version.default()
    assert Version.HTTP_3 > Version.HTTP_2
    assert Version.default() <= Version.HTTP_11
    assert Version.default() >= Version.HTTP_09


def test_compare_with_other_type_raises():
    with pytest.raises(TypeError):
        Version.default() < "HTTP/2.0"


def test_hash_consistent_with_equality():
    assert {Version.HTTP_2: 1}[Version.HTTP_2] == 1
    assert len({Version.HTTP_11, Version.default()}) == 1