import pytest

from httptypes.authority import Authority, authority_end
from httptypes.errors import ErrorKind, InvalidUri


def _kind(src):
    with pytest.raises(InvalidUri) as info:
        Authority.parse(src)
    return info.value.kind


def test_parse_empty_string_is_error():
    assert _kind(b"") == ErrorKind.EMPTY


def test_equal_to_self_of_same_authority():
    a1 = Authority.parse("example.com")
    a2 = Authority.parse("EXAMPLE.COM")
    assert a1 == a2
    assert a2 == a1


def test_not_equal_to_self_of_different_authority():
    a1 = Authority.parse("example.com")
    a2 = Authority.parse("test.com")
    assert a1 != a2
    assert a2 != a1


def test_equates_with_a_str():
    authority = Authority.parse("example.com")
    assert authority == "EXAMPLE.com"
    assert "EXAMPLE.com" == authority


def test_from_static_equates_with_a_str():
    assert Authority.parse("example.com") == "example.com"


def test_not_equal_with_a_str_of_a_different_authority():
    authority = Authority.parse("example.com")
    assert authority.as_str() == "example.com"
    assert (authority == "test.com") is False
    assert ("test.com" == authority) is False


def test_compares_to_self():
    a1 = Authority.parse("abc.com")
    a2 = Authority.parse("def.com")
    assert a1 < a2
    assert a2 > a1
    assert a1 <= a2
    assert a2 >= a1


def test_compares_with_a_str():
    authority = Authority.parse("def.com")
    assert authority < "ghi.com"
    assert "ghi.com" > authority
    assert authority > "abc.com"
    assert "abc.com" < authority


def test_case_insensitive_ordering():
    authority = Authority.parse("DEF.com")
    assert authority < "ghi.com"
    assert authority > "abc.com"


def test_case_insensitive_hash():
    a = Authority.parse("HELLO.com")
    b = Authority.parse("hello.coM")
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_allows_percent_in_userinfo():
    text = "a%2f:b%2f@example.com"
    assert Authority.parse(text) == text


def test_rejects_percent_in_hostname():
    assert _kind(b"example%2f.com") == ErrorKind.INVALID_AUTHORITY
    assert _kind(b"a%2f:b%2f@example%2f.com") == ErrorKind.INVALID_AUTHORITY


def test_allows_percent_in_ipv6_address():
    text = "[fe80::1:2:3:4%25eth0]"
    assert Authority.parse(text) == text


def test_reject_obviously_invalid_ipv6_address():
    assert _kind(b"[0:1:2:3:4:5:6:7:8:9:10:11:12:13:14]") == ErrorKind.INVALID_AUTHORITY


def test_rejects_percent_outside_ipv6_address():
    assert _kind(b"1234%20[fe80::1:2:3:4]") == ErrorKind.INVALID_AUTHORITY
    assert _kind(b"[fe80::1:2:3:4]%20") == ErrorKind.INVALID_AUTHORITY


def test_rejects_invalid_utf8():
    assert _kind(bytes([0xC0])) == ErrorKind.INVALID_URI_CHAR


def test_rejects_invalid_use_of_brackets():
    assert _kind(b"[]@[") == ErrorKind.INVALID_AUTHORITY
    assert _kind(b"]o[") == ErrorKind.INVALID_AUTHORITY


@pytest.mark.parametrize(
    "text",
    ["localhost:8080:3030", "user@", "[::1", "::1]"],
)
def test_rejects_malformed(text):
    assert _kind(text) == ErrorKind.INVALID_AUTHORITY


def test_rejects_trailing_path():
    assert _kind("example.com/path") == ErrorKind.INVALID_URI_CHAR


def test_host_and_port():
    authority = Authority.parse("example.org:80")
    assert authority.host() == "example.org"
    port = authority.port()
    assert port.as_u16() == 80
    assert port.as_str() == "80"
    assert authority.port_u16() == 80


def test_no_port():
    authority = Authority.parse("example.org")
    assert authority.port() is None
    assert authority.port_u16() is None
    assert authority.host() == "example.org"


def test_host_with_userinfo():
    authority = Authority.parse("user:password@localhost:3000")
    assert authority.host() == "localhost"
    assert authority.port_u16() == 3000


def test_ipv6_host_and_port():
    authority = Authority.parse("[2001:db8::2:1]:8008")
    assert authority.host() == "[2001:db8::2:1]"
    assert authority.port_u16() == 8008


def test_ipv6_without_port():
    authority = Authority.parse("[::1]")
    assert authority.host() == "[::1]"
    assert authority.port() is None


def test_str_and_as_str():
    authority = Authority.parse("Example.com:8080")
    assert str(authority) == "Example.com:8080"
    assert authority.as_str() == "Example.com:8080"


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"example.com/path", 11),
        (b"host?x", 4),
        (b"host#frag", 4),
        (b"", 0),
        (b"a:b@host:1", 10),
    ],
)
def test_authority_end(data, expected):
    assert authority_end(data) == expected


def test_authority_end_rejects_invalid_char():
    with pytest.raises(InvalidUri) as info:
        authority_end("exa mple.com")
    assert info.value.kind == ErrorKind.INVALID_URI_CHAR