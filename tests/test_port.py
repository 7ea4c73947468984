import pytest

from httptypes.errors import ErrorKind, InvalidUri
from httptypes.port import Port


def test_partialeq_port():
    port_a = Port.parse("8080")
    port_b = Port.parse("8080")
    assert port_a == port_b
    assert port_a.as_u16() == 8080
    assert port_b.as_str() == "8080"


def test_partialeq_port_different_reprs():
    port_a = Port(8081, "8081")
    port_b = Port(8081, "08081")
    assert port_a == port_b
    assert port_b == port_a


def test_partialeq_u16():
    port = Port.parse("8080")
    assert port == 8080
    assert 8080 == port


def test_int_from_port():
    assert int(Port.parse("8080")) == 8080


def test_as_u16_and_as_str():
    port = Port.parse("80")
    assert port.as_u16() == 80
    assert port.as_str() == "80"


def test_as_str_keeps_original_text():
    port = Port.parse("0080")
    assert port.as_str() == "0080"
    assert port.as_u16() == 80
    assert str(port) == "80"


def test_repr():
    assert repr(Port.parse("443")) == "Port(443)"


def test_hash_matches_equality():
    assert hash(Port(80, "80")) == hash(Port(80, "080"))
    assert len({Port.parse("80"), Port.parse("080"), Port.parse("81")}) == 2


def test_bounds():
    assert Port.parse("0").as_u16() == 0
    assert Port.parse("65535").as_u16() == 65535


@pytest.mark.parametrize("text", ["", "65536", "-1", "80a", " 80", "8_0", "+", "abc"])
def test_invalid_port(text):
    with pytest.raises(InvalidUri) as info:
        Port.parse(text)
    assert info.value.kind is ErrorKind.INVALID_PORT


def test_not_equal_to_other_number():
    assert Port.parse("80") != 81
    assert Port.parse("80") != Port.parse("81")