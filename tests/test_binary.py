import pytest

from anttools import binary


def test_encode_uint64():
    assert binary.encode(6010, "uint64") == b"\x7a\x17\x00\x00\x00\x00\x00\x00"


def test_uint64_round_trip():
    assert binary.decode(binary.encode(6010, "uint64"), "uint64") == 6010


@pytest.mark.parametrize(
    "value, kind",
    [(-5, "int8"), (65535, "uint16"), (-123456, "int32"), (1.5, "float64"), (True, "bool"), (7, "I")],
)
def test_round_trips(value, kind):
    assert binary.decode(binary.encode(value, kind), kind) == value


def test_sequence_round_trip():
    packed = binary.encode([1, 2, 3], "uint16")
    assert packed == b"\x01\x00\x02\x00\x03\x00"
    assert binary.decode(packed, "3H") == (1, 2, 3)


def test_decode_ignores_trailing_bytes():
    assert binary.decode(b"\x01\x00\xff", "uint16") == 1


def test_decode_short_input():
    with pytest.raises(ValueError, match="unexpected EOF"):
        binary.decode(b"\x01\x02", "uint64")


def test_encode_out_of_range():
    with pytest.raises(ValueError):
        binary.encode(-1, "uint8")


def test_invalid_kind():
    with pytest.raises(ValueError):
        binary.encode(1, ">I")