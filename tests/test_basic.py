import pytest

from sszkit.basic import Boolean, Uint, deserialize, hash_tree_root, serialize
from sszkit.errors import (
    AdditionalInput,
    ExpectedFurtherInput,
    InvalidByte,
    SerializeError,
)


def root_from_hex(hex_str):
    return bytes.fromhex(hex_str.removeprefix("0x").ljust(64, "0"))


def _u256(hex_le):
    return int.from_bytes(bytes.fromhex(hex_le), "little")


# --- boolean -----------------------------------------------------------------


def test_encode_boolean():
    assert serialize(Boolean(), False) == bytes([0])
    assert serialize(Boolean(), True) == bytes([1])


def test_decode_boolean():
    assert Boolean().deserialize(bytes([0])) is False
    assert Boolean().deserialize(bytes([1])) is True


@pytest.mark.parametrize("value", [True, False])
def test_roundtrip_boolean(value):
    encoding = serialize(Boolean(), value)
    assert deserialize(Boolean(), encoding) == value


@pytest.mark.parametrize(
    "value, encoding, root",
    [
        (False, b"\x00", "0x0000000000000000000000000000000000000000000000000000000000000000"),
        (True, b"\x01", "0x0100000000000000000000000000000000000000000000000000000000000000"),
    ],
)
def test_boolean_valid(value, encoding, root):
    assert serialize(Boolean(), value) == encoding
    assert deserialize(Boolean(), encoding) == value
    assert hash_tree_root(Boolean(), value) == root_from_hex(root)


@pytest.mark.parametrize("byte", [0x80, 0x02, 0xFF, 0x10])
def test_boolean_invalid_bytes(byte):
    with pytest.raises(InvalidByte) as info:
        deserialize(Boolean(), bytes([byte]))
    assert info.value.byte == byte


def test_boolean_wrong_lengths():
    with pytest.raises(ExpectedFurtherInput) as short:
        Boolean().deserialize(b"")
    assert (short.value.provided, short.value.expected) == (0, 1)
    with pytest.raises(AdditionalInput) as long:
        Boolean().deserialize(b"\x01\x00")
    assert (long.value.provided, long.value.expected) == (2, 1)


def test_boolean_rejects_non_bool():
    with pytest.raises(SerializeError):
        serialize(Boolean(), 1)


def test_boolean_type_properties():
    b = Boolean()
    assert (b.is_variable_size(), b.size_hint(), b.is_composite_type()) == (False, 1, False)


# --- uints -------------------------------------------------------------------

UINT_CASES = [
    (8, 0, "0x00"),
    (8, 255, "0xff"),
    (8, 225, "0xe1"),
    (8, 59, "0x3b"),
    (8, 3, "0x03"),
    (8, 46, "0x2e"),
    (8, 17, "0x11"),
    (16, 255, "0xff00"),
    (16, 65535, "0xffff"),
    (16, 11001, "0xf92a"),
    (16, 12900, "0x6432"),
    (16, 46482, "0x92b5"),
    (16, 31039, "0x3f79"),
    (16, 2284, "0xec08"),
    (16, 0, "0x0000"),
    (32, 16777215, "0xffffff00"),
    (32, 4294967295, "0xffffffff"),
    (32, 3387753032, "0x4802edc9"),
    (32, 2676973563, "0xfb5f8f9f"),
    (32, 2644908285, "0xfd18a69d"),
    (32, 638037343, "0x5fad0726"),
    (32, 4144220671, "0xffc903f7"),
    (32, 0, "0x00000000"),
    (64, 72057594037927935, "0xffffffffffffff00"),
    (64, 18446744073709551615, "0xffffffffffffffff"),
    (64, 8594311575614880821, "0x357c8de9d7204577"),
    (64, 12453893770581738044, "0x3c82f999661ed5ac"),
    (64, 10680714365983390887, "0xa7fcd98320853994"),
    (64, 11891402719218752485, "0xe5db2510c5bf06a5"),
    (64, 15683022699148686111, "0x1f33257b0d4aa5d9"),
    (64, 0, "0x0000000000000000"),
    (128, 1329227995784915872903807060280344575, "0xffffffffffffffffffffffffffffff00"),
    (128, 340282366920938463463374607431768211455, "0xffffffffffffffffffffffffffffffff"),
    (128, 317658863013703600909281237913711302754, "0x62583644e66ec83fc2a6cda723dffaee"),
    (128, 226427817519480008631815531407103573168, "0xb03c1174ebe365e018a5b887516958aa"),
    (128, 1966913376797472348559631900882537126, "0xa68a04f1c6f71282ca13121251d07a01"),
    (128, 223686144064414504608552983434269426145, "0xe101ce24c16ec3b57c2f0b79616248a8"),
    (128, 199925590919705556758473559487562637786, "0xdae1c72a086dde0deb118413aa446896"),
    (128, 0, "0x00000000000000000000000000000000"),
]

U256_HEX = [
    "ff" * 31 + "00",
    "ff" * 32,
    "3a37631ca891f9f4ff519987aa802724ca01a6ab61372e4e24a14274a88b220a",
    "a0c8f3c7731eeb847fe092d0c0611870029db14b5f166946b461b61f274f15c7",
    "9124367c86417760e00357d1a47617d1054809a8fbc366417a651ba442730031",
    "09dce6412d0644dbd01ab012b75e57b09d46226d34c912f3d981af33c450ee19",
    "ec2c7b5c86a957ee62dbd2db1a2580349c47d983cebbc1e32280d1b31109d26b",
    "00" * 32,
]

UINT_CASES += [(256, _u256(h), "0x" + h) for h in U256_HEX]


@pytest.mark.parametrize("bits, value, root", UINT_CASES)
def test_uints_valid(bits, value, root):
    sedes = Uint(bits)
    expected_root = root_from_hex(root)
    expected_encoding = expected_root[: bits // 8]
    encoding = serialize(sedes, value)
    assert encoding == expected_encoding
    assert deserialize(sedes, expected_encoding) == value
    assert hash_tree_root(sedes, value) == expected_root


@pytest.mark.parametrize("bits", [8, 16, 32, 64, 128, 256])
def test_uints_one_byte_longer(bits):
    with pytest.raises(AdditionalInput) as info:
        deserialize(Uint(bits), bytes(bits // 8 + 1))
    assert info.value.expected == bits // 8


@pytest.mark.parametrize("bits", [8, 16, 32, 64, 128, 256])
def test_uints_one_byte_shorter(bits):
    with pytest.raises(ExpectedFurtherInput) as info:
        deserialize(Uint(bits), bytes(bits // 8 - 1))
    assert info.value.provided == bits // 8 - 1


@pytest.mark.parametrize("bits", [8, 16, 32, 64, 128, 256])
def test_uints_one_too_high_cannot_serialize(bits):
    with pytest.raises(SerializeError):
        serialize(Uint(bits), 1 << bits)


def test_uint_rejects_negative_and_non_int():
    with pytest.raises(SerializeError):
        Uint(32).serialize(-1)
    with pytest.raises(SerializeError):
        Uint(32).serialize(True)
    with pytest.raises(SerializeError):
        Uint(32).serialize("5")


@pytest.mark.parametrize("bits", [0, 7, 24, 512])
def test_uint_rejects_unsupported_width(bits):
    with pytest.raises(ValueError):
        Uint(bits)


def test_uint_type_properties():
    sedes = Uint(64)
    assert sedes.size_hint() == 8
    assert sedes.is_variable_size() is False
    assert sedes.is_composite_type() is False
    assert Uint(64) == sedes
    assert Uint(32) != sedes