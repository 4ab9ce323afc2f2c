from enum import Enum

import pytest

from uppkit.enums import (
    BitMask,
    EnumMap,
    EnumMapStatic,
    is_enum_bitmask,
    underlying_cast,
)


class Int(Enum):
    A = 0
    B = 1


class Letters(Enum):
    A = 0
    B = 1
    C = 2
    D = 3


class Three(Enum):
    A = 0
    B = 1
    C = 2


class BitMaskEnum(Enum):
    A = 1
    B = 1 << 1


class Flags(Enum):
    A = 1
    B = 1 << 1
    C = 1 << 2


class NotFlags(Enum):
    A = 1
    B = 2
    C = 3


def test_is_bitmask():
    assert is_enum_bitmask(Flags) is True


def test_is_not_bitmask():
    assert is_enum_bitmask(NotFlags) is False


def test_bitmask_rejects_overlapping_enum():
    with pytest.raises(TypeError):
        BitMask(NotFlags)


def test_cast_to_underlying():
    assert underlying_cast(Int.A) == 0
    assert underlying_cast(Int.B) == 1


def test_cast_from_underlying():
    assert underlying_cast(0, Int) is Int.A
    assert underlying_cast(1, Int) is Int.B


def test_cast_requires_member():
    with pytest.raises(TypeError):
        underlying_cast(3)


def test_map_default_ctor():
    m = EnumMap(Int, int)
    assert m.capacity() == 2
    assert len(m) == 0


def test_map_initializer_list():
    m = EnumMap(Int, items=[(Int.A, 10), (Int.B, 20)])
    assert len(m) == 2
    assert m.at(Int.A) == 10
    assert m.at(Int.B) == 20


def test_map_add():
    m = EnumMap(Int, int)
    m[Int.A] = 1
    assert len(m) == 1
    assert m.at(Int.A) == 1
    assert m[Int.A] == 1


def test_map_static_add():
    m = EnumMapStatic(Int, int)
    m[Int.A] = 1
    assert len(m) == 1
    assert m.at(Int.A) == 1


def test_map_getitem_inserts_default():
    m = EnumMap(Int, int)
    assert m[Int.B] == 0
    assert len(m) == 1
    assert Int.B in m


def test_map_getitem_missing_without_factory():
    m = EnumMap(Int)
    with pytest.raises(KeyError):
        m[Int.A]
    assert list(m.items()) == []


def test_map_at_missing():
    m = EnumMap(Int, int)
    with pytest.raises(KeyError):
        m.at(Int.A)


def test_map_wrong_key_type():
    m = EnumMap(Int, int)
    with pytest.raises(TypeError):
        m[Letters.A] = 1
    assert list(m.items()) == []


def test_map_iterate():
    m = EnumMap(Letters, str)
    m[Letters.A] = "a"
    m[Letters.B] = "b"
    m[Letters.D] = "d"
    assert list(m.items()) == [(Letters.A, "a"), (Letters.B, "b"), (Letters.D, "d")]
    for key, value in list(m.items()):
        m[key] = value.upper()
    assert m[Letters.A] == "A"
    assert m[Letters.B] == "B"
    assert m[Letters.D] == "D"
    assert list(m) == [Letters.A, Letters.B, Letters.D]


def test_map_iterate_reverse():
    m = EnumMap(Letters, str, [(Letters.A, "a"), (Letters.B, "b"), (Letters.C, "c")])
    keys = list(reversed(m))
    assert keys == [Letters.C, Letters.B, Letters.A]
    assert [m.at(k) for k in keys] == ["c", "b", "a"]
    assert keys[-1] == next(iter(m))


def test_map_const_iterate():
    m = EnumMap(Three, str, {Three.A: "a", Three.C: "c"})
    assert list(m.items()) == [(Three.A, "a"), (Three.C, "c")]
    assert list(m.values()) == ["a", "c"]


def test_map_erase_one():
    m = EnumMap(Int, int)
    m[Int.A] = 1
    assert m.erase(Int.A) == 1
    assert not m
    assert len(m) == 0


def test_map_erase_miss():
    m = EnumMap(Int, int)
    m[Int.A] = 1
    assert m.erase(Int.B) == 0
    assert len(m) == 1


def test_map_create_list():
    m = EnumMap(Three, str, [(Three.A, "a"), (Three.B, "b"), (Three.C, "c")])
    assert len(list(m.items())) == 3


def test_bitmask_ctor_empty():
    class Empty(Enum):
        pass

    b = BitMask(Empty)
    assert b.none() is True
    assert b.all() is True


def test_bitmask_ctor_default():
    b = BitMask(BitMaskEnum)
    assert b.none() is True
    assert b.any() is False
    assert b.all() is False


def test_bitmask_ctor_all_set():
    b = BitMask(BitMaskEnum, BitMaskEnum.A, BitMaskEnum.B)
    assert b.none() is False
    assert b.any() is True
    assert b.all() is True
    assert int(b) == 3


def test_bitmask_and_enum():
    b = BitMask(BitMaskEnum, BitMaskEnum.A)
    assert (b & BitMaskEnum.A).any() is True
    assert (b & BitMaskEnum.B).none() is True


def test_bitmask_or_enum():
    b = BitMask(BitMaskEnum)
    b = b | BitMaskEnum.B
    assert (b & BitMaskEnum.B).any() is True
    assert (b & BitMaskEnum.A).none() is True
    assert int(b) == 2


def test_bitmask_xor_and_equality():
    a = BitMask(BitMaskEnum, BitMaskEnum.A, BitMaskEnum.B)
    b = BitMask(BitMaskEnum, BitMaskEnum.A)
    assert (a ^ b) == BitMask(BitMaskEnum, BitMaskEnum.B)
    assert BitMask.from_value(BitMaskEnum, 2) == BitMask(BitMaskEnum, BitMaskEnum.B)


def test_bitmask_invert():
    b = ~BitMask(BitMaskEnum, BitMaskEnum.A)
    assert (b & BitMaskEnum.B).any() is True
    assert (b & BitMaskEnum.A).none() is True


def test_bitmask_wrong_member():
    with pytest.raises(TypeError):
        BitMask(BitMaskEnum, Flags.A)