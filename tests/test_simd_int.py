import pytest
from hypothesis import given
from hypothesis import strategies as st

from rasterkit.simd_int import (
    I8x16,
    I16x16,
    I32x8,
    M8x16,
    M32x4,
    M32x8,
    U8x32,
    U32x4,
    U32x8,
)

U32_MAX = 0xFFFF_FFFF

int32s = st.integers(min_value=-(2**31), max_value=2**31 - 1)


def test_u32x8_splat():
    assert U32x8.splat(0).to_array() == [0] * 8
    assert U32x8.splat(U32_MAX).to_array() == [U32_MAX] * 8


def test_u32x8_mul_add():
    a = U32x8.from_array([10, 20, 30, 50, 70, 110, 130, 170])
    b = U32x8.from_array([19, 23, 29, 31, 37, 41, 43, 47])
    c = U32x8.from_array([1, 2, 3, 4, 5, 6, 7, 8])
    assert a.mul_add(b, c).to_array() == [191, 462, 873, 1554, 2595, 4516, 5597, 7998]


def test_u32x8_mul_add_reaches_max():
    a = U32x8.splat(0x007F_FFFF)
    b = U32x8.splat(0x200)
    c = U32x8.splat(0x1FF)
    assert a.mul_add(b, c).to_array() == [U32_MAX] * 8


def test_u32x8_mul_add_wraps():
    result = U32x8.splat(U32_MAX).mul_add(U32x8.splat(2), U32x8.splat(2))
    assert result.to_array() == [0] * 8


def test_u32x8_rejects_wrong_lane_count_and_range():
    with pytest.raises(ValueError):
        U32x8.from_array([1, 2, 3])
    with pytest.raises(ValueError):
        U32x8.splat(-1)
    with pytest.raises(ValueError):
        U32x8.splat(U32_MAX + 1)


def test_u8x32_splat_and_default():
    assert U8x32.splat(7).to_array() == [7] * 32
    assert U8x32().to_array() == [0] * 32
    with pytest.raises(ValueError):
        U8x32.splat(256)


def test_u8x32_from_u32_interleaved():
    vals = [U32x8.from_array([k * 10 + i for i in range(8)]) for k in range(4)]
    result = U8x32.from_u32_interleaved(vals).to_array()
    assert result[:8] == [0, 10, 20, 30, 1, 11, 21, 31]
    assert result[-4:] == [7, 17, 27, 37]


def test_u8x32_from_u32_interleaved_truncates():
    vals = [U32x8.splat(0x1FF), U32x8.splat(0x100), U32x8.splat(0x12345678), U32x8.splat(3)]
    result = U8x32.from_u32_interleaved(vals).to_array()
    assert result[:4] == [0xFF, 0x00, 0x78, 0x03]


def test_u8x32_from_u32_interleaved_needs_four():
    with pytest.raises(ValueError):
        U8x32.from_u32_interleaved([U32x8.splat(1)] * 3)


def test_i8x16_add_wraps():
    result = I8x16.splat(127) + I8x16.splat(1)
    assert result.to_array() == [-128] * 16


def test_i8x16_abs():
    vals = [-128, -5, 0, 5] * 4
    assert I8x16.from_array(vals).abs().to_array() == [-128, 5, 0, 5] * 4


def test_i8x16_and():
    result = I8x16.splat(0b0110) & I8x16.splat(0b0011)
    assert result.to_array() == [0b0010] * 16


def test_i8x16_eq():
    a = I8x16.from_array(range(16))
    assert a.eq(I8x16.from_array(range(16))).all()
    b = I8x16.from_array([0] + list(range(1, 16)))
    assert b.eq(a).all()
    c = I8x16.from_array([1] + list(range(1, 16)))
    assert not c.eq(a).all()


def test_m8x16_default_not_all():
    assert M8x16().all() is False
    assert M8x16([0xFF] * 16).all() is True


def test_i8x16_to_i32x8_sign_extends():
    vals = list(range(-8, 8))
    low, high = I8x16.from_array(vals).to_i32x8()
    assert low.to_array() == list(range(-8, 0))
    assert high.to_array() == list(range(0, 8))


def test_i16x16_to_i32x8():
    low, high = I16x16.splat(-3).to_i32x8()
    assert low.to_array() == [-3] * 8
    assert high.to_array() == [-3] * 8


def test_i32x8_shr_is_arithmetic():
    result = I32x8.from_array([-8, 7, -1, 0, 16, -16, 1, 2]).shr(1)
    assert result.to_array() == [-4, 3, -1, 0, 8, -8, 0, 1]


def test_i32x8_shr_rejects_bad_amount():
    with pytest.raises(ValueError):
        I32x8.splat(1).shr(32)


def test_i32x8_arithmetic():
    a = I32x8.from_array([1, 2, 3, 4, 5, 6, 7, 8])
    b = I32x8.splat(2)
    assert (a + b).to_array() == [3, 4, 5, 6, 7, 8, 9, 10]
    assert (a - b).to_array() == [-1, 0, 1, 2, 3, 4, 5, 6]
    assert (a * b).to_array() == [2, 4, 6, 8, 10, 12, 14, 16]
    assert (a & b).to_array() == [0, 2, 2, 0, 0, 2, 2, 0]


def test_i32x8_mul_wraps():
    assert (I32x8.splat(0x10000) * I32x8.splat(0x10000)).to_array() == [0] * 8


def test_i32x8_abs_min_stays():
    assert I32x8.splat(-(2**31)).abs().to_array() == [-(2**31)] * 8
    assert I32x8.splat(-9).abs().to_array() == [9] * 8


@given(st.lists(int32s, min_size=8, max_size=8), st.lists(int32s, min_size=8, max_size=8))
def test_i32x8_add_sub_round_trip(a, b):
    va = I32x8.from_array(a)
    vb = I32x8.from_array(b)
    assert (va + vb - vb).to_array() == a


def test_m32x8_logic():
    a = I32x8.from_array([1, 2, 3, 4, 5, 6, 7, 8])
    same = a.eq(a)
    assert same.all()
    assert same.any()
    none = ~same
    assert not none.any()
    partial = a.eq(I32x8.splat(3))
    assert partial.any()
    assert not partial.all()
    assert (partial | ~partial).all()
    assert not (same ^ same).any()
    assert (partial ^ same) == ~partial


def test_m32x4_default_lanes():
    assert list(M32x4()) == [0, 0, 0, 0]


def test_u32x4_to_bytes():
    assert U32x4.splat(0x1FF).to_bytes() == b"\xff\xff\xff\xff"
    assert U32x4([1, 2, 0x300, 4]).to_bytes() == b"\x01\x02\x00\x04"


def test_type_mismatch():
    with pytest.raises(TypeError):
        I32x8.splat(1) + U32x8.splat(1)
    with pytest.raises(TypeError):
        I32x8.splat(1).eq(U32x8.splat(1))