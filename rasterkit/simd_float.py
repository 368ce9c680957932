"""Fixed-width single-precision float lane vectors."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator

import numpy as np

from rasterkit.simd_int import I32x8, M32x4, M32x8, U32x4, U32x8

_FULL = 0xFFFF_FFFF
_U32_LIMIT = float(_FULL)


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


def _to_f32(values: Iterable[float]) -> np.ndarray:
    with np.errstate(over="ignore"):
        return np.array([float(v) for v in values], dtype=np.float64).astype(np.float32)


def _mask_lanes(mask: M32x4 | M32x8, kind: type, lanes: int) -> np.ndarray:
    if not isinstance(mask, kind):
        raise TypeError(f"mask must be {kind.__name__}")
    bits = np.array(list(mask), dtype=np.uint32)
    if bits.shape != (lanes,):
        raise ValueError("mask has the wrong number of lanes")
    return bits == _FULL


class _FloatLanes:
    """A fixed number of f32 lanes; instances are immutable."""

    __slots__ = ("_lanes",)

    LANES: int = 0

    def __init__(self, values: Iterable[float] | None = None) -> None:
        if values is None:
            arr = np.zeros(self.LANES, dtype=np.float32)
        else:
            arr = _to_f32(values)
            if arr.shape != (self.LANES,):
                raise ValueError(
                    f"{type(self).__name__} takes {self.LANES} lanes, got {arr.size}"
                )
        self._lanes = _frozen(arr)

    @classmethod
    def _wrap(cls, arr: np.ndarray):
        obj = cls.__new__(cls)
        obj._lanes = _frozen(np.asarray(arr).astype(np.float32, copy=True))
        return obj

    def _check(self, other, name: str) -> None:
        if type(other) is not type(self):
            raise TypeError(f"{name} takes another {type(self).__name__}")

    def _bits(self) -> list[int]:
        return self._lanes.view(np.uint32).tolist()

    @classmethod
    def _from_bit_list(cls, bits: Iterable[int]):
        raw = np.array([operator.index(b) for b in bits], dtype=np.uint64)
        if raw.shape != (cls.LANES,) or np.any(raw > _FULL):
            raise ValueError(f"expected {cls.LANES} unsigned 32-bit lanes")
        return cls._wrap(raw.astype(np.uint32).view(np.float32))

    def _binary(self, other, op):
        if type(other) is not type(self):
            return NotImplemented
        with np.errstate(all="ignore"):
            return type(self)._wrap(op(self._lanes, other._lanes))

    def _clamped(self, low, high):
        self._check(low, "clamp")
        self._check(high, "clamp")
        lo, hi = low._lanes, high._lanes
        if not np.all(lo <= hi):
            raise ValueError("clamp bounds must be ordered and not NaN")
        x = self._lanes
        x = np.where(x < lo, lo, x)
        x = np.where(x > hi, hi, x)
        return type(self)._wrap(x)

    def _fused(self, a, b):
        self._check(a, "mul_add")
        self._check(b, "mul_add")
        with np.errstate(all="ignore"):
            wide = self._lanes.astype(np.float64) * a._lanes.astype(np.float64)
            wide = wide + b._lanes.astype(np.float64)
            return type(self)._wrap(wide.astype(np.float32))

    def __iter__(self) -> Iterator[float]:
        return iter(self._lanes.tolist())

    def __len__(self) -> int:
        return self.LANES

    def __eq__(self, other: object) -> bool:
        """Bit-for-bit equality of all lanes."""
        if type(other) is not type(self):
            return NotImplemented
        return self._bits() == other._bits()

    def __hash__(self) -> int:
        return hash((type(self).__name__, tuple(self._bits())))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._lanes.tolist()})"


class U8x8:
    """Eight unsigned bytes."""

    __slots__ = ("_lanes",)

    LANES = 8

    def __init__(self, values: Iterable[int] | None = None) -> None:
        items = [0] * self.LANES if values is None else [operator.index(v) for v in values]
        if len(items) != self.LANES:
            raise ValueError(f"U8x8 takes {self.LANES} lanes, got {len(items)}")
        if any(not 0 <= v <= 0xFF for v in items):
            raise ValueError("lane values must fit in a byte")
        self._lanes = tuple(items)

    @classmethod
    def from_f32x8(cls, val: F32x8) -> U8x8:
        """Round each lane half away from zero and saturate into ``0..=255``.

        NaN lanes become 0.
        """
        if not isinstance(val, F32x8):
            raise TypeError("from_f32x8 takes an F32x8")
        wide = val._lanes.astype(np.float64)
        rounded = np.trunc(wide + np.copysign(0.5, wide))
        rounded = np.nan_to_num(rounded, nan=0.0, posinf=255.0, neginf=0.0)
        return cls(np.clip(rounded, 0.0, 255.0).astype(np.int64).tolist())

    def to_array(self) -> list[int]:
        return list(self._lanes)

    def __iter__(self) -> Iterator[int]:
        return iter(self._lanes)

    def __len__(self) -> int:
        return self.LANES

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, U8x8):
            return NotImplemented
        return self._lanes == other._lanes

    def __hash__(self) -> int:
        return hash(("U8x8", self._lanes))

    def __repr__(self) -> str:
        return f"U8x8({list(self._lanes)})"


class F32x4(_FloatLanes):
    """Four single-precision floats."""

    __slots__ = ()
    LANES = 4

    @classmethod
    def new(cls, vals: Iterable[float]) -> F32x4:
        return cls(vals)

    @classmethod
    def splat(cls, val: float) -> F32x4:
        return cls([val] * cls.LANES)

    @classmethod
    def from_bits(cls, val: U32x4) -> F32x4:
        """Reinterpret the bits of each word lane as a float."""
        if not isinstance(val, U32x4):
            raise TypeError("from_bits takes a U32x4")
        return cls._from_bit_list(list(val))

    def to_bits(self) -> U32x4:
        """Reinterpret each lane's bits as an unsigned word."""
        return U32x4(self._bits())

    def to_array(self) -> list[float]:
        """Return the lanes as Python floats."""
        return self._lanes.tolist()

    def set(self, index: int, val: float) -> F32x4:
        """Return a copy with lane ``index`` replaced by ``val``."""
        index = operator.index(index)
        if not 0 <= index < self.LANES:
            raise IndexError(f"lane index {index} out of range 0..{self.LANES}")
        lanes = self._lanes.copy()
        lanes[index] = _to_f32([val])[0]
        return F32x4._wrap(lanes)

    def le(self, other: F32x4) -> M32x4:
        """Lane-wise ``<=``; NaN lanes compare false."""
        self._check(other, "le")
        cond = self._lanes <= other._lanes
        return M32x4([_FULL if c else 0 for c in cond.tolist()])

    def select(self, other: F32x4, mask: M32x4) -> F32x4:
        """Take lanes from ``self`` where the mask is set, else from ``other``."""
        self._check(other, "select")
        chosen = _mask_lanes(mask, M32x4, self.LANES)
        return F32x4._wrap(np.where(chosen, self._lanes, other._lanes))

    def clamp(self, low: F32x4, high: F32x4) -> F32x4:
        """Clamp each lane into ``low..=high``; NaN lanes stay NaN."""
        return self._clamped(low, high)

    def sqrt(self) -> F32x4:
        with np.errstate(invalid="ignore"):
            return F32x4._wrap(np.sqrt(self._lanes))

    def mul_add(self, a: F32x4, b: F32x4) -> F32x4:
        """Return ``self * a + b`` with a single rounding."""
        return self._fused(a, b)

    def __add__(self, other: F32x4) -> F32x4:
        return self._binary(other, np.add)

    def __mul__(self, other: F32x4) -> F32x4:
        return self._binary(other, np.multiply)


class F32x8(_FloatLanes):
    """Eight single-precision floats."""

    __slots__ = ()
    LANES = 8

    @classmethod
    def splat(cls, val: float) -> F32x8:
        return cls([val] * cls.LANES)

    @classmethod
    def indexed(cls) -> F32x8:
        """Return ``[0.0, 1.0, ..., 7.0]``."""
        return cls(range(cls.LANES))

    @classmethod
    def from_array(cls, vals: Iterable[float]) -> F32x8:
        return cls(vals)

    @classmethod
    def from_bits(cls, val: U32x8) -> F32x8:
        """Reinterpret the bits of each word lane as a float."""
        if not isinstance(val, U32x8):
            raise TypeError("from_bits takes a U32x8")
        return cls._from_bit_list(val.to_array())

    def to_bits(self) -> U32x8:
        """Reinterpret each lane's bits as an unsigned word."""
        return U32x8.from_array(self._bits())

    def to_array(self) -> list[float]:
        """Return the lanes as Python floats."""
        return self._lanes.tolist()

    @classmethod
    def from_i32x8(cls, val: I32x8) -> F32x8:
        """Convert each signed word to the nearest float."""
        if not isinstance(val, I32x8):
            raise TypeError("from_i32x8 takes an I32x8")
        return cls._wrap(np.array(val.to_array(), dtype=np.int32).astype(np.float32))

    def to_u32x8(self) -> U32x8:
        """Truncate each lane towards zero, saturating into the word range.

        Negative lanes and NaN become 0.
        """
        wide = np.trunc(self._lanes.astype(np.float64))
        wide = np.nan_to_num(wide, nan=0.0, posinf=_U32_LIMIT, neginf=0.0)
        wide = np.clip(wide, 0.0, _U32_LIMIT)
        return U32x8.from_array(wide.astype(np.uint64).tolist())

    def _mask(self, cond: np.ndarray) -> M32x8:
        return M32x8([_FULL if c else 0 for c in cond.tolist()])

    def eq(self, other: F32x8) -> M32x8:
        """Lane-wise ``==``; NaN lanes compare false."""
        self._check(other, "eq")
        return self._mask(self._lanes == other._lanes)

    def lt(self, other: F32x8) -> M32x8:
        """Lane-wise ``<``; NaN lanes compare false."""
        self._check(other, "lt")
        return self._mask(self._lanes < other._lanes)

    def le(self, other: F32x8) -> M32x8:
        """Lane-wise ``<=``; NaN lanes compare false."""
        self._check(other, "le")
        return self._mask(self._lanes <= other._lanes)

    def select(self, other: F32x8, mask: M32x8) -> F32x8:
        """Take lanes from ``self`` where the mask is set, else from ``other``."""
        self._check(other, "select")
        chosen = _mask_lanes(mask, M32x8, self.LANES)
        return F32x8._wrap(np.where(chosen, self._lanes, other._lanes))

    def abs(self) -> F32x8:
        return F32x8._wrap(np.abs(self._lanes))

    def min(self, other: F32x8) -> F32x8:
        """Lane-wise minimum; a NaN lane yields the other operand."""
        self._check(other, "min")
        return F32x8._wrap(np.fmin(self._lanes, other._lanes))

    def max(self, other: F32x8) -> F32x8:
        """Lane-wise maximum; a NaN lane yields the other operand."""
        self._check(other, "max")
        return F32x8._wrap(np.fmax(self._lanes, other._lanes))

    def clamp(self, low: F32x8, high: F32x8) -> F32x8:
        """Clamp each lane into ``low..=high``; NaN lanes stay NaN."""
        return self._clamped(low, high)

    def sqrt(self) -> F32x8:
        with np.errstate(invalid="ignore"):
            return F32x8._wrap(np.sqrt(self._lanes))

    def recip(self) -> F32x8:
        """Return ``1 / x`` for every lane."""
        with np.errstate(divide="ignore"):
            return F32x8._wrap(np.float32(1.0) / self._lanes)

    def mul_add(self, a: F32x8, b: F32x8) -> F32x8:
        """Return ``self * a + b`` with a single rounding."""
        return self._fused(a, b)

    def __add__(self, other: F32x8) -> F32x8:
        return self._binary(other, np.add)

    def __sub__(self, other: F32x8) -> F32x8:
        return self._binary(other, np.subtract)

    def __mul__(self, other: F32x8) -> F32x8:
        return self._binary(other, np.multiply)

    def __truediv__(self, other: F32x8) -> F32x8:
        return self._binary(other, np.divide)

    def __neg__(self) -> F32x8:
        return F32x8._wrap(np.negative(self._lanes))

    def __or__(self, other: F32x8) -> F32x8:
        """Bitwise OR of the lanes' bit patterns."""
        if type(other) is not type(self):
            return NotImplemented
        bits = self._lanes.view(np.uint32) | other._lanes.view(np.uint32)
        return F32x8._wrap(bits.view(np.float32))