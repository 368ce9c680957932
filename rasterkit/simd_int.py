"""Fixed-width integer and mask lane vectors with wrapping arithmetic."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator

import numpy as np


class _Lanes:
    """A fixed number of integer lanes of one machine type."""

    __slots__ = ("_lanes",)

    LANES: int = 0
    _DTYPE: type = np.uint32

    def __init__(self, values: Iterable[int] | None = None) -> None:
        if values is None:
            arr = np.zeros(self.LANES, dtype=self._DTYPE)
        else:
            items = [operator.index(v) for v in values]
            if len(items) != self.LANES:
                raise ValueError(
                    f"{type(self).__name__} takes {self.LANES} lanes, got {len(items)}"
                )
            info = np.iinfo(self._DTYPE)
            for item in items:
                if not info.min <= item <= info.max:
                    raise ValueError(
                        f"lane value {item} out of range {info.min}..={info.max}"
                    )
            arr = np.array(items, dtype=self._DTYPE)
        arr.setflags(write=False)
        self._lanes = arr

    @classmethod
    def _wrap(cls, arr: np.ndarray):
        obj = cls.__new__(cls)
        lanes = np.asarray(arr).astype(cls._DTYPE, copy=True)
        lanes.setflags(write=False)
        obj._lanes = lanes
        return obj

    @classmethod
    def _filled(cls, val: int):
        return cls([val] * cls.LANES)

    @classmethod
    def _mask_from(cls, cond: np.ndarray):
        return cls._wrap(np.where(cond, np.iinfo(cls._DTYPE).max, 0))

    def _same(self, other) -> bool:
        return type(other) is type(self)

    def __iter__(self) -> Iterator[int]:
        return iter(self._lanes.tolist())

    def __len__(self) -> int:
        return self.LANES

    def __eq__(self, other: object) -> bool:
        if not self._same(other):
            return NotImplemented
        return bool(np.array_equal(self._lanes, other._lanes))

    def __hash__(self) -> int:
        return hash((type(self).__name__, tuple(self._lanes.tolist())))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._lanes.tolist()})"


class M8x16(_Lanes):
    """Sixteen byte-wide lane masks."""

    __slots__ = ()
    LANES = 16
    _DTYPE = np.uint8

    def all(self) -> bool:
        """Return whether every lane is fully set."""
        return bool(np.all(self._lanes == 0xFF))


class M32x4(_Lanes):
    """Four word-wide lane masks."""

    __slots__ = ()
    LANES = 4
    _DTYPE = np.uint32


class M32x8(_Lanes):
    """Eight word-wide lane masks."""

    __slots__ = ()
    LANES = 8
    _DTYPE = np.uint32

    def all(self) -> bool:
        """Return whether every lane is fully set."""
        return bool(np.all(self._lanes == 0xFFFF_FFFF))

    def any(self) -> bool:
        """Return whether at least one lane is fully set."""
        return bool(np.any(self._lanes == 0xFFFF_FFFF))

    def __invert__(self) -> M32x8:
        return M32x8._wrap(~self._lanes)

    def __or__(self, other: M32x8) -> M32x8:
        if not self._same(other):
            return NotImplemented
        return M32x8._wrap(self._lanes | other._lanes)

    def __xor__(self, other: M32x8) -> M32x8:
        if not self._same(other):
            return NotImplemented
        return M32x8._wrap(self._lanes ^ other._lanes)


class U8x32(_Lanes):
    """Thirty-two unsigned bytes."""

    __slots__ = ()
    LANES = 32
    _DTYPE = np.uint8

    @classmethod
    def splat(cls, val: int) -> U8x32:
        return cls._filled(val)

    @classmethod
    def from_u32_interleaved(cls, vals: Iterable[U32x8]) -> U8x32:
        """Interleave the low bytes of four word vectors, lane by lane.

        Byte ``4 * i + k`` of the result is the low byte of lane ``i`` of
        ``vals[k]``.
        """
        vectors = list(vals)
        if len(vectors) != 4 or not all(isinstance(v, U32x8) for v in vectors):
            raise ValueError("from_u32_interleaved takes exactly four U32x8 vectors")
        stacked = np.stack([v._lanes for v in vectors], axis=1).reshape(cls.LANES)
        return cls._wrap(stacked & 0xFF)

    def to_array(self) -> list[int]:
        return self._lanes.tolist()


class I8x16(_Lanes):
    """Sixteen signed bytes with wrapping arithmetic."""

    __slots__ = ()
    LANES = 16
    _DTYPE = np.int8

    @classmethod
    def splat(cls, val: int) -> I8x16:
        return cls._filled(val)

    @classmethod
    def from_array(cls, vals: Iterable[int]) -> I8x16:
        return cls(vals)

    def to_array(self) -> list[int]:
        return self._lanes.tolist()

    def eq(self, other: I8x16) -> M8x16:
        """Compare lane by lane."""
        if not self._same(other):
            raise TypeError("eq takes another I8x16")
        return M8x16._mask_from(self._lanes == other._lanes)

    def abs(self) -> I8x16:
        """Absolute value of each lane; -128 stays -128."""
        return I8x16._wrap(np.abs(self._lanes))

    def __add__(self, other: I8x16) -> I8x16:
        if not self._same(other):
            return NotImplemented
        return I8x16._wrap(self._lanes + other._lanes)

    def __and__(self, other: I8x16) -> I8x16:
        if not self._same(other):
            return NotImplemented
        return I8x16._wrap(self._lanes & other._lanes)

    def to_i32x8(self) -> tuple[I32x8, I32x8]:
        """Sign-extend into two word vectors: lanes 0..8 and 8..16."""
        wide = self._lanes.astype(np.int32)
        return I32x8._wrap(wide[:8]), I32x8._wrap(wide[8:])


class I16x16(_Lanes):
    """Sixteen signed half-words."""

    __slots__ = ()
    LANES = 16
    _DTYPE = np.int16

    @classmethod
    def splat(cls, val: int) -> I16x16:
        return cls._filled(val)

    def to_i32x8(self) -> tuple[I32x8, I32x8]:
        """Sign-extend into two word vectors: lanes 0..8 and 8..16."""
        wide = self._lanes.astype(np.int32)
        return I32x8._wrap(wide[:8]), I32x8._wrap(wide[8:])


class I32x8(_Lanes):
    """Eight signed words with wrapping arithmetic."""

    __slots__ = ()
    LANES = 8
    _DTYPE = np.int32

    @classmethod
    def splat(cls, val: int) -> I32x8:
        return cls._filled(val)

    @classmethod
    def from_array(cls, vals: Iterable[int]) -> I32x8:
        return cls(vals)

    def to_array(self) -> list[int]:
        return self._lanes.tolist()

    def eq(self, other: I32x8) -> M32x8:
        """Compare lane by lane."""
        if not self._same(other):
            raise TypeError("eq takes another I32x8")
        return M32x8._mask_from(self._lanes == other._lanes)

    def shr(self, n: int) -> I32x8:
        """Arithmetic right shift of every lane by ``n`` bits."""
        n = operator.index(n)
        if not 0 <= n < 32:
            raise ValueError(f"shift amount {n} out of range 0..32")
        return I32x8._wrap(self._lanes >> np.int32(n))

    def abs(self) -> I32x8:
        """Absolute value of each lane; the minimum value stays as it is."""
        return I32x8._wrap(np.abs(self._lanes))

    def __add__(self, other: I32x8) -> I32x8:
        if not self._same(other):
            return NotImplemented
        return I32x8._wrap(self._lanes + other._lanes)

    def __sub__(self, other: I32x8) -> I32x8:
        if not self._same(other):
            return NotImplemented
        return I32x8._wrap(self._lanes - other._lanes)

    def __mul__(self, other: I32x8) -> I32x8:
        if not self._same(other):
            return NotImplemented
        return I32x8._wrap(self._lanes * other._lanes)

    def __and__(self, other: I32x8) -> I32x8:
        if not self._same(other):
            return NotImplemented
        return I32x8._wrap(self._lanes & other._lanes)


class U32x4(_Lanes):
    """Four unsigned words."""

    __slots__ = ()
    LANES = 4
    _DTYPE = np.uint32

    @classmethod
    def splat(cls, val: int) -> U32x4:
        return cls._filled(val)

    def to_bytes(self) -> bytes:
        """Return the low byte of each lane."""
        return bytes((self._lanes & 0xFF).astype(np.uint8).tolist())


class U32x8(_Lanes):
    """Eight unsigned words with wrapping arithmetic."""

    __slots__ = ()
    LANES = 8
    _DTYPE = np.uint32

    @classmethod
    def splat(cls, val: int) -> U32x8:
        return cls._filled(val)

    @classmethod
    def from_array(cls, vals: Iterable[int]) -> U32x8:
        return cls(vals)

    def to_array(self) -> list[int]:
        return self._lanes.tolist()

    def mul_add(self, a: U32x8, b: U32x8) -> U32x8:
        """Return ``self * a + b`` lane by lane, wrapping on overflow."""
        if not (self._same(a) and self._same(b)):
            raise TypeError("mul_add takes U32x8 operands")
        return U32x8._wrap(self._lanes * a._lanes + b._lanes)