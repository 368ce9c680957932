"""A set of small integers held in a single 32-bit word."""

from __future__ import annotations

_CAPACITY = 32


def _check_u8(val: int) -> int:
    if not 0 <= val <= 0xFF:
        raise ValueError(f"value {val} does not fit in a byte")
    return val


class SmallBitSet:
    """Set of integers in ``0..32`` stored as bits of one word."""

    __slots__ = ("_bits",)

    def __init__(self) -> None:
        self._bits = 0

    def clear(self) -> None:
        """Remove every element."""
        self._bits = 0

    def contains(self, val: int) -> bool:
        """Return whether ``val`` is in the set."""
        return (self._bits >> _check_u8(val)) & 1 != 0

    def __contains__(self, val: int) -> bool:
        return self.contains(val)

    def insert(self, val: int) -> bool:
        """Add ``val``; return False when it is beyond the capacity."""
        if _check_u8(val) >= _CAPACITY:
            return False
        self._bits |= 1 << val
        return True

    def remove(self, val: int) -> bool:
        """Remove ``val``; return False when it is beyond the capacity."""
        if _check_u8(val) >= _CAPACITY:
            return False
        self._bits &= ~(1 << val)
        return True

    def first_empty_slot(self) -> int | None:
        """Claim the lowest free slot above the run of set low bits.

        Returns the slot, or None when every slot is taken.
        """
        bits = self._bits
        slot = (~bits & (bits + 1)).bit_length() - 1
        return slot if self.insert(slot) else None

    def __repr__(self) -> str:
        members = [i for i in range(_CAPACITY) if self._bits >> i & 1]
        return f"SmallBitSet({members})"