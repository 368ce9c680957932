"""Iterate over (group, local index) pairs described by inclusive prefix sums."""

from __future__ import annotations

import bisect
from collections.abc import Iterator, Sequence

_MIN_SPLIT = 1024


class PrefixScanIter:
    """Double-ended iterator over ``(group, local_index)`` pairs.

    ``sums`` holds the inclusive prefix sums of group sizes. Group ``g``
    covers the global indices ``sums[g - 1] .. sums[g]`` (with an implicit
    leading zero), and every global index is yielded as its group together
    with its offset inside that group. Empty groups are skipped.
    """

    __slots__ = ("_sums", "_group_start", "_group_end", "_start", "_end")

    def __init__(self, sums: Sequence[int]) -> None:
        self._sums = tuple(sums)
        self._group_start = 0
        self._group_end = max(len(self._sums) - 1, 0)
        self._start = 0
        self._end = self._sums[-1] if self._sums else 0

    @classmethod
    def _from_parts(
        cls,
        sums: tuple[int, ...],
        group_start: int,
        group_end: int,
        start: int,
        end: int,
    ) -> PrefixScanIter:
        it = cls.__new__(cls)
        it._sums = sums
        it._group_start = group_start
        it._group_end = group_end
        it._start = start
        it._end = end
        return it

    def _exclusive(self, group: int) -> int:
        return self._sums[group - 1] if group > 0 else 0

    def __iter__(self) -> PrefixScanIter:
        return self

    def __next__(self) -> tuple[int, int]:
        while True:
            if self._start >= self._end:
                raise StopIteration
            exclusive_sum = self._exclusive(self._group_start)
            inclusive_sum = self._sums[self._group_start]
            if exclusive_sum == inclusive_sum:
                self._group_start += 1
                continue
            result = (self._group_start, self._start - exclusive_sum)
            self._start += 1
            if self._start == inclusive_sum:
                self._group_start += 1
            return result

    def next_back(self) -> tuple[int, int] | None:
        """Take the last remaining pair, or return None when exhausted."""
        while True:
            if self._start >= self._end:
                return None
            exclusive_sum = self._exclusive(self._group_end)
            inclusive_sum = self._sums[self._group_end]
            if exclusive_sum == inclusive_sum:
                self._group_end = max(self._group_end - 1, 0)
                continue
            result = (self._group_end, self._end - 1 - exclusive_sum)
            self._end -= 1
            if self._end == exclusive_sum:
                self._group_end = max(self._group_end - 1, 0)
            return result

    def __reversed__(self) -> Iterator[tuple[int, int]]:
        while (item := self.next_back()) is not None:
            yield item

    def __len__(self) -> int:
        return max(self._end - self._start, 0)

    def split_at(self, index: int) -> tuple[PrefixScanIter, PrefixScanIter]:
        """Split into the first ``index`` remaining pairs and the rest."""
        if not 0 <= index <= len(self):
            raise IndexError(f"split index {index} out of range 0..={len(self)}")
        mid = self._start + index
        last = max(len(self._sums) - 1, 0)
        left_group_end = min(bisect.bisect_right(self._sums, mid - 1), last)
        right_group_start = bisect.bisect_right(self._sums, mid)
        left = PrefixScanIter._from_parts(
            self._sums,
            self._group_start,
            max(left_group_end, self._group_start),
            self._start,
            mid,
        )
        right = PrefixScanIter._from_parts(
            self._sums,
            max(right_group_start, self._group_start),
            self._group_end,
            mid,
            self._end,
        )
        return left, right

    def into_par_iter(self) -> PrefixScanParIter:
        """Wrap this iterator for split-and-collect evaluation."""
        return PrefixScanParIter(self)

    def __repr__(self) -> str:
        return (
            f"PrefixScanIter(groups={self._group_start}..={self._group_end}, "
            f"range={self._start}..{self._end})"
        )


class PrefixScanParIter:
    """An indexed view over a ``PrefixScanIter`` that is evaluated in chunks."""

    __slots__ = ("_inner",)

    def __init__(self, inner: PrefixScanIter) -> None:
        self._inner = inner

    def __len__(self) -> int:
        return len(self._inner)

    def collect(self) -> list[tuple[int, int]]:
        """Return every pair in order, splitting the work into chunks."""
        result: list[tuple[int, int]] = []
        pending = [self._inner]
        while pending:
            it = pending.pop()
            if len(it) > _MIN_SPLIT:
                left, right = it.split_at(len(it) // 2)
                pending.append(right)
                pending.append(left)
            else:
                result.extend(it)
        return result