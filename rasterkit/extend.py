"""Extend several lists at once from an iterable of tuples."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class ExtendTuple:
    """Splits each incoming tuple across a fixed set of target lists."""

    arity: int | None = None

    def __init__(self, *args: list) -> None:
        if not args:
            raise ValueError("at least one target list is required")
        if self.arity is not None and len(args) != self.arity:
            raise ValueError(f"expected {self.arity} target lists, got {len(args)}")
        self._targets = args

    def par_extend(self, items: Iterable[tuple[Any, ...]]) -> None:
        """Append field ``i`` of every item to target list ``i``.

        The targets are left unchanged if any item has the wrong length.
        """
        width = len(self._targets)
        columns: tuple[list, ...] = tuple([] for _ in self._targets)
        for item in items:
            item = tuple(item)
            if len(item) != width:
                raise ValueError(f"expected items of length {width}, got {len(item)}")
            for column, value in zip(columns, item):
                column.append(value)
        for target, column in zip(self._targets, columns):
            target.extend(column)


class ExtendTuple3(ExtendTuple):
    """Extends exactly three lists."""

    arity = 3


class ExtendTuple10(ExtendTuple):
    """Extends exactly ten lists."""

    arity = 10


class ExtendVec:
    """Extends a single list."""

    def __init__(self, target: list) -> None:
        self._target = target

    def par_extend(self, items: Iterable[Any]) -> None:
        """Append every item to the target list."""
        self._target.extend(items)