"""Layer ordering with a fixed upper limit."""

from __future__ import annotations

import functools
import operator

LAYER_LIMIT = (1 << 21) - 1

_U32_MAX = 0xFFFF_FFFF


class OrderError(ValueError):
    """Raised when an order value exceeds the layer limit."""

    def __init__(self) -> None:
        super().__init__(f"exceeded layer limit ({LAYER_LIMIT})")


@functools.total_ordering
class Order:
    """A layer order in the range ``0..=LAYER_LIMIT``.

    The value is stored bit-inverted, so comparison sorts higher orders first.
    """

    __slots__ = ("_inverted",)

    MAX: Order

    def __init__(self, order: int = 0) -> None:
        order = operator.index(order)
        if order < 0 or order > LAYER_LIMIT:
            raise OrderError()
        self._inverted = order ^ _U32_MAX

    def __setattr__(self, name, value):
        if hasattr(self, name):
            raise AttributeError("Order is immutable")
        object.__setattr__(self, name, value)

    def as_u32(self) -> int:
        """Return the order as a plain integer."""
        return self._inverted ^ _U32_MAX

    def __int__(self) -> int:
        return self.as_u32()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self._inverted == other._inverted

    def __lt__(self, other: Order) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self._inverted < other._inverted

    def __hash__(self) -> int:
        return hash(self._inverted)

    def __repr__(self) -> str:
        return f"Order({self.as_u32()})"


Order.MAX = Order(LAYER_LIMIT)