# rasterkit

Small building blocks for a vector-graphics rasterizer, written in plain
Python on top of numpy.

## What is inside

- `rasterkit.bits`: `to_canon_bits(value)` returns the bit pattern of a value
  as a 32-bit float, with one pattern for every NaN and one for both zeros,
  so it can be used for hashing and equality. `div_ceil(value, other)`
  divides two unsigned integers and rounds up; it raises `ValueError` for
  negative input and `ZeroDivisionError` for a zero divisor.
- `rasterkit.order`: `Order` is an immutable layer order from 0 up to
  `LAYER_LIMIT` (2**21 - 1); `Order.MAX` is the largest. `Order(n)` raises
  `OrderError` (a `ValueError`) when `n` is outside that range.
  `Order.as_u32()` and `int(order)` give the value back. Orders are hashable
  and compare in reverse: a higher order sorts before a lower one.
- `rasterkit.small_bit_set`: `SmallBitSet` is a set of the integers 0 to 31
  held in one word. `insert` and `remove` return `False` for values of 32 or
  more; `contains` (and `in`) test membership; `clear` empties the set;
  `first_empty_slot` claims the lowest slot above the run of set low bits and
  returns it, or `None` when the set is full.
- `rasterkit.extend`: `ExtendTuple3`, `ExtendTuple10` (and the general
  `ExtendTuple`) take a stream of tuples and append field `i` of each to
  target list `i`. If any tuple has the wrong length a `ValueError` is raised
  and the targets are left unchanged. `ExtendVec` appends single values to
  one list.
- `rasterkit.prefix_scan`: `PrefixScanIter` walks inclusive prefix sums of
  group sizes and yields `(group, local_index)` pairs, skipping empty groups.
  It can be consumed from the front (`next`), from the back (`next_back`,
  `reversed`) or from both ends, and `len()` gives the pairs left.
  `split_at(index)` divides it into two iterators, and
  `into_par_iter().collect()` returns every pair in order, working through
  the range in chunks.
- `rasterkit.simd_int`: immutable integer lane vectors `I8x16`, `I16x16`,
  `I32x8`, `U32x4`, `U32x8`, `U8x32` and masks `M8x16`, `M32x4`, `M32x8`.
  Arithmetic wraps as 8-, 16- and 32-bit machine integers do.
- `rasterkit.simd_float`: `F32x4` and `F32x8` hold single-precision floats,
  with comparisons returning masks, `select`, `clamp`, `min`/`max`, `sqrt`,
  `recip`, fused `mul_add`, bit casts (`from_bits`, `to_bits`) and
  conversions (`F32x8.from_i32x8`, `F32x8.to_u32x8`, which truncates and
  saturates, with negatives and NaN becoming 0). `U8x8.from_f32x8` rounds
  half away from zero and saturates into 0..255.

## What it does not do

This package holds only these helpers. It has no paths, layers,
compositions, fills or renderer, and it draws nothing. Nothing runs in
parallel: `par_extend` and `into_par_iter().collect()` do their work in the
calling thread.

## Install

    pip install rasterkit

## Examples

```python
from rasterkit.prefix_scan import PrefixScanIter

list(PrefixScanIter([2, 5, 9]))
# [(0, 0), (0, 1), (1, 0), (1, 1), (1, 2), (2, 0), (2, 1), (2, 2), (2, 3)]
```

```python
from rasterkit.extend import ExtendTuple3

xs, ys, zs = [], [], []
ExtendTuple3(xs, ys, zs).par_extend((i, i * 2, i * 3) for i in range(3))
# xs == [0, 1, 2], ys == [0, 2, 4], zs == [0, 3, 6]
```

```python
from rasterkit.order import Order, OrderError

Order(5).as_u32()  # 5
try:
    Order(1 << 32)
except OrderError as err:
    print(err)  # exceeded layer limit (2097151)
```

```python
from rasterkit.simd_float import F32x8

F32x8.indexed().mul_add(F32x8.splat(2.0), F32x8.splat(1.0)).to_array()
# [1.0, 3.0, 5.0, 7.0, 9.0, 11.0, 13.0, 15.0]
```

## Running the tests

    pip install "rasterkit[test]"
    pytest