"""Building blocks for vector-graphics rasterizers: bits, orders, bit sets, prefix scans and lane vectors."""

__version__ = "0.1.0"

__all__ = [
    "bits",
    "extend",
    "order",
    "prefix_scan",
    "simd_float",
    "simd_int",
    "small_bit_set",
]