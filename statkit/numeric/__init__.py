"""
Numeric primitives.

Summation and extrema:
    compensated_sum, naive_sum, product
    sample_min, sample_max, extent, min_sorted, max_sorted, extent_sorted

Selection:
    quickselect, quantile_index, quantile_select, multi_quantile_select,
    numeric_sort

Sampling and combinatorics:
    shuffle_in_place, shuffle, sample, sample_with_replacement, chunk,
    permutations_heap, combinations, combinations_replacement

Root finding, integration and comparison:
    bisect, secant, adaptive_simpson, relative_error, approx_equal
"""

from statkit.numeric._summation import (
    compensated_sum,
    naive_sum,
    product,
    sample_min,
    sample_max,
    extent,
    min_sorted,
    max_sorted,
    extent_sorted,
)
from statkit.numeric._selection import (
    quickselect,
    quantile_index,
    quantile_select,
    multi_quantile_select,
    numeric_sort,
)
from statkit.numeric._sampling import (
    shuffle_in_place,
    shuffle,
    sample,
    sample_with_replacement,
    chunk,
    permutations_heap,
    combinations,
    combinations_replacement,
)
from statkit.numeric._roots import (
    bisect,
    secant,
    adaptive_simpson,
    relative_error,
    approx_equal,
)

__all__ = [
    "compensated_sum",
    "naive_sum",
    "product",
    "sample_min",
    "sample_max",
    "extent",
    "min_sorted",
    "max_sorted",
    "extent_sorted",
    "quickselect",
    "quantile_index",
    "quantile_select",
    "multi_quantile_select",
    "numeric_sort",
    "shuffle_in_place",
    "shuffle",
    "sample",
    "sample_with_replacement",
    "chunk",
    "permutations_heap",
    "combinations",
    "combinations_replacement",
    "bisect",
    "secant",
    "adaptive_simpson",
    "relative_error",
    "approx_equal",
]
