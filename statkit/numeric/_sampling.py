"""
Shuffling, sampling, chunking and small combinatorics.

Every randomised routine takes a ``random_source`` (see
statkit.core.random) and draws from it one uniform variate at a time, so a
caller-supplied callable reproduces the exact same sequence of swaps.
"""

from __future__ import annotations

import itertools
import math
from typing import Any, MutableSequence, Sequence, TypeVar

import numpy as np

from statkit.core.exceptions import ValidationError
from statkit.core.random import RandomSource, as_uniform
from statkit.core.validation import check_positive_integer

T = TypeVar('T')


def _copy(x: Sequence[T]) -> MutableSequence[T]:
    if isinstance(x, np.ndarray):
        return x.copy()
    return list(x)


def _check_count(n: Any, name: str) -> int:
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 0:
        raise ValidationError(f"{name} must be a non-negative integer, got {n!r}")
    return int(n)


def shuffle_in_place(
    x: MutableSequence[T],
    random_source: RandomSource = None,
) -> MutableSequence[T]:
    """
    Fisher-Yates shuffle of ``x`` in place.

    Returns:
        x itself
    """
    uniform = as_uniform(random_source)
    length = len(x)
    while length > 0:
        index = math.floor(uniform() * length)
        length -= 1
        x[length], x[index] = x[index], x[length]
    return x


def shuffle(x: Sequence[T], random_source: RandomSource = None) -> MutableSequence[T]:
    """Shuffled copy of ``x``; the input is left untouched."""
    return shuffle_in_place(_copy(x), random_source)


def sample(
    x: Sequence[T],
    n: int,
    random_source: RandomSource = None,
) -> MutableSequence[T]:
    """``n`` elements drawn without replacement."""
    n = _check_count(n, "n")
    return shuffle(x, random_source)[:n]


def sample_with_replacement(
    x: Sequence[T],
    n: int,
    random_source: RandomSource = None,
) -> list[T]:
    """``n`` elements drawn with replacement. Empty input gives []."""
    n = _check_count(n, "n")
    if len(x) == 0:
        return []
    uniform = as_uniform(random_source)
    return [x[math.floor(uniform() * len(x))] for _ in range(n)]


def chunk(x: Sequence[T], size: int) -> list[Sequence[T]]:
    """
    Split ``x`` into consecutive pieces of ``size`` elements.

    The last piece holds the remainder.

    Raises:
        ValidationError: If size is not a positive integer
    """
    size = check_positive_integer(size, "chunk size")
    return [x[start:start + size] for start in range(0, len(x), size)]


def permutations_heap(elements: Sequence[T]) -> list[list[T]]:
    """All permutations of ``elements`` in Heap's-algorithm order."""
    work = list(elements)
    indexes = [0] * len(work)
    permutations = [list(work)]

    i = 0
    while i < len(work):
        if indexes[i] < i:
            swap_from = indexes[i] if i % 2 != 0 else 0
            work[swap_from], work[i] = work[i], work[swap_from]
            permutations.append(list(work))
            indexes[i] += 1
            i = 0
        else:
            indexes[i] = 0
            i += 1

    return permutations


def combinations(x: Sequence[T], k: int) -> list[list[T]]:
    """All k-element subsets of ``x``, preserving input order."""
    k = check_positive_integer(k, "k")
    return [list(c) for c in itertools.combinations(x, k)]


def combinations_replacement(x: Sequence[T], k: int) -> list[list[T]]:
    """All k-element multisets drawn from ``x``."""
    k = check_positive_integer(k, "k")
    return [list(c) for c in itertools.combinations_with_replacement(x, k)]
