"""
Injectable random sources.

Randomised procedures (shuffling, sampling, the permutation test, k-means
initialisation) draw uniform variates in [0, 1) through a zero-argument
callable. ``as_uniform`` builds that callable from whatever the caller
passed:

    None        -> the process-global generator
    int         -> a fresh ``numpy.random.default_rng(seed)``
    Generator   -> ``generator.random``
    callable    -> used as is (must return floats in [0, 1))
"""

from __future__ import annotations

from typing import Callable, Union

import numpy as np

from statkit.core.exceptions import ValidationError

RandomSource = Union[int, np.random.Generator, Callable[[], float], None]

_GLOBAL_RNG = np.random.default_rng()


def as_uniform(random_source: RandomSource = None) -> Callable[[], float]:
    """
    Normalise a random source to a callable returning floats in [0, 1).

    Raises:
        ValidationError: If the source is none of the accepted kinds
    """
    if random_source is None:
        return lambda: float(_GLOBAL_RNG.random())
    if isinstance(random_source, np.random.Generator):
        return lambda: float(random_source.random())
    if isinstance(random_source, (int, np.integer)) and not isinstance(random_source, bool):
        rng = np.random.default_rng(int(random_source))
        return lambda: float(rng.random())
    if callable(random_source):
        return random_source
    raise ValidationError(
        "random_source must be None, an int seed, a numpy Generator or a "
        f"zero-argument callable, got {type(random_source).__name__}"
    )


def seed_global(seed: int) -> None:
    """Re-seed the process-global generator used when no source is given."""
    global _GLOBAL_RNG
    _GLOBAL_RNG = np.random.default_rng(seed)
