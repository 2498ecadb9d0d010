"""
Categorical grouping of observations.

A Factor maps each observation to a level. Levels are numbered in the
order they are first seen, so ``Factor(['b', 'a', 'b'])`` has levels
``('b', 'a')`` and codes ``(0, 1, 0)``.
"""

from __future__ import annotations

from typing import Any, Hashable, Iterable

import numpy as np
from numpy.typing import NDArray

from statkit.core.exceptions import ValidationError


class Factor:
    """
    Group labels for a Sample of the same length.

    Args:
        labels: Iterable of hashable labels (strings, ints, ...)

    Examples:
        >>> f = Factor(['a', 'b', 'a', 'c'])
        >>> f.levels
        ('a', 'b', 'c')
        >>> f.group(0).tolist()
        [0, 2]
    """

    def __init__(self, labels: Iterable[Hashable]):
        if isinstance(labels, np.ndarray):
            if labels.ndim != 1:
                raise ValidationError(f"labels: expected 1D, got {labels.ndim}D")
            labels = labels.tolist()
        index: dict[Hashable, int] = {}
        codes = []
        for label in labels:
            try:
                code = index.setdefault(label, len(index))
            except TypeError as e:
                raise ValidationError(f"labels: unhashable label {label!r}") from e
            codes.append(code)
        self._levels = tuple(index)
        self._codes = np.asarray(codes, dtype=np.intp)
        self._codes.setflags(write=False)

    @property
    def levels(self) -> tuple[Any, ...]:
        """Distinct labels in first-seen order."""
        return self._levels

    @property
    def codes(self) -> NDArray[np.intp]:
        """Level index of each observation."""
        return self._codes

    @property
    def n_groups(self) -> int:
        return len(self._levels)

    def group(self, g: int) -> NDArray[np.intp]:
        """Indices of the observations belonging to level number ``g``."""
        if not 0 <= g < len(self._levels):
            raise ValidationError(
                f"group index must be in [0, {len(self._levels) - 1}], got {g}"
            )
        return np.flatnonzero(self._codes == g)

    def __len__(self) -> int:
        return len(self._codes)

    def __repr__(self) -> str:
        return f"Factor(n={len(self)}, levels={list(self._levels)!r})"
