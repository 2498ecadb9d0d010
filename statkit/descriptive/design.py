"""
DescriptiveDesign: data wrapper for describe().

Wraps one Sample and provides validation and metadata for the
descriptive statistics pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from statkit.core.validation import check_finite, check_sample


@dataclass(frozen=True)
class DescriptiveDesign:
    """
    Design for descriptive statistics.

    Holds a finite, non-empty 1D sample. Immutable after construction.

    Construction:
        DescriptiveDesign.from_array(data, name='x')
    """
    _data: NDArray[np.floating[Any]]
    _name: str

    @classmethod
    def from_array(cls, data: ArrayLike, name: str = 'x') -> DescriptiveDesign:
        """
        Build DescriptiveDesign from array-like data.

        Parameters
        ----------
        data : array-like
            1D sample of real numbers.
        name : str
            Label used in summary output.
        """
        arr = check_sample(data, "describe", min_samples=1)
        check_finite(arr, name)
        arr = arr.copy()
        arr.flags.writeable = False
        return cls(_data=arr, _name=name)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """The sample (read-only)."""
        return self._data

    @property
    def n(self) -> int:
        return len(self._data)

    @property
    def name(self) -> str:
        return self._name
