"""
Kernel density estimation.

    f(x) = 1 / (n h) * sum_i K((x - X_i) / h)

The kernel and the bandwidth rule are looked up by name in KERNELS and
BANDWIDTH_METHODS, or supplied directly as callables / a number.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from statkit.core.exceptions import ValidationError
from statkit.core.validation import check_finite, check_sample
from statkit.descriptive import interquartile_range, sample_standard_deviation

Kernel = Callable[[NDArray[np.floating[Any]]], NDArray[np.floating[Any]]]
BandwidthMethod = Callable[[NDArray[np.floating[Any]]], float]

_SQRT_2PI = math.sqrt(2 * math.pi)


def _gaussian(u: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    return np.exp(-0.5 * u * u) / _SQRT_2PI


def _nrd(x: NDArray[np.floating[Any]]) -> float:
    """Normal reference rule: 1.06 * min(s, IQR / 1.34) * n^(-1/5)."""
    s = sample_standard_deviation(x)
    s = min(s, interquartile_range(x) / 1.34)
    return 1.06 * s * len(x) ** -0.2


KERNELS: dict[str, Kernel] = {
    'gaussian': _gaussian,
}

BANDWIDTH_METHODS: dict[str, BandwidthMethod] = {
    'nrd': _nrd,
}


@dataclass(frozen=True)
class KernelDensityEstimate:
    """
    Density estimator returned by kernel_density_estimation().

    Calling it with a scalar gives a float; with an array, an array of the
    same shape.
    """
    data: NDArray[np.floating[Any]]
    kernel: Kernel
    bandwidth: float

    def __call__(self, x: ArrayLike) -> float | NDArray[np.floating[Any]]:
        points = np.asarray(x, dtype=np.float64)
        u = (points[..., np.newaxis] - self.data) / self.bandwidth
        density = np.asarray(self.kernel(u), dtype=np.float64).sum(axis=-1)
        density = density / self.bandwidth / len(self.data)
        if points.ndim == 0:
            return float(density)
        return density


def _resolve_kernel(kernel: str | Kernel) -> Kernel:
    if isinstance(kernel, str):
        try:
            return KERNELS[kernel]
        except KeyError:
            raise ValidationError(
                f"Unknown kernel {kernel!r}; choose from {sorted(KERNELS)} "
                "or pass a function"
            ) from None
    if not callable(kernel):
        raise ValidationError(f"kernel must be a name or a callable, got {kernel!r}")
    return kernel


def _resolve_bandwidth(
    bandwidth: Union[str, float, BandwidthMethod],
    data: NDArray[np.floating[Any]],
) -> float:
    if isinstance(bandwidth, str):
        try:
            method = BANDWIDTH_METHODS[bandwidth]
        except KeyError:
            raise ValidationError(
                f"Unknown bandwidth method {bandwidth!r}; choose from "
                f"{sorted(BANDWIDTH_METHODS)}, a number or a function"
            ) from None
        h = method(data)
    elif callable(bandwidth):
        h = bandwidth(data)
    else:
        h = bandwidth

    if isinstance(h, bool) or not isinstance(h, (int, float, np.number)):
        raise ValidationError(f"bandwidth must be a number, got {h!r}")
    h = float(h)
    if not (h > 0 and math.isfinite(h)):
        raise ValidationError(f"bandwidth must be positive and finite, got {h}")
    return h


def kernel_density_estimation(
    x: ArrayLike,
    kernel: str | Kernel = 'gaussian',
    bandwidth: Union[str, float, BandwidthMethod] = 'nrd',
) -> KernelDensityEstimate:
    """
    Kernel density estimate of a sample.

    Args:
        x: Sample (at least two values when the bandwidth is estimated)
        kernel: 'gaussian' or a function of the scaled distance u that
            accepts numpy arrays
        bandwidth: 'nrd', a positive number, or a function of the sample

    Returns:
        KernelDensityEstimate, callable on scalars or arrays

    Raises:
        ValidationError: For an unknown kernel or bandwidth name, or a
            bandwidth that is not positive

    Examples:
        >>> kde = kernel_density_estimation([1, 2, 3], bandwidth=1.0)
        >>> round(kde(2.0), 4)
        0.2943
    """
    data = check_sample(x, "kernel_density_estimation", min_samples=1)
    check_finite(data, "x")
    data = data.copy()
    data.setflags(write=False)

    kernel_fn = _resolve_kernel(kernel)
    h = _resolve_bandwidth(bandwidth, data)
    return KernelDensityEstimate(data=data, kernel=kernel_fn, bandwidth=h)
