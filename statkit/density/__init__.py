"""
Density estimation.

    kernel_density_estimation(x, kernel='gaussian', bandwidth='nrd')
        -> KernelDensityEstimate (callable)
    KERNELS, BANDWIDTH_METHODS - name registries
"""

from statkit.density.kde import (
    KERNELS,
    BANDWIDTH_METHODS,
    KernelDensityEstimate,
    kernel_density_estimation,
)

kde = kernel_density_estimation

__all__ = [
    "kernel_density_estimation",
    "kde",
    "KernelDensityEstimate",
    "KERNELS",
    "BANDWIDTH_METHODS",
]
