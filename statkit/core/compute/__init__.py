"""
Shared compute infrastructure: timing and numerical tolerances.
"""

from statkit.core.compute.timing import Timer, timed
from statkit.core.compute.tolerances import (
    ToleranceTier,
    EXACT,
    SERIES,
    QUADRATURE,
    RATIONAL,
    TABLE,
    EPSILON,
    SERIES_TOLERANCE,
    ROOT_TOLERANCE,
    ROOT_MAX_ITERATIONS,
    SIMPSON_TOLERANCE,
    SIMPSON_MAX_DEPTH,
    BETA_MAX_DEPTH,
    FLOYD_RIVEST_CUTOFF,
)

__all__ = [
    "Timer",
    "timed",
    "ToleranceTier",
    "EXACT",
    "SERIES",
    "QUADRATURE",
    "RATIONAL",
    "TABLE",
    "EPSILON",
    "SERIES_TOLERANCE",
    "ROOT_TOLERANCE",
    "ROOT_MAX_ITERATIONS",
    "SIMPSON_TOLERANCE",
    "SIMPSON_MAX_DEPTH",
    "BETA_MAX_DEPTH",
    "FLOYD_RIVEST_CUTOFF",
]
