"""
Core infrastructure for statkit.

Shared abstractions used by every computational subpackage.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    random: Injectable random sources
    compute: Timing and numerical tolerances
"""

from statkit.core.protocols import Backend
from statkit.core.result import Result
from statkit.core.random import RandomSource, as_uniform, seed_global
from statkit.core.exceptions import (
    StatKitError,
    ValidationError,
    DimensionError,
    InsufficientDataError,
    NumericalError,
    EmptyClusterError,
    TableLookupError,
    ConvergenceError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Randomness
    "RandomSource",
    "as_uniform",
    "seed_global",
    # Exceptions
    "StatKitError",
    "ValidationError",
    "DimensionError",
    "InsufficientDataError",
    "NumericalError",
    "EmptyClusterError",
    "TableLookupError",
    "ConvergenceError",
]
