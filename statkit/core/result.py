"""
Generic result container for statkit procedures.

Inferential procedures and model fits wrap their domain-specific payload
in a Result so that timing, backend identity and non-fatal warnings travel
with the numbers.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (test type, merged classes, ...)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so repeated reads are identical
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (statistic, p-value, coefficients)
        info: Structured metadata (test type, method details)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=HTestParams(statistic=2.1, ...),
        ...     info={'test_type': 't_one_sample'},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_hypothesis'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
