"""
Exception hierarchy for statkit.

All exceptions inherit from StatKitError so callers can catch any
library-specific error. Two families matter most:

    - ValidationError: the caller broke an input contract (sample too
      small, mismatched lengths, probability out of range, unknown
      enumerant). Always raised before any computation starts.
    - NumericalError / ConvergenceError: the input was acceptable but the
      computation hit an invariant it cannot satisfy (a k-means cluster
      lost all its points, a critical value is not tabulated, an
      iteration cap was reached).

Numerically undefined results that propagate through arithmetic (a
non-numeric element passed to a sum, gamma at a non-positive integer) are
returned as NaN and never raise.
"""


_COUNT_WORDS = {1: "one", 2: "two", 3: "three", 4: "four"}


class StatKitError(Exception):
    """Base exception for all statkit errors."""
    pass


class ValidationError(StatKitError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when paired arrays have different lengths.
    """
    pass


class InsufficientDataError(ValidationError):
    """
    Sample is shorter than the operation requires.

    Attributes:
        operation: Name of the statistic or procedure
        required: Minimum number of data points
        actual: Number of data points supplied
    """

    def __init__(self, operation: str, required: int, actual: int):
        word = _COUNT_WORDS.get(required, str(required))
        noun = "data point" if required == 1 else "data points"
        super().__init__(
            f"{operation} requires at least {word} {noun}, got {actual}"
        )
        self.operation = operation
        self.required = required
        self.actual = actual


class NumericalError(StatKitError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class EmptyClusterError(NumericalError):
    """
    A cluster ended an iteration with no assigned points.

    Attributes:
        cluster: Index of the starved centroid
    """

    def __init__(self, message: str, cluster: int):
        super().__init__(message)
        self.cluster = cluster


class TableLookupError(NumericalError):
    """
    A tabulated value is not available for the requested arguments.

    Attributes:
        degrees_of_freedom: Requested degrees of freedom
        significance: Requested significance level
    """

    def __init__(
        self,
        message: str,
        degrees_of_freedom: int | None = None,
        significance: float | None = None,
    ):
        super().__init__(message)
        self.degrees_of_freedom = degrees_of_freedom
        self.significance = significance


class ConvergenceError(StatKitError):
    """
    Iterative algorithm failed to converge.

    Raised when an iterative method (bisection, secant, Lloyd's k-means)
    fails to meet its stopping criterion within the maximum number of
    iterations.

    Attributes:
        iterations: Number of iterations completed
        final_change: Final parameter or objective change
        reason: Why convergence failed (e.g., 'max_iterations', 'flat')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
