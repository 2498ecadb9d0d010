"""
Numerical constants and accuracy tiers.

The constants are the stopping thresholds shared by the numerical
routines. The ToleranceTier objects describe how closely each family of
approximation is expected to match an exact reference; the test suite
compares against scipy using these tiers.
"""

from dataclasses import dataclass


# Default tolerance for approx_equal, the probit clamp and the tail cut-off
# of the discrete probability-mass arrays.
EPSILON = 1e-4

# Stop summing an infinite series once a term falls to this magnitude.
SERIES_TOLERANCE = 1e-12

# Bracket width at which bisection and secant iteration stop.
ROOT_TOLERANCE = 1e-9

# Default iteration cap for bisection / secant.
ROOT_MAX_ITERATIONS = 1000

# Adaptive Simpson: absolute error target and recursion depth.
SIMPSON_TOLERANCE = 1e-12
SIMPSON_MAX_DEPTH = 10

# The incomplete beta integrand can peak sharply for large shape
# parameters, so it is allowed to refine further.
BETA_MAX_DEPTH = 30

# Partitions wider than this are narrowed by Floyd-Rivest sampling before
# quickselect partitions them.
FLOYD_RIVEST_CUTOFF = 600


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Closed-form arithmetic: sums, means, moments, regression coefficients
EXACT = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='exact',
    description='closed-form arithmetic in double precision',
)

# Lanczos log-gamma, Acklam's normal quantile
SERIES = ToleranceTier(
    rtol=1e-8,
    atol=1e-10,
    name='series',
    description='series / rational approximations accurate to ~1e-9',
)

# Adaptive Simpson quadrature behind the incomplete beta function
QUADRATURE = ToleranceTier(
    rtol=1e-6,
    atol=1e-8,
    name='quadrature',
    description='numerical integration with a bounded recursion depth',
)

# Numerical Recipes erf (|error| < 1.2e-7) and everything built on it
RATIONAL = ToleranceTier(
    rtol=1e-6,
    atol=2e-7,
    name='rational',
    description='Chebyshev-fitted error function',
)

# Four-decimal lookup tables, closed-form inverse erf, Nemes-style fits
TABLE = ToleranceTier(
    rtol=1e-3,
    atol=1e-4,
    name='table',
    description='four-significant-digit tables and coarse closed forms',
)
