"""
Common data types for ANOVA.

Frozen parameter payloads that go inside Result[P] envelopes.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnovaTableRow:
    """One row of an ANOVA table (the group term or residuals)."""
    term: str
    df: int
    sum_sq: float
    mean_sq: float
    f_value: float | None    # None for Residuals row
    p_value: float | None    # None for Residuals row


@dataclass(frozen=True)
class AnovaParams:
    """Parameter payload for one-way ANOVA."""
    table: tuple[AnovaTableRow, ...]
    n_obs: int
    n_groups: int
    grand_mean: float
    group_means: dict[str, float]       # level -> mean, first-seen order
    group_sizes: dict[str, int]
    residual_df: int
    residual_ss: float
    residual_ms: float
    eta_squared: float
