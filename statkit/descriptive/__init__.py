"""
Descriptive statistics.

Central tendency and dispersion:
    mean, variance, standard_deviation, sample_variance,
    sample_standard_deviation, skewness, sample_skewness, kurtosis,
    sample_kurtosis, geometric_mean, log_average, harmonic_mean,
    root_mean_square, coefficient_of_variation, standard_error,
    sum_nth_power_deviations, z_score

Association:
    sample_covariance, sample_correlation, sample_rank_correlation

Order statistics:
    quantile, quantile_sorted, median, median_sorted, interquartile_range,
    median_absolute_deviation, quantile_rank, quantile_rank_sorted, ecdf,
    mode, mode_sorted, mode_fast

Running summaries:
    add_to_mean, subtract_from_mean, combine_means, combine_variances

Summary object:
    describe() -> DescriptiveSolution

Short aliases: average, mad, iqr, rms.
"""

from statkit.descriptive._moments import (
    mean,
    variance,
    standard_deviation,
    sample_variance,
    sample_standard_deviation,
    skewness,
    sample_skewness,
    kurtosis,
    sample_kurtosis,
    sample_covariance,
    sample_correlation,
    sample_rank_correlation,
    geometric_mean,
    log_average,
    harmonic_mean,
    root_mean_square,
    coefficient_of_variation,
    standard_error,
    sum_nth_power_deviations,
    z_score,
    add_to_mean,
    subtract_from_mean,
    combine_means,
    combine_variances,
)
from statkit.descriptive._quantiles import (
    quantile,
    quantile_sorted,
    median,
    median_sorted,
    interquartile_range,
    median_absolute_deviation,
    quantile_rank,
    quantile_rank_sorted,
    ecdf,
    mode,
    mode_sorted,
    mode_fast,
)
from statkit.descriptive.design import DescriptiveDesign
from statkit.descriptive.solution import DescriptiveParams, DescriptiveSolution
from statkit.descriptive.solvers import describe

average = mean
mad = median_absolute_deviation
iqr = interquartile_range
rms = root_mean_square

__all__ = [
    "mean",
    "variance",
    "standard_deviation",
    "sample_variance",
    "sample_standard_deviation",
    "skewness",
    "sample_skewness",
    "kurtosis",
    "sample_kurtosis",
    "sample_covariance",
    "sample_correlation",
    "sample_rank_correlation",
    "geometric_mean",
    "log_average",
    "harmonic_mean",
    "root_mean_square",
    "coefficient_of_variation",
    "standard_error",
    "sum_nth_power_deviations",
    "z_score",
    "add_to_mean",
    "subtract_from_mean",
    "combine_means",
    "combine_variances",
    "quantile",
    "quantile_sorted",
    "median",
    "median_sorted",
    "interquartile_range",
    "median_absolute_deviation",
    "quantile_rank",
    "quantile_rank_sorted",
    "ecdf",
    "mode",
    "mode_sorted",
    "mode_fast",
    "describe",
    "DescriptiveDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
    "average",
    "mad",
    "iqr",
    "rms",
]
