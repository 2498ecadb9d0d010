"""
statkit: descriptive statistics, distributions and classical tests on numpy.

Submodules:
    numeric: summation, selection, sampling, root finding
    special: gamma, beta, error functions
    distributions: normal, t, F, Kolmogorov, discrete mass arrays, tables
    descriptive: moments, quantiles, modes, describe()
    hypothesis: t, correlation, KS, Wilcoxon, permutation, chi-squared,
        Shapiro-Wilk, confidence bounds, power
    anova: one-way analysis of variance
    regression: simple linear regression
    cluster: ckmeans, Jenks breaks, k-means, silhouette
    density: kernel density estimation
    classifiers: naive Bayes scoring, perceptron
"""

__version__ = "0.1.0"

from statkit import core
from statkit import numeric
from statkit import special
from statkit import distributions
from statkit import descriptive
from statkit import hypothesis
from statkit import anova
from statkit import regression
from statkit import cluster
from statkit import density
from statkit import classifiers

__all__ = [
    "__version__",
    "core",
    "numeric",
    "special",
    "distributions",
    "descriptive",
    "hypothesis",
    "anova",
    "regression",
    "cluster",
    "density",
    "classifiers",
]
