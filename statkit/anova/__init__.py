"""
Analysis of variance.

Public API:
    anova_oneway(y, group) -> AnovaSolution
    Factor(labels)         - group labels with first-seen level order
"""

from statkit.anova.factor import Factor
from statkit.anova.design import AnovaDesign
from statkit.anova.solvers import anova_oneway
from statkit.anova.solution import AnovaSolution
from statkit.anova._common import AnovaParams, AnovaTableRow

__all__ = [
    "anova_oneway",
    "Factor",
    "AnovaDesign",
    "AnovaSolution",
    "AnovaParams",
    "AnovaTableRow",
]
