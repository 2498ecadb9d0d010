"""
Incremental classifiers.

    BayesianClassifier - additive frequency scoring over categorical features
    PerceptronModel    - online single-layer perceptron for 0 / 1 labels
"""

from statkit.classifiers.bayes import BayesianClassifier
from statkit.classifiers.perceptron import PerceptronModel

__all__ = [
    "BayesianClassifier",
    "PerceptronModel",
]
