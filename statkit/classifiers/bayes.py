"""
Naive Bayes-style classifier over categorical features.

Training counts, per category, how often each feature took each value.
Scoring adds up, per category, the relative frequency of the item's
feature values. The score is an additive frequency heuristic, not a
normalised posterior probability.
"""

from __future__ import annotations

import threading
from collections import defaultdict
from typing import Hashable, Mapping


class BayesianClassifier:
    """
    Incrementally trained frequency classifier.

    Training is serialised by an internal lock, so one instance may be
    shared between threads.

    Examples:
        >>> bayes = BayesianClassifier()
        >>> bayes.train({'species': 'cat'}, 'animal')
        >>> bayes.score({'species': 'cat'})
        {'animal': 1.0}
    """

    def __init__(self) -> None:
        self._total_count = 0
        # category -> feature -> value -> count
        self._data: dict[Hashable, dict[Hashable, dict[Hashable, int]]] = {}
        self._lock = threading.Lock()

    @property
    def total_count(self) -> int:
        """Number of items trained so far."""
        return self._total_count

    @property
    def categories(self) -> tuple[Hashable, ...]:
        """Categories seen in training, in first-seen order."""
        with self._lock:
            return tuple(self._data)

    def train(self, item: Mapping[Hashable, Hashable], category: Hashable) -> None:
        """Record one item's feature values under ``category``."""
        with self._lock:
            features = self._data.setdefault(category, {})
            for key, value in item.items():
                counts = features.setdefault(key, defaultdict(int))
                counts[value] += 1
            self._total_count += 1

    def score(self, item: Mapping[Hashable, Hashable]) -> dict[Hashable, float]:
        """
        Score ``item`` against every trained category.

        For each category, sums count(category, feature, value) / total_count
        over the item's features. Features never seen for a category add 0.
        """
        with self._lock:
            total = self._total_count
            sums: dict[Hashable, float] = {}
            for category, features in self._data.items():
                score = 0.0
                for key, value in item.items():
                    counts = features.get(key)
                    if counts is not None:
                        score += counts.get(value, 0) / total
                sums[category] = score
            return sums

    def __repr__(self) -> str:
        return (
            f"BayesianClassifier(total_count={self._total_count}, "
            f"categories={len(self._data)})"
        )
