"""
Single-layer perceptron for binary (0 / 1) labels.
"""

from __future__ import annotations

import threading
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from statkit.core.exceptions import DimensionError, ValidationError
from statkit.core.validation import check_array, check_1d, check_finite


class PerceptronModel:
    """
    Online perceptron.

    The weight vector takes the length of the first feature vector it is
    trained on. Training on a vector of a different length starts over:
    the weights become a copy of those features and the bias becomes 1.

    Examples:
        >>> model = PerceptronModel()
        >>> for _ in range(5):
        ...     _ = model.train([1, 1], 1).train([0, 1], 0)
        >>> model.predict([1, 1]), model.predict([0, 1])
        (1, 0)
    """

    def __init__(self) -> None:
        self._weights: NDArray[np.floating[Any]] = np.empty(0)
        self._bias = 0.0
        self._lock = threading.Lock()

    @property
    def weights(self) -> NDArray[np.floating[Any]]:
        """Copy of the current weight vector."""
        return self._weights.copy()

    @property
    def bias(self) -> float:
        return self._bias

    @staticmethod
    def _features(features: ArrayLike) -> NDArray[np.floating[Any]]:
        arr = check_array(features, "features")
        check_1d(arr, "features")
        check_finite(arr, "features")
        return arr

    def _predict(self, features: NDArray[np.floating[Any]]) -> int:
        if len(features) != len(self._weights):
            raise DimensionError(
                f"features: expected length {len(self._weights)}, got {len(features)}"
            )
        score = float(self._weights @ features) + self._bias
        return 1 if score > 0 else 0

    def predict(self, features: ArrayLike) -> int:
        """
        Classify a feature vector as 1 (score > 0) or 0.

        Raises:
            DimensionError: If the model was trained on vectors of another
                length (or not trained at all)
        """
        arr = self._features(features)
        with self._lock:
            return self._predict(arr)

    def train(self, features: ArrayLike, label: int) -> 'PerceptronModel':
        """
        Update the model with one labelled example.

        On a misclassification each weight moves by
        (label - prediction) * feature and the bias by (label - prediction).

        Returns:
            self, so calls can be chained

        Raises:
            ValidationError: If label is not 0 or 1
        """
        if isinstance(label, bool) or label not in (0, 1):
            raise ValidationError(f"label must be 0 or 1, got {label!r}")
        arr = self._features(features)

        with self._lock:
            if len(arr) != len(self._weights):
                self._weights = arr.copy()
                self._bias = 1.0

            prediction = self._predict(arr)
            if prediction != label:
                gradient = label - prediction
                self._weights = self._weights + gradient * arr
                self._bias += gradient
        return self

    def __repr__(self) -> str:
        return f"PerceptronModel(weights={self._weights.tolist()}, bias={self._bias:g})"
