"""
Tests for the incremental Bayes and perceptron classifiers.
"""

import threading

import numpy as np
import pytest

from statkit.core.exceptions import DimensionError, ValidationError
from statkit.classifiers import BayesianClassifier, PerceptronModel


# ═══════════════════════════════════════════════════════════════════════
# BayesianClassifier
# ═══════════════════════════════════════════════════════════════════════


class TestBayesianClassifier:

    def test_single_category(self):
        bayes = BayesianClassifier()
        bayes.train({'species': 'cat'}, 'animal')
        assert bayes.score({'species': 'cat'}) == {'animal': 1.0}

    def test_two_categories(self):
        bayes = BayesianClassifier()
        bayes.train({'species': 'cat'}, 'animal')
        bayes.train({'species': 'chair'}, 'furniture')
        assert bayes.score({'species': 'cat'}) == {'animal': 0.5, 'furniture': 0.0}

    def test_scores_add_over_features(self):
        bayes = BayesianClassifier()
        bayes.train({'a': 1, 'b': 2}, 'x')
        assert bayes.score({'a': 1, 'b': 2}) == {'x': 2.0}

    def test_unseen_feature_adds_nothing(self):
        bayes = BayesianClassifier()
        bayes.train({'colour': 'red'}, 'x')
        bayes.train({'colour': 'blue'}, 'y')
        assert bayes.score({'size': 'big'}) == {'x': 0.0, 'y': 0.0}

    def test_untrained(self):
        bayes = BayesianClassifier()
        assert bayes.score({'a': 1}) == {}
        assert bayes.total_count == 0

    def test_counts_accumulate(self):
        bayes = BayesianClassifier()
        for _ in range(3):
            bayes.train({'f': 'v'}, 'c1')
        bayes.train({'f': 'w'}, 'c2')
        scores = bayes.score({'f': 'v'})
        assert scores['c1'] == pytest.approx(0.75)
        assert scores['c2'] == 0.0

    def test_categories_in_first_seen_order(self):
        bayes = BayesianClassifier()
        bayes.train({'f': 1}, 'b')
        bayes.train({'f': 1}, 'a')
        bayes.train({'f': 1}, 'b')
        assert bayes.categories == ('b', 'a')
        assert bayes.total_count == 3

    def test_concurrent_training(self):
        bayes = BayesianClassifier()

        def worker():
            for _ in range(250):
                bayes.train({'f': 'v'}, 'c')

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert bayes.total_count == 1000
        assert bayes.score({'f': 'v'}) == {'c': 1.0}

    def test_repr(self):
        bayes = BayesianClassifier()
        bayes.train({'f': 1}, 'a')
        assert repr(bayes) == "BayesianClassifier(total_count=1, categories=1)"


# ═══════════════════════════════════════════════════════════════════════
# PerceptronModel
# ═══════════════════════════════════════════════════════════════════════


class TestPerceptronModel:

    def test_learns_simple_rule(self):
        model = PerceptronModel()
        for _ in range(5):
            model.train([1, 1], 1).train([0, 1], 0)
        assert model.predict([1, 1]) == 1
        assert model.predict([0, 1]) == 0

    def test_first_training_sets_weights(self):
        model = PerceptronModel().train([2.0, 3.0], 1)
        np.testing.assert_array_equal(model.weights, [2.0, 3.0])
        assert model.bias == 1.0

    def test_misclassification_update(self):
        model = PerceptronModel().train([1.0, 1.0], 1)
        model.train([0.0, 1.0], 0)
        np.testing.assert_array_equal(model.weights, [1.0, 0.0])
        assert model.bias == 0.0

    def test_length_change_resets(self):
        model = PerceptronModel().train([1.0, 1.0], 1).train([0.0, 1.0], 0)
        model.train([4.0, 5.0, 6.0], 1)
        np.testing.assert_array_equal(model.weights, [4.0, 5.0, 6.0])
        assert model.bias == 1.0

    def test_weights_are_a_copy(self):
        model = PerceptronModel().train([1.0, 2.0], 1)
        w = model.weights
        w[0] = 100.0
        assert model.weights[0] == 1.0

    def test_train_returns_self(self):
        model = PerceptronModel()
        assert model.train([1.0], 1) is model

    def test_learns_and_gate(self):
        model = PerceptronModel()
        examples = [([0, 0], 0), ([0, 1], 0), ([1, 0], 0), ([1, 1], 1)]
        for _ in range(20):
            for features, label in examples:
                model.train(features, label)
        assert [model.predict(f) for f, _ in examples] == [0, 0, 0, 1]

    def test_repr(self):
        model = PerceptronModel().train([1.0, 2.0], 1)
        assert repr(model) == "PerceptronModel(weights=[1.0, 2.0], bias=1)"


class TestPerceptronValidation:

    @pytest.mark.parametrize("label", [2, -1, 0.5, True, 'yes'])
    def test_bad_label(self, label):
        with pytest.raises(ValidationError, match="label"):
            PerceptronModel().train([1.0, 2.0], label)

    def test_untrained_predict(self):
        with pytest.raises(DimensionError):
            PerceptronModel().predict([1.0, 2.0])

    def test_predict_length_mismatch(self):
        model = PerceptronModel().train([1.0, 2.0], 1)
        with pytest.raises(DimensionError, match="expected length 2"):
            model.predict([1.0, 2.0, 3.0])

    def test_non_finite_features(self):
        with pytest.raises(ValidationError):
            PerceptronModel().train([1.0, np.inf], 1)
