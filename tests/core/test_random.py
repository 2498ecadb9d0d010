"""
Tests for injectable random sources and the Timer.
"""

import numpy as np
import pytest

from statkit.core.compute.timing import Timer, timed
from statkit.core.exceptions import ValidationError
from statkit.core.random import as_uniform, seed_global


class TestAsUniform:
    """as_uniform normalises every accepted source to a callable."""

    def test_int_seed_reproducible(self):
        a = as_uniform(7)
        b = as_uniform(7)
        assert [a() for _ in range(5)] == [b() for _ in range(5)]

    def test_generator_used_as_is(self):
        gen = np.random.default_rng(3)
        expected = np.random.default_rng(3).random()
        assert as_uniform(gen)() == expected

    def test_callable_passthrough(self):
        source = lambda: 0.25
        assert as_uniform(source) is source

    def test_global_reseeded(self):
        seed_global(11)
        first = as_uniform(None)()
        seed_global(11)
        assert as_uniform(None)() == first

    def test_values_in_unit_interval(self):
        draw = as_uniform(0)
        values = [draw() for _ in range(100)]
        assert all(0.0 <= v < 1.0 for v in values)

    def test_invalid_source(self):
        with pytest.raises(ValidationError, match="random_source"):
            as_uniform("seed")

    def test_bool_is_not_a_seed(self):
        with pytest.raises(ValidationError):
            as_uniform(True)


class TestTimer:

    def test_sections_recorded(self):
        timer = Timer()
        timer.start()
        with timer.section('ranks'):
            pass
        with timer.section('ranks'):
            pass
        timer.stop()
        result = timer.result()
        assert 'total_seconds' in result
        assert 'ranks' in result
        assert result['ranks'] >= 0.0

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_timed_context(self):
        with timed() as timer:
            sum(range(10))
        assert timer.result()['total_seconds'] >= 0.0
