"""Unit tests for the fixed-step trapezoid integrator."""

import math

import pytest

from stepquad.benchmark.runner import CountingIntegrand
from stepquad.numerics.errors import InvalidStepError
from stepquad.numerics.fixed_step import fixed_integral


class TestFixedIntegral:
    """Tests for fixed_integral."""

    def test_odd_function_over_symmetric_interval(self):
        """Integral of x from -1 to 1 is 0."""
        result = fixed_integral(lambda x: x, 1e-3, (-1.0, 1.0))
        assert abs(result) < 1e-2

    def test_quadratic_function(self):
        """Integral of x^2 from 0 to 10 is 1000/3."""
        result = fixed_integral(lambda x: x * x, 1e-3, (0.0, 10.0))
        assert result == pytest.approx(1000.0 / 3.0, rel=1e-2)

    @pytest.mark.parametrize("lo, hi", [(0.0, 10.0), (-3.0, 5.0), (2.5, 2.75), (-7.0, -1.0)])
    def test_constant_function(self, lo, hi):
        """Integral of 1 over [lo, hi] is hi - lo."""
        step = 1e-3
        result = fixed_integral(lambda x: 1.0, step, (lo, hi))
        assert abs(result - (hi - lo)) <= 2 * step

    def test_sine_function(self):
        """Integral of sin(x) from 0 to pi is 2."""
        result = fixed_integral(math.sin, 1e-4, (0.0, math.pi))
        assert result == pytest.approx(2.0, abs=1e-3)

    def test_reversed_bounds_match_ordered(self):
        """Reversed bounds give the same value, not its negation."""
        forward = fixed_integral(lambda x: x**3 + 1.0, 1e-3, (-2.0, 3.0))
        backward = fixed_integral(lambda x: x**3 + 1.0, 1e-3, (3.0, -2.0))
        assert forward == backward

    def test_zero_length_interval(self):
        """A single-point interval gives f(lo) * step."""
        result = fixed_integral(lambda x: 3.0, 0.5, (2.0, 2.0))
        assert result == 1.5

    def test_deterministic(self):
        results = {fixed_integral(math.cos, 1e-3, (-5.0, 5.0)) for _ in range(3)}
        assert len(results) == 1

    def test_terminates_where_step_is_below_float_spacing(self):
        """At 1e16 adjacent floats are 2.0 apart; the middle sum still advances."""
        f = CountingIntegrand(lambda x: 1.0)
        result = fixed_integral(f, 1e-3, (1e16, 1e16 + 4.0))
        assert math.isfinite(result)
        assert f.calls < 100

    def test_nan_propagates(self):
        """NaN from the integrand is not absorbed."""
        result = fixed_integral(lambda x: math.nan, 0.1, (0.0, 1.0))
        assert math.isnan(result)


class TestFixedIntegralInvalidStep:
    """Tests for step validation."""

    @pytest.mark.parametrize("step", [0.0, -1e-3, -1.0, math.nan])
    def test_rejects_non_positive_step(self, step):
        with pytest.raises(InvalidStepError):
            fixed_integral(lambda x: x, step, (0.0, 1.0))

    def test_does_not_evaluate_integrand(self):
        f = CountingIntegrand(lambda x: x)
        with pytest.raises(InvalidStepError):
            fixed_integral(f, 0.0, (0.0, 1.0))
        assert f.calls == 0

    def test_error_is_value_error(self):
        """InvalidStepError can be caught as ValueError and keeps the step."""
        with pytest.raises(ValueError) as exc_info:
            fixed_integral(lambda x: x, -2.0, (0.0, 1.0))
        assert exc_info.value.step == -2.0
        assert "-2.0" in str(exc_info.value)
