"""Unit tests for the benchmark runner."""

import pytest

from stepquad.benchmark.cases import BenchmarkCase, select_cases
from stepquad.benchmark.runner import (
    ADAPTIVE,
    FIXED,
    CountingIntegrand,
    run_benchmark,
    run_case,
)
from stepquad.numerics.errors import InvalidStepError


def _small_cases() -> list[BenchmarkCase]:
    return [case.with_interval((0.0, 1.0)) for case in select_cases(["x", "x^2"])]


class TestCountingIntegrand:

    def test_counts_calls(self):
        f = CountingIntegrand(lambda x: 2 * x)
        assert f(1.5) == 3.0
        assert f(0.0) == 0.0
        assert f.calls == 2

    def test_starts_at_zero(self):
        assert CountingIntegrand(abs).calls == 0


class TestRunCase:

    def test_measures_both_methods(self):
        case = select_cases(["x^2"])[0].with_interval((0.0, 1.0))
        result = run_case(case, 1e-3)

        assert result.fixed.method == FIXED
        assert result.adaptive.method == ADAPTIVE
        assert result.fixed.value == pytest.approx(1.0 / 3.0, abs=2e-3)
        assert result.adaptive.value == pytest.approx(1.0 / 3.0, abs=2e-3)
        assert result.fixed.abs_error == pytest.approx(abs(result.fixed.value - 1.0 / 3.0))

        for method in result.methods:
            assert method.evaluations > 0
            assert method.elapsed_s >= 0.0

    def test_no_error_without_exact_value(self):
        case = BenchmarkCase("mystery", lambda x: 1.0, (0.0, 0.5))
        result = run_case(case, 1e-3)
        assert result.fixed.abs_error is None
        assert result.adaptive.abs_error is None

    def test_invalid_step_raises(self):
        with pytest.raises(InvalidStepError):
            run_case(_small_cases()[0], 0.0)


class TestRunBenchmark:

    def test_runs_cases_in_order(self):
        result = run_benchmark(_small_cases(), 1e-3)
        assert [r.case.label for r in result.cases] == ["x", "x^2"]
        assert result.step == 1e-3

    def test_dataframe_has_row_per_case_and_method(self):
        df = run_benchmark(_small_cases(), 1e-3).to_dataframe()

        assert len(df) == 4
        assert list(df.columns) == [
            "case",
            "lo",
            "hi",
            "method",
            "value",
            "exact",
            "abs_error",
            "elapsed_s",
            "evaluations",
        ]
        assert list(df["method"]) == [FIXED, ADAPTIVE, FIXED, ADAPTIVE]
        assert (df["abs_error"] < 1e-2).all()

    def test_empty_case_list(self):
        result = run_benchmark([], 1e-3)
        assert result.cases == []
        assert result.to_dataframe().empty
