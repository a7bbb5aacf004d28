"""Time both integrators on a set of benchmark cases."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

import pandas as pd

from stepquad.benchmark.cases import BenchmarkCase
from stepquad.numerics.adaptive_step import adaptive_integral
from stepquad.numerics.fixed_step import fixed_integral
from stepquad.numerics.interval import Integrand, normalize_interval

logger = logging.getLogger(__name__)

FIXED = "fixed"
ADAPTIVE = "adaptive"


class CountingIntegrand:
    """Wraps an integrand and counts how often it is evaluated.

    Not safe to share between threads; create one per call.
    """

    def __init__(self, f: Integrand):
        self._f = f
        self.calls = 0

    def __call__(self, x: float) -> float:
        self.calls += 1
        return self._f(x)


@dataclass
class MethodResult:
    """Outcome of one integrator on one case."""

    method: str
    value: float
    elapsed_s: float
    evaluations: int
    abs_error: float | None = None


@dataclass
class CaseResult:
    case: BenchmarkCase
    fixed: MethodResult
    adaptive: MethodResult

    @property
    def methods(self) -> tuple[MethodResult, MethodResult]:
        return self.fixed, self.adaptive


@dataclass
class BenchmarkResult:
    """All case results of a benchmark run."""

    step: float
    cases: list[CaseResult] = field(default_factory=list)

    def to_dataframe(self) -> pd.DataFrame:
        """One row per (case, method)."""
        rows: list[dict[str, Any]] = []
        for result in self.cases:
            lo, hi = normalize_interval(result.case.interval)
            for method in result.methods:
                rows.append(
                    {
                        "case": result.case.label,
                        "lo": lo,
                        "hi": hi,
                        "method": method.method,
                        "value": method.value,
                        "exact": result.case.exact,
                        "abs_error": method.abs_error,
                        "elapsed_s": method.elapsed_s,
                        "evaluations": method.evaluations,
                    }
                )
        return pd.DataFrame(
            rows,
            columns=[
                "case",
                "lo",
                "hi",
                "method",
                "value",
                "exact",
                "abs_error",
                "elapsed_s",
                "evaluations",
            ],
        )


def _measure(method: str, case: BenchmarkCase, step: float) -> MethodResult:
    f = CountingIntegrand(case.integrand)
    start = time.perf_counter()
    if method == FIXED:
        value = fixed_integral(f, step, case.interval)
    else:
        value = adaptive_integral(f, case.interval)
    elapsed = time.perf_counter() - start

    exact = case.exact
    abs_error = abs(value - exact) if exact is not None else None
    return MethodResult(
        method=method,
        value=value,
        elapsed_s=elapsed,
        evaluations=f.calls,
        abs_error=abs_error,
    )


def run_case(case: BenchmarkCase, step: float) -> CaseResult:
    """Run the fixed then the adaptive integrator on one case.

    Raises:
        InvalidStepError: If step is not positive.
    """
    fixed = _measure(FIXED, case, step)
    adaptive = _measure(ADAPTIVE, case, step)
    logger.info(
        "%s over %s: fixed=%r (%.3fs, %d evals), adaptive=%r (%.3fs, %d evals)",
        case.label,
        case.interval,
        fixed.value,
        fixed.elapsed_s,
        fixed.evaluations,
        adaptive.value,
        adaptive.elapsed_s,
        adaptive.evaluations,
    )
    return CaseResult(case=case, fixed=fixed, adaptive=adaptive)


def run_benchmark(cases: Iterable[BenchmarkCase], step: float) -> BenchmarkResult:
    """Run every case in order."""
    result = BenchmarkResult(step=step)
    for case in cases:
        result.cases.append(run_case(case, step))
    return result
