"""Compare the fixed and adaptive integrators on reference integrands."""

from stepquad.benchmark.cases import DEFAULT_CASES, DEFAULT_RANGE, BenchmarkCase, select_cases
from stepquad.benchmark.report import format_duration, format_report, plot_benchmark
from stepquad.benchmark.runner import (
    BenchmarkResult,
    CaseResult,
    CountingIntegrand,
    MethodResult,
    run_benchmark,
    run_case,
)

__all__ = [
    "DEFAULT_CASES",
    "DEFAULT_RANGE",
    "BenchmarkCase",
    "BenchmarkResult",
    "CaseResult",
    "CountingIntegrand",
    "MethodResult",
    "format_duration",
    "format_report",
    "plot_benchmark",
    "run_benchmark",
    "run_case",
    "select_cases",
]
