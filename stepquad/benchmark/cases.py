"""Benchmark integrands with their labels, ranges and antiderivatives."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace

from stepquad.numerics.interval import Integrand, Interval, normalize_interval

DEFAULT_RANGE: Interval = (-100.0, 100.0)


@dataclass(frozen=True)
class BenchmarkCase:
    """An integrand to compare the integrators on.

    Attributes:
        label: Human-readable formula, e.g. "x^2".
        integrand: The function to integrate.
        interval: Integration bounds.
        antiderivative: Closed-form antiderivative, when known.
    """

    label: str
    integrand: Integrand
    interval: Interval = DEFAULT_RANGE
    antiderivative: Callable[[float], float] | None = None

    @property
    def exact(self) -> float | None:
        """Analytic value over the normalized interval, or None."""
        if self.antiderivative is None:
            return None
        lo, hi = normalize_interval(self.interval)
        return self.antiderivative(hi) - self.antiderivative(lo)

    def with_interval(self, interval: Interval) -> BenchmarkCase:
        return replace(self, interval=interval)


def _sqrt_abs_antiderivative(x: float) -> float:
    return math.copysign(2.0 / 3.0 * abs(x) ** 1.5, x)


DEFAULT_CASES: tuple[BenchmarkCase, ...] = (
    BenchmarkCase(
        "√|x|",
        lambda x: math.sqrt(abs(x)),
        antiderivative=_sqrt_abs_antiderivative,
    ),
    BenchmarkCase(
        "x(x + 1)(x - 1)",
        lambda x: x * (x + 1.0) * (x - 1.0),
        antiderivative=lambda x: x**4 / 4.0 - x**2 / 2.0,
    ),
    BenchmarkCase(
        "x(x + 1)",
        lambda x: x * (x + 1.0),
        antiderivative=lambda x: x**3 / 3.0 + x**2 / 2.0,
    ),
    BenchmarkCase("Cos(x)", math.cos, antiderivative=math.sin),
    BenchmarkCase("Sin(x)", math.sin, antiderivative=lambda x: -math.cos(x)),
    BenchmarkCase(
        "Sin(x)Cos(x)",
        lambda x: math.sin(x) * math.cos(x),
        antiderivative=lambda x: math.sin(x) ** 2 / 2.0,
    ),
    BenchmarkCase("x", lambda x: x, antiderivative=lambda x: x**2 / 2.0),
    BenchmarkCase("x^2", lambda x: x * x, antiderivative=lambda x: x**3 / 3.0),
)


def select_cases(
    labels: Iterable[str] | None = None,
    cases: Iterable[BenchmarkCase] = DEFAULT_CASES,
) -> list[BenchmarkCase]:
    """Pick cases by label, keeping the order of ``cases``.

    Raises:
        KeyError: If a label does not name any case.
    """
    cases = list(cases)
    if labels is None:
        return cases

    wanted = list(labels)
    known = {case.label for case in cases}
    unknown = [label for label in wanted if label not in known]
    if unknown:
        raise KeyError(f"Unknown benchmark case(s): {', '.join(unknown)}")
    return [case for case in cases if case.label in wanted]
