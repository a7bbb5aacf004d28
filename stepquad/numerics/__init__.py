"""Numerical integration over a closed interval.

- Fixed-step composite trapezoid rule (baseline)
- Adaptive-step trapezoid rule with curvature-modulated step size
"""

from stepquad.numerics.adaptive_step import DELTA, MAX_STEP, StepState, adaptive_integral
from stepquad.numerics.errors import InvalidStepError
from stepquad.numerics.fixed_step import fixed_integral
from stepquad.numerics.interval import Integrand, Interval, normalize_interval

__all__ = [
    "DELTA",
    "MAX_STEP",
    "Integrand",
    "Interval",
    "InvalidStepError",
    "StepState",
    "adaptive_integral",
    "fixed_integral",
    "normalize_interval",
]
