"""Adaptive-step trapezoid integration.

The step size follows the local shape of the integrand: finite differences
give a slope proxy (velocity) and a curvature proxy (acceleration), and the
next step is derived from them and clamped to [DELTA, MAX_STEP]. Degenerate
arithmetic (zero denominators, NaN samples) is neutralized in place so the
sweep always runs to completion.

All arithmetic follows IEEE-754: a zero denominator yields an infinity or
NaN instead of raising ZeroDivisionError.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from stepquad.numerics.errors import InvalidStepError
from stepquad.numerics.interval import Integrand, Interval, normalize_interval

logger = logging.getLogger(__name__)

DELTA = 1e-6
MAX_STEP = 1e-3


@dataclass(slots=True)
class StepState:
    """Mutable loop state owned by a single adaptive_integral call.

    Attributes:
        step: Step size used for the next sub-interval.
        prev_step: Step size of the previous iteration.
        velocity: Current slope proxy.
        prev_velocity: Slope proxy of the previous iteration.
        acceleration: Current curvature proxy.
        total: Running integral sum.
        iterations: Number of sub-intervals summed.
        neutralized: Number of degenerate values replaced during the sweep.
    """

    step: float
    prev_step: float
    velocity: float = 0.0
    prev_velocity: float = 0.0
    acceleration: float = 0.0
    total: float = 0.0
    iterations: int = 0
    neutralized: int = 0


def _divide(numerator: float, denominator: float) -> float:
    """IEEE-754 division: x/0 is a signed infinity and 0/0 is NaN."""
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value to [lo, hi]. NaN is returned unchanged."""
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def adaptive_integral(
    f: Integrand,
    interval: Interval,
    *,
    delta: float = DELTA,
    max_step: float = MAX_STEP,
) -> float:
    """Integrate f over interval with a curvature-modulated step.

    Args:
        f: Function to integrate.
        interval: (lo, hi) bounds, in either order.
        delta: Finite-difference spacing and minimum step size.
        max_step: Maximum step size.

    Returns:
        Approximate integral. Never NaN for integrands that return finite
        values or NaN.

    Raises:
        InvalidStepError: If delta is not positive or max_step < delta.
    """
    if not delta > 0:
        raise InvalidStepError(delta, name="delta")
    if not max_step >= delta:
        raise InvalidStepError(max_step, name="max_step")

    lo, hi = normalize_interval(interval)
    if lo == hi:
        return 0.0

    state = StepState(step=delta, prev_step=delta)
    x = lo
    f_x = f(x)

    while x <= hi:
        state.prev_velocity = state.velocity

        # Slope proxy. The spacing multiplies rather than divides.
        state.velocity = (f(x + delta) - f(x - delta)) * (0.5 * delta)
        if math.isnan(state.velocity):
            state.velocity = 0.0
            state.neutralized += 1

        state.acceleration = _divide(
            state.prev_step - state.step, state.prev_velocity - state.velocity
        )
        if math.isnan(state.acceleration):
            state.acceleration = 0.0
            state.neutralized += 1

        state.prev_step = state.step

        # A large velocity or acceleration alone does not make the step large.
        state.step = _clamp(
            delta / _clamp(state.acceleration - state.velocity, delta, max_step),
            delta,
            max_step,
        )
        if math.isnan(state.step):
            state.step = delta
            state.neutralized += 1

        x_next = x + state.step
        width = state.step
        if x_next == x:
            # Step is below the float spacing at x; move to the next float.
            x_next = math.nextafter(x, math.inf)
            width = x_next - x

        f_next = f(x_next)
        # Halve before adding so two large finite samples cannot overflow.
        area = (0.5 * f_x + 0.5 * f_next) * width
        if math.isnan(area):
            area = 0.0
            state.neutralized += 1

        f_x = f_next
        state.total += area
        state.iterations += 1
        x = x_next

    logger.debug(
        "adaptive_integral over [%r, %r]: %d iterations, %d neutralized, result=%r",
        lo,
        hi,
        state.iterations,
        state.neutralized,
        state.total,
    )
    return state.total
