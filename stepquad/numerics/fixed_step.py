"""Fixed-step composite trapezoid integration."""

import math

from stepquad.numerics.errors import InvalidStepError
from stepquad.numerics.interval import Integrand, Interval, normalize_interval


def fixed_integral(f: Integrand, step: float, interval: Interval) -> float:
    """Integrate f over interval with a uniform step.

    The result is the average of a left-biased and a right-biased sum that
    share the same interior samples, which is the composite trapezoid rule.

    Args:
        f: Function to integrate.
        step: Spacing between samples. Must be positive.
        interval: (lo, hi) bounds, in either order.

    Returns:
        Approximate integral. NaN returned by f propagates to the result.

    Raises:
        InvalidStepError: If step is not greater than 0. f is not evaluated.
    """
    if not step > 0:
        raise InvalidStepError(step)

    lo, hi = normalize_interval(interval)

    middle_sum = 0.0
    x = lo + step
    end = hi - step
    while x <= end:
        middle_sum += f(x) * step
        x_next = x + step
        if x_next == x:
            x_next = math.nextafter(x, math.inf)
        x = x_next

    upper_sum = f(lo) * step + middle_sum
    lower_sum = f(hi) * step + middle_sum

    return (upper_sum + lower_sum) / 2.0
