"""Interval normalization shared by the integrators."""

from collections.abc import Callable

Integrand = Callable[[float], float]
Interval = tuple[float, float]


def normalize_interval(interval: Interval) -> Interval:
    """Return the bounds ordered so that lo <= hi.

    Reversed bounds are swapped; the orientation is not remembered, so
    integrating over (hi, lo) gives the same value as over (lo, hi).
    """
    lo, hi = interval
    if lo > hi:
        return hi, lo
    return lo, hi
