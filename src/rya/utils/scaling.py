"""Linear rescaling of numbers from one range to another."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = [
    "scale",
    "scale_fixed",
    "scale_values",
]


def scale(value: float, old_min: float, old_max: float, new_min: float, new_max: float) -> float:
    """Map ``value`` from [old_min, old_max] onto [new_min, new_max].

    A reversed target range (new_min > new_max) flips the direction. When the
    old range is empty (old_min == old_max) the midpoint of the new range is
    returned.
    """
    if old_max - old_min == 0:
        return (new_min + new_max) / 2
    return ((new_max - new_min) * (value - old_min)) / (old_max - old_min) + new_min


def scale_fixed(
    values: Iterable[float],
    old_min: float,
    old_max: float,
    new_min: float,
    new_max: float,
) -> list[float]:
    """Scale every value with respect to a fixed old range."""
    return [scale(v, old_min, old_max, new_min, new_max) for v in values]


def scale_values(values: Sequence[float], new_min: float, new_max: float) -> list[float]:
    """Scale values with respect to their own min and max."""
    if not values:
        return []
    return scale_fixed(values, min(values), max(values), new_min, new_max)
