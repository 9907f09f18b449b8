"""
Percentage helpers on exact values.

Ratios are kept as ratios (a 15% share is Q(3, 20)); only percent_change_on
takes its percentage in points (15 means 15%).
"""
from __future__ import annotations

from arithmetic import Q, to_q
from constants import HUNDRED

def percentage_of(part: int | float | str | Q, whole: int | float | str | Q) -> Q:
    """Share of whole represented by part, as a ratio: percentage_of(25, 200) == 1/8."""
    w = to_q(whole)
    if w == 0:
        raise ValueError("whole cannot be zero")
    return to_q(part) / w

def percent_change_on(percent: int | float | str | Q, base: int | float | str | Q) -> Q:
    """Apply a change of `percent` points to base: percent_change_on(-20, 150) == 120."""
    return to_q(base) * (1 + to_q(percent) / HUNDRED)

def percent_difference_from(value: int | float | str | Q, reference: int | float | str | Q) -> Q:
    """Relative change from reference to value, as a ratio: (935000, 850000) -> 1/10."""
    ref = to_q(reference)
    if ref == 0:
        raise ValueError("reference cannot be zero")
    return (to_q(value) - ref) / ref

def ratio_to_points(ratio: int | float | str | Q) -> Q:
    return to_q(ratio) * HUNDRED

def points_to_ratio(points: int | float | str | Q) -> Q:
    return to_q(points) / HUNDRED
