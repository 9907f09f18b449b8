from __future__ import annotations

from arithmetic import Q, to_q, is_integer

def is_in_range(value: int | float | str | Q, low: int | float | str | Q, high: int | float | str | Q,
                inclusive: bool = True) -> bool:
    v, lo, hi = to_q(value), to_q(low), to_q(high)
    if inclusive:
        return lo <= v <= hi
    return lo < v < hi

def is_within_tolerance(value: int | float | str | Q, other: int | float | str | Q,
                        tolerance: int | float | str | Q) -> bool:
    """|value - other| <= tolerance, compared exactly."""
    tol = to_q(tolerance)
    if tol < 0:
        raise ValueError(f"tolerance must be non-negative, got {tol}")
    return abs(to_q(value) - to_q(other)) <= tol

def is_multiple_of(value: int | float | str | Q, other: int | float | str | Q) -> bool:
    """
    True if value == k * other for some integer k.
      is_multiple_of(Q(3, 8), Q(1, 16)) -> True
      is_multiple_of(Q(1, 8), Q(1, 4))  -> False

    Raises:
        ValueError: If other is zero. Multiples of zero are not defined here,
        not even for a zero value.
    """
    o = to_q(other)
    if o == 0:
        raise ValueError("cannot test for multiples of zero")
    return is_integer(to_q(value) / o)
