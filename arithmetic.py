from __future__ import annotations
from fractions import Fraction
from math import trunc
from typing import Optional, Tuple

Q = Fraction  # rational type alias

def qstr(q: Q, max_digits: Optional[int] = None) -> str:
    """
    Exact decimal expansion of q, computed by long division on integers.

      qstr(Q(-7, 4))               -> "-1.75"
      qstr(Q(1, 6))                -> "0.1(6)"     repeating block in parentheses
      qstr(Q(1, 97), max_digits=8) -> "0.01030927..."

    With max_digits, an expansion whose terminating or repeating form needs
    more fractional digits than that is cut off and ends in "...".
    """
    if max_digits is not None and max_digits < 0:
        raise ValueError(f"max_digits must be non-negative, got {max_digits}")

    head = f"{'-' if q < 0 else ''}{abs(q.numerator) // q.denominator}"
    d = q.denominator
    rem = abs(q.numerator) % d
    if rem == 0:
        return head

    digits = []
    first_seen = {}  # remainder -> position of the digit it produces
    while rem and rem not in first_seen:
        if max_digits is not None and len(digits) == max_digits:
            return f"{head}.{''.join(digits)}..."
        first_seen[rem] = len(digits)
        q_digit, rem = divmod(rem * 10, d)
        digits.append(str(q_digit))

    if not rem:
        return f"{head}.{''.join(digits)}"
    k = first_seen[rem]
    return f"{head}.{''.join(digits[:k])}({''.join(digits[k:])})"

def to_q(x: int | float | str | Fraction) -> Q:
    """Convert to rational Q safely (floats go through string to avoid binary artifacts)."""
    if isinstance(x, Fraction):
        return x
    if isinstance(x, bool):
        raise TypeError("booleans are not numbers here")
    if isinstance(x, float):
        return Q(str(x))
    if isinstance(x, (int, str)):
        return Q(x)
    raise TypeError(f"cannot convert {type(x).__name__} to a rational")

def is_integer(q: Q) -> bool:
    return q.denominator == 1

def sign(q: Q) -> int:
    return (q > 0) - (q < 0)

def split_whole(q: Q) -> Tuple[int, Q]:
    """
    Split q into (whole, frac) with whole truncated towards zero.
    frac carries the sign of q and satisfies |frac| < 1.
    """
    whole = trunc(q)
    return whole, q - whole

def mixed_parts(q: Q) -> Tuple[int, int, int, int]:
    """
    Decompose q as sign * (whole + num/den) with whole, num >= 0 and num < den.
    Returns (sign, whole, num, den).
    """
    n = abs(q.numerator)
    d = q.denominator
    return sign(q), n // d, n % d, d
