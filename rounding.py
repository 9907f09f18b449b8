from __future__ import annotations
from enum import Enum

from arithmetic import Q, to_q, split_whole, sign
from constants import HALF, THIRD, QUARTER

class RoundingMode(Enum):
    """How a non-integer value is resolved to an integer (or a grid point)."""

    FLOOR = "floor"          # towards -inf
    CEIL = "ceil"            # towards +inf
    TRUNCATE = "truncate"    # towards zero
    UP = "up"                # away from zero
    HALF_UP = "half_up"      # nearest, ties away from zero
    HALF_DOWN = "half_down"  # nearest, ties towards zero
    HALF_EVEN = "half_even"  # nearest, ties to the even neighbour

DEFAULT_ROUNDING_MODE = RoundingMode.HALF_UP
CENT_PLACES = 2

_ALIASES = {
    "floor":          RoundingMode.FLOOR,
    "round_floor":    RoundingMode.FLOOR,

    "ceil":           RoundingMode.CEIL,
    "ceiling":        RoundingMode.CEIL,
    "round_ceiling":  RoundingMode.CEIL,

    "truncate":       RoundingMode.TRUNCATE,
    "trunc":          RoundingMode.TRUNCATE,
    "down":           RoundingMode.TRUNCATE,
    "round_down":     RoundingMode.TRUNCATE,

    "up":             RoundingMode.UP,
    "round_up":       RoundingMode.UP,

    "half_up":        RoundingMode.HALF_UP,
    "halfup":         RoundingMode.HALF_UP,
    "round_half_up":  RoundingMode.HALF_UP,

    "half_down":      RoundingMode.HALF_DOWN,
    "halfdown":       RoundingMode.HALF_DOWN,
    "round_half_down": RoundingMode.HALF_DOWN,

    "half_even":      RoundingMode.HALF_EVEN,
    "halfeven":       RoundingMode.HALF_EVEN,
    "round_half_even": RoundingMode.HALF_EVEN,
    "bankers":        RoundingMode.HALF_EVEN,
}

def get_rounding_mode(name: str | RoundingMode) -> RoundingMode:
    if isinstance(name, RoundingMode):
        return name
    key = (name or "").strip().lower().replace("-", "_")
    try:
        return _ALIASES[key]
    except KeyError:
        raise NotImplementedError(f"Rounding mode '{name}' not implemented. Supported modes {sorted(_ALIASES)}")

def _round_half(whole: int, frac: Q, mode: RoundingMode) -> int:
    """
    Nearest-integer rounding for the HALF_* modes.

    Compares 2*|num| against den of the fractional part, so the distance to the
    midpoint is decided on integers alone, whatever their size.
    """
    step = sign(frac)
    n = 2 * abs(frac.numerator)
    d = frac.denominator
    if n < d:
        return whole
    if n > d:
        return whole + step
    # exact tie
    if mode is RoundingMode.HALF_UP:
        return whole + step
    if mode is RoundingMode.HALF_DOWN:
        return whole
    # HALF_EVEN: whole and whole+step differ by one, exactly one is even
    return whole if whole % 2 == 0 else whole + step

def rounded(value: int | float | str | Q, mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> Q:
    """
    Round value to an integer-valued Q according to mode.

    Every mode is total and leaves integers unchanged:
      floor      7.51 -> 7     -7.51 -> -8
      ceil       7.01 -> 8     -7.99 -> -7
      truncate   7.99 -> 7     -7.99 -> -7
      up         7.01 -> 8     -7.01 -> -8
      half_up    7.5  -> 8     -7.5  -> -8
      half_down  7.5  -> 7     -7.5  -> -7
      half_even  2.5  -> 2      3.5  -> 4     -7.5 -> -8
    """
    q = to_q(value)
    whole, frac = split_whole(q)
    if frac == 0:
        return q

    if mode is RoundingMode.FLOOR:
        return Q(whole - 1 if frac < 0 else whole)
    if mode is RoundingMode.CEIL:
        return Q(whole + 1 if frac > 0 else whole)
    if mode is RoundingMode.TRUNCATE:
        return Q(whole)
    if mode is RoundingMode.UP:
        return Q(whole + sign(frac))
    if mode in (RoundingMode.HALF_UP, RoundingMode.HALF_DOWN, RoundingMode.HALF_EVEN):
        return Q(_round_half(whole, frac, mode))
    raise TypeError(f"expected a RoundingMode, got {mode!r}")

def check_grid(min_increment: int | float | str | Q, mode: RoundingMode) -> Q:
    """Validate a grid and mode for to_nearest; returns the increment as a Q."""
    inc = to_q(min_increment)
    if inc == 0:
        raise ValueError("min_increment cannot be zero")
    if mode is RoundingMode.HALF_EVEN:
        raise ValueError("half_even is not supported for rounding to a fractional grid")
    return inc

def check_places(places: int) -> None:
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

def to_nearest(value: int | float | str | Q, min_increment: int | float | str | Q,
               mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> Q:
    """
    Round value to the nearest multiple of min_increment.

    The result is always an exact integer multiple of min_increment; negative
    increments are allowed. HALF_EVEN is rejected since "even" only has a
    meaning on the integers, not on an arbitrary fractional grid.

    Raises:
        ValueError: If min_increment is zero or mode is HALF_EVEN
    """
    inc = check_grid(min_increment, mode)
    return rounded(to_q(value) / inc, mode) * inc

def to_decimal_places(value: int | float | str | Q, places: int,
                      mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> Q:
    """
    Round value to `places` decimal digits, e.g. 1.2345 -> 1.23 (half_up) or 1.24 (ceil).
    Same result as to_nearest(value, Q(1, 10**places), mode), but HALF_EVEN is allowed
    because the tie is resolved on the scaled integer.
    """
    check_places(places)
    scale = 10 ** places
    return rounded(to_q(value) * scale, mode) / scale

def to_cents(value: int | float | str | Q, mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> Q:
    return to_decimal_places(value, CENT_PLACES, mode)

def to_nearest_half(value: int | float | str | Q, mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> Q:
    return to_nearest(value, HALF, mode)

def to_nearest_third(value: int | float | str | Q, mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> Q:
    return to_nearest(value, THIRD, mode)

def to_nearest_quarter(value: int | float | str | Q, mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> Q:
    return to_nearest(value, QUARTER, mode)

def rounded_divide(numerator: int, denominator: int, mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> int:
    """
    Integer division numerator / denominator, rounded with mode.
      rounded_divide(10, 3, CEIL)      == 4
      rounded_divide(-7, 2, FLOOR)     == -4
      rounded_divide(5, 2, HALF_EVEN)  == 2
    """
    if denominator == 0:
        raise ValueError("denominator cannot be zero")
    return rounded(Q(numerator, denominator), mode).numerator
