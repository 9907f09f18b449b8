from __future__ import annotations
from dataclasses import dataclass

from arithmetic import Q, to_q, mixed_parts
from percentages import ratio_to_points
from rounding import RoundingMode, DEFAULT_ROUNDING_MODE, to_decimal_places

@dataclass(frozen=True)
class NumberFormat:
    name: str
    decimal_sep: str    # between integer and fractional digits
    group_sep: str      # thousands separator, "" for none
    group_size: int     # digits per group (3 for thousands)

# Separator conventions only; locale data (currency symbols, patterns) lives
# with whatever renders the final text.
_REGISTRY = {
    "plain":     (".", "",       3),
    "grouped":   (".", ",",      3),
    "us":        (".", ",",      3),

    "european":  (",", ".",      3),
    "eu":        (",", ".",      3),

    "swiss":     (".", "'",      3),

    "space":     (",", "\u202f", 3),   # narrow no-break space, SI style
    "si":        (",", "\u202f", 3),
}

def get_number_format(name: str | NumberFormat) -> NumberFormat:
    if isinstance(name, NumberFormat):
        return name
    key = (name or "plain").lower()
    try:
        decimal_sep, group_sep, group_size = _REGISTRY[key]
    except KeyError:
        raise NotImplementedError(f"Format '{name}' not implemented. Supported formats {_REGISTRY.keys()}")
    return NumberFormat(name=key, decimal_sep=decimal_sep, group_sep=group_sep, group_size=group_size)

def _group(digits: str, fmt: NumberFormat) -> str:
    if not fmt.group_sep or len(digits) <= fmt.group_size:
        return digits
    head = len(digits) % fmt.group_size or fmt.group_size
    groups = [digits[:head]]
    for k in range(head, len(digits), fmt.group_size):
        groups.append(digits[k:k + fmt.group_size])
    return fmt.group_sep.join(groups)

def to_decimal_string(
    value: int | float | str | Q,
    places: int,
    mode: RoundingMode = DEFAULT_ROUNDING_MODE,
    strip_trailing_zeros: bool = False,
    fmt: str | NumberFormat = "plain",
) -> str:
    """
    Render value with `places` fractional digits after rounding it with mode.

    The digits come from the exact rounded value, never from a float:
      to_decimal_string(Q(1, 3), 3)                               -> "0.333"
      to_decimal_string(Q(1, 3), 3, RoundingMode.UP, fmt="eu")    -> "0,334"
      to_decimal_string(Q(1, 4), 3, strip_trailing_zeros=True)    -> "0.25"
      to_decimal_string(Q(1234567, 100), 2, fmt="grouped")        -> "12,345.67"

    Raises:
        ValueError: If places is negative
    """
    nf = get_number_format(fmt)
    r = to_decimal_places(value, places, mode)
    scaled = (r * 10 ** places).numerator  # integer, r sits on the 10^-places grid
    negative = scaled < 0
    digits = str(abs(scaled)).rjust(places + 1, "0")

    int_part = digits[:len(digits) - places]
    frac_part = digits[len(digits) - places:]
    if strip_trailing_zeros:
        frac_part = frac_part.rstrip("0")

    out = _group(int_part, nf)
    if frac_part:
        out += nf.decimal_sep + frac_part
    return ("-" if negative else "") + out

def to_percentage_string(
    value: int | float | str | Q,
    places: int,
    mode: RoundingMode = DEFAULT_ROUNDING_MODE,
    as_ratio: bool = True,
    strip_trailing_zeros: bool = False,
    fmt: str | NumberFormat = "plain",
) -> str:
    """
    Render a percentage. With as_ratio (default) value is a ratio and is scaled
    by 100 first (Q(1, 3) -> "33.33%"); otherwise value is already in points
    (Q(33) -> "33.00%").
    """
    points = ratio_to_points(value) if as_ratio else to_q(value)
    return to_decimal_string(points, places, mode, strip_trailing_zeros, fmt) + "%"

def to_mixed_string(value: int | float | str | Q) -> str:
    """
    Mixed-number display form: Q(-7, 4) -> "-1 3/4", Q(3, 4) -> "3/4", Q(5) -> "5".
    parsing.parse() reads it back to the same value.
    """
    s, whole, num, den = mixed_parts(to_q(value))
    prefix = "-" if s < 0 else ""
    if num == 0:
        return f"{prefix}{whole}"
    if whole == 0:
        return f"{prefix}{num}/{den}"
    return f"{prefix}{whole} {num}/{den}"
