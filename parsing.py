from __future__ import annotations
from typing import List, Optional, Tuple

from arithmetic import Q

DIGITS = set("0123456789")

class ParseError(ValueError):
    pass

# A fraction literal, whitespace allowed wherever shown:
#
#   ws* ['-' ws*] [whole ws+] numerator ws* '/' ws* denominator ws*
#
# with whole, numerator and denominator unsigned ASCII integers. This accepts
# both str(Q) ("-7/4") and the mixed display form ("-1 3/4").
FractionParts = Tuple[bool, Optional[int], int, int]  # (negative, whole, numerator, denominator)

def skip_ws(s: str, i: int) -> int:
    n = len(s)
    while i < n and s[i].isspace():
        i += 1
    return i

def scan_digits(s: str, i: int) -> Tuple[Optional[str], int]:
    start = i
    n = len(s)
    while i < n and s[i] in DIGITS:
        i += 1
    if i == start:
        return None, i
    return s[start:i], i

def match_fraction(s: str) -> Optional[FractionParts]:
    """
    Match s against the fraction grammar.
    Returns the literal's parts, or None if s is not a fraction literal.
    """
    i = skip_ws(s, 0)
    negative = False
    if i < len(s) and s[i] == '-':
        negative = True
        i = skip_ws(s, i + 1)

    first, i = scan_digits(s, i)
    if first is None:
        return None
    j = skip_ws(s, i)

    whole = None
    if j > i and j < len(s) and s[j] in DIGITS:
        # "whole numerator/denominator": the whole part needs whitespace after it
        whole = int(first)
        first, i = scan_digits(s, j)
        j = skip_ws(s, i)
    if j >= len(s) or s[j] != '/':
        return None

    i = skip_ws(s, j + 1)
    den, i = scan_digits(s, i)
    if den is None:
        return None
    if skip_ws(s, i) != len(s):
        return None
    return negative, whole, int(first), int(den)

def parse(text: str) -> Q:
    """
    Parse text into a Q.

    Accepts fractions and mixed numbers ("3/4", " - 1 3 / 4 ") as well as
    plain ASCII literals on the stripped text (integers, decimals and
    scientific notation such as "5", "0.75", "1e-3"). No "/" or "_" there.

    parse(str(q)) == q for every Q.

    Raises:
        ParseError: If text is not a number, or a fraction has a zero denominator
        TypeError: If text is not a string
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    parts = match_fraction(text)
    if parts is not None:
        negative, whole, num, den = parts
        if den == 0:
            raise ParseError(f"Denominator cannot be zero in fraction: {text!r}")
        if whole is not None:
            num += whole * den
        return Q(-num if negative else num, den)

    # Fraction() alone would also take "+3/4", "1_000" and non-ASCII digits
    s = text.strip()
    if not s.isascii() or '/' in s or '_' in s:
        raise ParseError(f"Invalid number format: {text!r}")
    try:
        return Q(s)
    except (ValueError, ZeroDivisionError):
        raise ParseError(f"Invalid number format: {text!r}")

def try_parse(text: Optional[str]) -> Optional[Q]:
    """Like parse(), but returns None for None or malformed text."""
    if text is None:
        return None
    try:
        return parse(text)
    except ParseError:
        return None

def load_values_from_file(path: str) -> List[Q]:
    """One value per line; blank lines and lines starting with '#' are skipped."""
    with open(path, "r", encoding="utf-8") as f:
        lines = f.read().splitlines()
    out = []
    for lineno, line in enumerate(lines, 1):
        s = line.strip()
        if not s or s.startswith('#'):
            continue
        try:
            out.append(parse(s))
        except ParseError as e:
            raise ParseError(f"line {lineno}: {e}") from e
    if not out:
        raise ParseError(f"No values found in {path}")
    return out
