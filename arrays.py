"""
Element-wise rounding over numpy object arrays of Q.

numpy carries the shape; every element stays an exact Fraction.
"""
from __future__ import annotations
from typing import Iterable

import numpy as np

from arithmetic import Q, to_q
from parsing import ParseError, parse
from rounding import (RoundingMode, DEFAULT_ROUNDING_MODE, check_grid, check_places,
                      rounded, to_nearest, to_decimal_places)

def as_q_array(values) -> np.ndarray:
    """Object array of Q with the shape of values."""
    arr = np.asarray(values, dtype=object)
    out = np.empty(arr.shape, dtype=object)
    for idx, x in np.ndenumerate(arr):
        out[idx] = to_q(x)
    return out

def parse_array(texts: Iterable[str]) -> np.ndarray:
    arr = np.asarray(list(texts), dtype=object)
    out = np.empty(arr.shape, dtype=object)
    for idx, s in np.ndenumerate(arr):
        try:
            out[idx] = parse(s)
        except ParseError as e:
            raise ParseError(f"entry {idx}: {e}") from e
    return out

def _map(fn, values) -> np.ndarray:
    arr = as_q_array(values)
    out = np.empty(arr.shape, dtype=object)
    for idx, q in np.ndenumerate(arr):
        out[idx] = fn(q)
    return out

def round_array(values, mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> np.ndarray:
    return _map(lambda q: rounded(q, mode), values)

def to_nearest_array(values, min_increment, mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> np.ndarray:
    # checked up front so an empty array still rejects a bad grid
    inc = check_grid(min_increment, mode)
    return _map(lambda q: to_nearest(q, inc, mode), values)

def to_decimal_places_array(values, places: int, mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> np.ndarray:
    check_places(places)
    return _map(lambda q: to_decimal_places(q, places, mode), values)

def to_float64(values) -> np.ndarray:
    """Nearest float64 of each element, for display or plotting only."""
    arr = as_q_array(values)
    out = np.empty(arr.shape, dtype=np.float64)
    for idx, q in np.ndenumerate(arr):
        out[idx] = float(q)
    return out

def load_fractions_from_npy(path: str) -> np.ndarray:
    """
    Load a float or integer .npy file as an object array of Q.
    Floats are converted exactly (Q.from_float), so 0.1 becomes its binary value,
    not 1/10.
    """
    arr = np.load(path, allow_pickle=False)
    k = arr.dtype.kind
    out = np.empty(arr.shape, dtype=object)
    if k in ('i', 'u'):
        for idx, x in np.ndenumerate(arr):
            out[idx] = Q(int(x))
    elif k == 'f':
        f64 = arr.astype(np.float64, copy=False)
        if not np.isfinite(f64).all():
            raise ValueError("NaN/Inf encountered; cannot convert to Fraction.")
        for idx, x in np.ndenumerate(f64):
            out[idx] = Q.from_float(float(x))
    else:
        raise TypeError(f"Unsupported dtype: {arr.dtype!r}")
    return out
