from __future__ import annotations
from typing import List, Optional

import os
import sys

from arithmetic import Q, qstr
from formats import to_mixed_string
from parsing import ParseError, parse, load_values_from_file
from rounding import RoundingMode, get_rounding_mode, rounded, to_nearest

USAGE = "Usage: {prog} <mode> <grid> <value|values.txt> [<value|values.txt> ...]"
EXPANSION_DIGITS = 50  # fractional digits shown before "..."

def round_to_grid(value: Q, grid: Q, mode: RoundingMode) -> Q:
    # a grid of 1 is plain integer rounding, where half_even is well defined
    if grid == 1:
        return rounded(value, mode)
    return to_nearest(value, grid, mode)

def collect_values(args: List[str]) -> List[Q]:
    values: List[Q] = []
    for arg in args:
        if os.path.isfile(arg):
            values.extend(load_values_from_file(arg))
        else:
            values.append(parse(arg))
    return values

def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv if argv is None else argv
    if len(argv) < 4:
        print(USAGE.format(prog=argv[0] if argv else "rational_cli.py"))
        return 1

    try:
        mode = get_rounding_mode(argv[1])
    except NotImplementedError as e:
        print(f"Error: {e}")
        return 1

    try:
        grid = parse(argv[2])
    except ParseError as e:
        print(f"Error parsing grid: {e}")
        return 1
    if grid == 0:
        print("Error: <grid> must be nonzero.")
        return 1
    if grid != 1 and mode is RoundingMode.HALF_EVEN:
        print("Error: half_even is only supported with a grid of 1.")
        return 1
    if grid < 0:
        print(f"WARNING: negative grid {grid}; results are multiples of it all the same.")

    try:
        values = collect_values(argv[3:])
    except ParseError as e:
        print(f"Error parsing values: {e}")
        return 1
    except OSError as e:
        print(f"Error reading values: {e}")
        return 1

    for v in values:
        r = round_to_grid(v, grid, mode)
        print(f"{to_mixed_string(v)} -> {to_mixed_string(r)} ({qstr(r, EXPANSION_DIGITS)})")
    return 0

if __name__ == "__main__":
    sys.exit(main())
