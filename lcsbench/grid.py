"""LCS score computed over a two-dimensional grid of matrix blocks.

The score matrix, border row and column included, is cut into a grid of
rectangular blocks, one for each process of a balanced two-dimensional
layout. Blocks are filled in row-major grid order. Each block takes its top
boundary from the block above and its left boundary from the block to its
left, and passes its own bottom row and right column on.
"""

from __future__ import annotations

import argparse
import math
import os
import sys
import time
from typing import Dict, List, Optional, Sequence, Tuple

from .sequence import SequenceReadError, read_sequence
from .sequential import SCORE_MASK


def dims_create(n_procs: int) -> Tuple[int, int]:
    """Return a balanced ``(rows, cols)`` grid holding ``n_procs`` processes.

    The two sides are as close to each other as the factors of ``n_procs``
    allow, the larger one first.
    """
    if n_procs < 1:
        raise ValueError("the number of processes must be at least 1")
    cols = math.isqrt(n_procs)
    while n_procs % cols:
        cols -= 1
    return n_procs // cols, cols


def partition(extent: int, parts: int, index: int) -> range:
    """Return the indices of ``range(extent)`` owned by part ``index`` of ``parts``."""
    if parts < 1:
        raise ValueError("the number of parts must be at least 1")
    if not 0 <= index < parts:
        raise ValueError(f"part index {index} is outside 0..{parts - 1}")
    if extent < 0:
        raise ValueError("the extent must not be negative")
    return range(index * extent // parts, (index + 1) * extent // parts)


def grid_lcs(seq_a: str, seq_b: str, n_procs: int = 1) -> int:
    """Return the LCS score of the two sequences, filled block by block.

    Rows of the matrix follow ``seq_b`` and columns follow ``seq_a``; the
    grid has the shape given by :func:`dims_create` for ``n_procs``.
    """
    grid_rows, grid_cols = dims_create(n_procs)
    size_a, size_b = len(seq_a), len(seq_b)
    row_parts = [partition(size_b + 1, grid_rows, bi) for bi in range(grid_rows)]
    col_parts = [partition(size_a + 1, grid_cols, bj) for bj in range(grid_cols)]

    # A bottom row starts with the cell just left of the block, which is the
    # top-left corner the block below needs for its diagonal.
    bottoms: Dict[Tuple[int, int], List[int]] = {}
    rights: Dict[Tuple[int, int], List[int]] = {}

    for bi, rows in enumerate(row_parts):
        for bj, cols in enumerate(col_parts):
            top = bottoms.pop((bi - 1, bj)) if bi > 0 else [0] * (len(cols) + 1)
            left = rights.pop((bi, bj - 1)) if bj > 0 else [0] * len(rows)

            previous = top
            right: List[int] = []
            for gi, left_value in zip(rows, left):
                b_char = seq_b[gi] if gi < size_b else None
                row = [left_value]
                for gj, diagonal, up in zip(cols, previous, previous[1:]):
                    if b_char is not None and gj < size_a and seq_a[gj] == b_char:
                        row.append((diagonal + 1) & SCORE_MASK)
                    else:
                        row.append(max(up, row[-1]))
                right.append(row[-1])
                previous = row

            bottoms[(bi, bj)] = previous
            rights[(bi, bj)] = right

    return bottoms[(grid_rows - 1, grid_cols - 1)][-1]


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError("the number of processes must be at least 1")
    return value


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lcs-grid",
        description="Compute the LCS score of two sequence files over a block grid.",
    )
    parser.add_argument("file_a")
    parser.add_argument("file_b")
    parser.add_argument(
        "-n",
        "--procs",
        type=_positive_int,
        default=os.cpu_count() or 1,
        help="number of grid blocks (default: number of CPUs)",
    )
    parser.add_argument(
        "--score",
        action="store_true",
        help="print the score before the time spent computing",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the grid LCS computation on two files and print the time taken."""
    args = _parse_args(argv)
    try:
        seq_a = read_sequence(args.file_a, strip_carriage_returns=True)
        seq_b = read_sequence(args.file_b, strip_carriage_returns=True)
    except SequenceReadError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    start = time.perf_counter()
    score = grid_lcs(seq_a, seq_b, args.procs)
    elapsed = time.perf_counter() - start

    if args.score:
        print(f"\nScore: {score}")
    print(f"{elapsed:0.8f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())