"""Row-by-row computation of the longest common subsequence length."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Iterator, List, Optional, Sequence

from .matrix import ScoreMatrix
from .sequence import SequenceReadError, read_sequence

# Scores are held as 16-bit unsigned values.
SCORE_MASK = 0xFFFF


def _score_rows(seq_a: str, seq_b: str) -> Iterator[List[int]]:
    """Yield the rows of the score matrix, first row of zeroes included."""
    previous = [0] * (len(seq_a) + 1)
    yield previous
    for b_char in seq_b:
        row = [0]
        for a_char, diagonal, up in zip(seq_a, previous, previous[1:]):
            if a_char == b_char:
                row.append((diagonal + 1) & SCORE_MASK)
            else:
                row.append(max(up, row[-1]))
        yield row
        previous = row


def fill_score_matrix(seq_a: str, seq_b: str) -> ScoreMatrix:
    """Return the complete score matrix for the two sequences."""
    return ScoreMatrix(list(_score_rows(seq_a, seq_b)))


def lcs_length(seq_a: str, seq_b: str) -> int:
    """Return the length of the longest common subsequence."""
    last: List[int] = [0]
    for last in _score_rows(seq_a, seq_b):
        pass
    return last[-1]


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lcs-seq",
        description="Compute the LCS score of two sequence files.",
    )
    parser.add_argument("file_a", nargs="?", default="fileA.in")
    parser.add_argument("file_b", nargs="?", default="fileB.in")
    parser.add_argument(
        "--debug-matrix",
        action="store_true",
        help="print the whole score matrix",
    )
    parser.add_argument(
        "--sequential-fraction",
        action="store_true",
        help="print only the share of run time spent outside the computation",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sequential LCS computation on two files."""
    total_start = time.perf_counter()
    args = _parse_args(argv)
    try:
        seq_a = read_sequence(args.file_a)
        seq_b = read_sequence(args.file_b)
    except SequenceReadError as exc:
        print(f"Error reading file {exc.path}")
        return 1

    start = time.perf_counter()
    matrix = fill_score_matrix(seq_a, seq_b)
    elapsed = time.perf_counter() - start
    score = matrix.score()

    if args.debug_matrix:
        sys.stdout.write(matrix.render(seq_a, seq_b))

    if args.sequential_fraction:
        total = time.perf_counter() - total_start
        fraction = (total - elapsed) / total if total > 0 else 0.0
        print(f"{fraction:0.8f}")
    else:
        print(f"\nScore: {score} tempo: {elapsed:0.8f}")
        sys.stdout.write(f"{elapsed:0.8f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())