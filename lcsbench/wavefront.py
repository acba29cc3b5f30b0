"""Block-wise anti-diagonal (wavefront) computation of the LCS score matrix."""

from __future__ import annotations

import argparse
import math
import os
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

from .matrix import ScoreMatrix
from .sequence import SequenceReadError, read_sequence
from .sequential import SCORE_MASK

DEFAULT_THREADS = 16


@dataclass(frozen=True)
class Block:
    """One tile of the score matrix: matrix rows and columns it covers."""

    bi: int
    bj: int
    rows: range
    cols: range

    def describe(self) -> str:
        return (
            f"block bi={self.bi} bj={self.bj}, "
            f"rows {self.rows.start}-{self.rows.stop - 1}, "
            f"cols {self.cols.start}-{self.cols.stop - 1}"
        )


def _check_threads(num_threads: int) -> None:
    if num_threads < 1:
        raise ValueError("the number of threads must be at least 1")


def calculate_block_size(size_a: int, size_b: int, num_threads: int) -> int:
    """Return the side of a square block giving each thread a fair share.

    The side is the integer square root of the cells per thread, clamped to
    the shorter sequence, and never less than one.
    """
    _check_threads(num_threads)
    if size_a < 0 or size_b < 0:
        raise ValueError("sequence sizes must not be negative")
    per_thread = (size_a * size_b) // num_threads
    block_size = math.isqrt(per_thread)
    if block_size > size_a or block_size > size_b:
        block_size = min(size_a, size_b)
    return block_size if block_size > 0 else 1


def block_diagonals(size_a: int, size_b: int, block_size: int) -> Iterator[List[Block]]:
    """Yield the blocks of each anti-diagonal, first diagonal first.

    Blocks on one diagonal depend only on blocks of earlier diagonals, so
    they may be filled at the same time.
    """
    if block_size < 1:
        raise ValueError("the block size must be at least 1")
    if size_a < 0 or size_b < 0:
        raise ValueError("sequence sizes must not be negative")
    block_rows = -(-size_b // block_size)
    block_cols = -(-size_a // block_size)
    if block_rows == 0 or block_cols == 0:
        return
    for d in range(block_rows + block_cols - 1):
        diagonal = []
        for bi in range(max(0, d - block_cols + 1), min(d, block_rows - 1) + 1):
            bj = d - bi
            rows = range(bi * block_size + 1, min((bi + 1) * block_size, size_b) + 1)
            cols = range(bj * block_size + 1, min((bj + 1) * block_size, size_a) + 1)
            diagonal.append(Block(bi, bj, rows, cols))
        yield diagonal


def _fill_block(rows: List[List[int]], seq_a: str, seq_b: str, block: Block) -> None:
    for i in block.rows:
        row, up = rows[i], rows[i - 1]
        b_char = seq_b[i - 1]
        for j in block.cols:
            if seq_a[j - 1] == b_char:
                row[j] = (up[j - 1] + 1) & SCORE_MASK
            else:
                row[j] = max(up[j], row[j - 1])


def wavefront_lcs(seq_a: str, seq_b: str, num_threads: Optional[int] = None) -> ScoreMatrix:
    """Fill the score matrix block by block along anti-diagonals.

    Blocks on the same diagonal are handed to a pool of ``num_threads``
    workers; each diagonal is finished before the next one starts.
    """
    if num_threads is None:
        num_threads = os.cpu_count() or 1
    _check_threads(num_threads)
    size_a, size_b = len(seq_a), len(seq_b)
    matrix = ScoreMatrix.zeros(size_a, size_b)
    block_size = calculate_block_size(size_a, size_b, num_threads)

    def fill(block: Block) -> None:
        _fill_block(matrix.rows, seq_a, seq_b, block)

    with ThreadPoolExecutor(max_workers=num_threads) as pool:
        for diagonal in block_diagonals(size_a, size_b, block_size):
            # Consuming the results waits for the whole diagonal and re-raises errors.
            list(pool.map(fill, diagonal))
    return matrix


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError("the number of threads must be at least 1")
    return value


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lcs-openmp",
        description="Compute the LCS score of two sequence files block by block.",
    )
    parser.add_argument("file_a", nargs="?", default="fileA.in")
    parser.add_argument("file_b", nargs="?", default="fileB.in")
    parser.add_argument("threads", nargs="?", type=_positive_int, default=DEFAULT_THREADS)
    parser.add_argument(
        "--debug-matrix",
        action="store_true",
        help="print the block layout and the whole score matrix",
    )
    parser.add_argument(
        "--time-only",
        action="store_true",
        help="print only the time spent computing",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the wavefront LCS computation on two files."""
    args = _parse_args(argv)
    try:
        seq_a = read_sequence(args.file_a)
        seq_b = read_sequence(args.file_b)
    except SequenceReadError as exc:
        print(f"Error reading file {exc.path}")
        return 1

    if args.debug_matrix:
        block_size = calculate_block_size(len(seq_a), len(seq_b), args.threads)
        for diagonal in block_diagonals(len(seq_a), len(seq_b), block_size):
            for block in diagonal:
                print(block.describe())

    start = time.perf_counter()
    matrix = wavefront_lcs(seq_a, seq_b, args.threads)
    elapsed = time.perf_counter() - start

    if args.debug_matrix:
        sys.stdout.write(matrix.render(seq_a, seq_b))

    if not args.time_only:
        print(f"\nScore: {matrix.score()} tempo:{elapsed:0.8f}")
    sys.stdout.write(f"{elapsed:0.8f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())