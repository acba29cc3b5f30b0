"""The LCS score matrix and its text rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

RULE = "=" * 40


@dataclass
class ScoreMatrix:
    """A score matrix with ``size_b + 1`` rows and ``size_a + 1`` columns."""

    rows: List[List[int]] = field(default_factory=lambda: [[0]])

    def __post_init__(self) -> None:
        if not self.rows or not self.rows[0]:
            raise ValueError("a score matrix needs at least one row and column")
        width = len(self.rows[0])
        if any(len(row) != width for row in self.rows):
            raise ValueError("all rows of a score matrix must be the same length")

    @classmethod
    def zeros(cls, size_a: int, size_b: int) -> "ScoreMatrix":
        """Return a matrix of zeroes for sequences of the given sizes."""
        if size_a < 0 or size_b < 0:
            raise ValueError("sequence sizes must not be negative")
        return cls([[0] * (size_a + 1) for _ in range(size_b + 1)])

    @property
    def size_a(self) -> int:
        return len(self.rows[0]) - 1

    @property
    def size_b(self) -> int:
        return len(self.rows) - 1

    def __getitem__(self, index):
        row, col = index
        return self.rows[row][col]

    def score(self) -> int:
        """Return the value in the last row and column."""
        return self.rows[-1][-1]

    def render(self, seq_a: str, seq_b: str) -> str:
        """Return the matrix as a table headed by both sequences."""
        if len(seq_a) != self.size_a or len(seq_b) != self.size_b:
            raise ValueError("sequence lengths do not match the matrix")
        lines = ["Score Matrix:", RULE]
        header = "    " + f"{' ':>5}   " + "".join(f"{c:>5}   " for c in seq_a)
        lines.append(header)
        labels = ["    "] + [f"{c}   " for c in seq_b]
        for label, row in zip(labels, self.rows):
            lines.append(label + "".join(f"{value:5d}   " for value in row))
        lines.append(RULE)
        return "\n".join(lines) + "\n"