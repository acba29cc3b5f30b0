# lcsbench

`lcsbench` computes the length of the longest common subsequence (LCS) of two
sequences, such as DNA or protein strings, by filling the classic dynamic
programming score matrix. Three ways of filling the matrix are provided. All
of them give the same score, and each command reports how long the fill took,
so the strategies can be timed against each other:

- **sequential** (`lcsbench.sequential`): row by row over the whole matrix.
- **wavefront** (`lcsbench.wavefront`): the matrix is cut into square blocks,
  and the blocks of each anti-diagonal are handed to a pool of threads; one
  diagonal is finished before the next starts.
- **grid** (`lcsbench.grid`): the matrix, border row and column included, is
  cut into a balanced two-dimensional grid of tiles. Each tile is filled from
  the last row of the tile above and the last column of the tile to its left.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Input files

A sequence file is plain text. It is read byte by byte, each byte becoming one
character. Line feeds are dropped, so a long sequence may be wrapped over many
lines; the sequence ends at the first NUL byte, if there is one. Everything
else, spaces included, counts as part of the sequence. `lcs-grid` also drops
carriage returns; `lcs-seq` and `lcs-wavefront` keep them.

## Command line

```
lcs-seq [fileA.in] [fileB.in] [--debug-matrix] [--sequential-fraction]
lcs-wavefront [fileA.in] [fileB.in] [threads] [--debug-matrix] [--time-only]
lcs-grid fileA.in fileB.in [-n PROCS] [--score]
```

- `lcs-seq` reads `fileA.in` and `fileB.in` from the current directory when no
  files are given. It prints a blank line, then `Score: N tempo: T`, then the
  time `T` again with no trailing newline. `--debug-matrix` also prints the
  whole score matrix. `--sequential-fraction` prints instead only the share of
  the total run time spent outside the matrix fill.
- `lcs-wavefront` takes the same default files and a third positional
  argument, the number of threads (default 16), which sizes the blocks and the
  thread pool. It prints `Score: N tempo:T` and then the time alone;
  `--time-only` prints just the time. `--debug-matrix` lists every block, one
  diagonal after another, and prints the whole score matrix.
- `lcs-grid` needs both files. `-n`/`--procs` sets the number of tiles in the
  grid (default: the number of CPUs). It prints the time taken; `--score`
  prints the score before it.

When a file cannot be read, `lcs-seq` and `lcs-wavefront` print
`Error reading file <path>` and `lcs-grid` prints the error to standard error;
all three then exit with status 1.

## Library use

```python
from lcsbench.sequence import read_sequence, SequenceReadError
from lcsbench.sequential import lcs_length, fill_score_matrix
from lcsbench.wavefront import wavefront_lcs, calculate_block_size, block_diagonals
from lcsbench.grid import grid_lcs, dims_create, partition

lcs_length("ACGTTGCA", "AGCTAGTA")                  # an int
wavefront_lcs("ACGTTGCA", "AGCTAGTA", 4).score()    # a ScoreMatrix, blocks sized for 4 threads
grid_lcs("ACGTTGCA", "AGCTAGTA", 6)                 # an int, tiles on the grid dims_create(6) == (3, 2)

matrix = fill_score_matrix("ACGT", "AGT")
print(matrix.score())
print(matrix.render("ACGT", "AGT"))
```

- `read_sequence(path, strip_carriage_returns=False)` reads a file as described
  above and raises `SequenceReadError` (an `OSError`) when it cannot.
- `ScoreMatrix` (in `lcsbench.matrix`) holds `size_b + 1` rows of
  `size_a + 1` cells. `ScoreMatrix.zeros(size_a, size_b)` builds an empty one,
  `score()` returns the last cell, indexing with `matrix[i, j]` reads a cell,
  and `render(seq_a, seq_b)` gives the matrix as a table with the first
  sequence across the top and the second down the side.
- `calculate_block_size(size_a, size_b, num_threads)` gives the side of the
  square blocks, and `block_diagonals(size_a, size_b, block_size)` yields the
  blocks of each anti-diagonal in order.
- `dims_create(n_procs)` gives the `(rows, cols)` of the grid, and
  `partition(extent, parts, index)` the range of indices a part owns.

Scores are kept as unsigned 16-bit values, the same as the matrix cells, so
they wrap around past 65535.

## What it does not do

- It reports only the length of the longest common subsequence; it does not
  trace back the subsequence itself.
- The grid strategy runs all tiles in one process, one after another; it does
  not spread work across processes or machines.
- The wavefront strategy uses threads, which in CPython share one interpreter
  lock, so it shows the block scheduling rather than a real speed-up.