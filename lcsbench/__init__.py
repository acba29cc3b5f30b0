"""Longest common subsequence scoring with sequential, wavefront and grid strategies."""

__version__ = "0.1.0"
__all__ = ["grid", "matrix", "sequence", "sequential", "wavefront"]