"""Reading sequences from plain-text files."""

from __future__ import annotations

import os
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


class SequenceReadError(OSError):
    """Raised when a sequence file cannot be read."""

    def __init__(self, path: PathLike, reason: str = "") -> None:
        self.path = os.fspath(path)
        message = f"Error reading file {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


def read_sequence(path: PathLike, strip_carriage_returns: bool = False) -> str:
    """Read a sequence from ``path``, dropping line feeds.

    Each byte of the file becomes one character. Line feeds are removed.
    Carriage returns are removed too when ``strip_carriage_returns`` is set.
    The sequence ends at the first NUL byte, if the file holds one.
    """
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise SequenceReadError(path, exc.strerror or str(exc)) from exc

    unwanted = b"\n\r" if strip_carriage_returns else b"\n"
    data = data.translate(None, unwanted)
    data = data.split(b"\0", 1)[0]
    return data.decode("latin-1")