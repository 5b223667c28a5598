"""Fatal errors raised before any traversal output is produced."""

from __future__ import annotations

from pathlib import Path


class PipeLoopError(Exception):
    """Base class for pipeloop failures."""


class MissingStartError(PipeLoopError):
    """Raised when the parsed map has no start tile."""

    def __init__(self, *, height: int, width: int) -> None:
        self.height = height
        self.width = width
        message = (
            f"No start tile 'S' found in {height}x{width} map.\n\n"
            "Remediation tips:\n"
            "  - Check that the input file is the puzzle map and not empty\n"
            "  - Set PIPELOOP_INPUT_PATH or pass the path on the command line"
        )
        super().__init__(message)


class InputReadError(PipeLoopError):
    """Raised when the input map cannot be read."""

    def __init__(self, *, path: Path, underlying: OSError) -> None:
        self.path = path
        self.underlying = underlying
        super().__init__(f"Could not read input map {path}: {underlying}")
