"""Resolved source positions."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Location:
    """A global FileSet position resolved against its file.

    Columns count characters from 1, so str() gives the
    file:line:column form compilers print.

    Attributes:
        file: Path of the registered file
        offset: Character offset into the file (>= 0)
        line: Line number (1-based)
        column: Column number (1-based)
    """

    file: Path
    offset: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.file is None:
            raise TypeError("file must not be None")
        if self.offset < 0:
            raise ValueError(f"offset must be >= 0, got {self.offset}")
        if self.line < 1:
            raise ValueError(f"line must be >= 1, got {self.line}")
        if self.column < 1:
            raise ValueError(f"column must be >= 1, got {self.column}")
        if self.column - 1 > self.offset:
            raise ValueError(f"column {self.column} lies before the start of the file (offset {self.offset})")

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"
