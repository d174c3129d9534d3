"""Position tracking for parsed source files.

Every file handed to the header parser is registered in a FileSet and
receives a base position. A global position (base + offset) identifies
a character in exactly one registered file and resolves to a Location.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from pathlib import Path

from gopdeps.domain.model.location import Location


@dataclass(slots=True)
class SourceFile:
    """One registered file: its base position, size and line table.

    Attributes:
        name: File path as given to the parser
        base: Global position of offset 0 (>= 1)
        size: File size in characters
        _lines: Offsets of the first character of each line
    """

    name: Path
    base: int
    size: int
    _lines: list[int] = field(default_factory=lambda: [0], repr=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.name is None:
            raise TypeError("name must not be None")
        if self.base < 1:
            raise ValueError(f"base must be >= 1, got {self.base}")
        if self.size < 0:
            raise ValueError(f"size must be >= 0, got {self.size}")

    def set_lines_for_content(self, content: str) -> None:
        """Build the line table from file content.

        Args:
            content: Full file content (len must equal size)
        """
        if len(content) != self.size:
            raise ValueError(f"content length {len(content)} does not match size {self.size}")

        lines = [0]
        for offset, ch in enumerate(content):
            if ch == "\n" and offset + 1 < self.size:
                lines.append(offset + 1)
        self._lines = lines

    @property
    def line_count(self) -> int:
        """Number of lines in the line table."""
        return len(self._lines)

    def pos(self, offset: int) -> int:
        """Global position for a file offset.

        Raises:
            ValueError: If offset is outside [0, size]
        """
        if not 0 <= offset <= self.size:
            raise ValueError(f"offset {offset} out of range [0, {self.size}] for {self.name}")
        return self.base + offset

    def offset(self, pos: int) -> int:
        """File offset for a global position.

        Raises:
            ValueError: If pos does not belong to this file
        """
        if not self.base <= pos <= self.base + self.size:
            raise ValueError(f"position {pos} not in file {self.name}")
        return pos - self.base

    def location(self, offset: int) -> Location:
        """Location (1-based line and column) for a file offset."""
        self.pos(offset)  # range check
        line = bisect_right(self._lines, offset)
        column = offset - self._lines[line - 1] + 1
        return Location(file=self.name, offset=offset, line=line, column=column)


@dataclass(slots=True)
class FileSet:
    """Registry of parsed files sharing one position space.

    Mutable: grows by one SourceFile per parsed file. Not thread-safe.

    Attributes:
        _files: Registered files, ordered by base
        _bases: Base of each registered file, parallel to _files
        _base: Base for the next registered file
    """

    _files: list[SourceFile] = field(default_factory=list)
    _bases: list[int] = field(default_factory=list, repr=False)
    _base: int = 1

    @property
    def base(self) -> int:
        """Base position the next added file will receive."""
        return self._base

    @property
    def files(self) -> tuple[SourceFile, ...]:
        """All registered files in registration order."""
        return tuple(self._files)

    def add_file(self, name: Path | str, size: int) -> SourceFile:
        """Register a file and reserve positions for it.

        Positions base..base+size belong to the file (the extra one is EOF).

        Args:
            name: File path
            size: File size in characters

        Returns:
            The registered SourceFile
        """
        source_file = SourceFile(name=Path(name), base=self._base, size=size)
        self._files.append(source_file)
        self._bases.append(source_file.base)
        self._base += size + 1
        return source_file

    def file(self, pos: int) -> SourceFile | None:
        """Find the file containing pos. O(log n). None if not registered."""
        index = bisect_right(self._bases, pos) - 1
        if index < 0:
            return None
        candidate = self._files[index]
        if pos <= candidate.base + candidate.size:
            return candidate
        return None

    def location(self, pos: int) -> Location:
        """Resolve a global position to a Location.

        Raises:
            ValueError: If pos is not inside any registered file
        """
        source_file = self.file(pos)
        if source_file is None:
            raise ValueError(f"position {pos} is not inside any registered file")
        return source_file.location(source_file.offset(pos))

    def __len__(self) -> int:
        """Number of registered files."""
        return len(self._files)
