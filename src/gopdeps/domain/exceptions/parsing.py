"""Errors raised while reading a source file header.

Every error names the file it came from; a scan records the file
and the reason as a FileFailure and moves on.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from gopdeps.domain.exceptions.base import GopDepsError

if TYPE_CHECKING:
    from gopdeps.domain.model.location import Location


class ParsingError(GopDepsError):
    """A source file whose header could not be parsed.

    Attributes:
        path: File that failed (str arguments become Path)
        reason: Human-readable cause, recorded in scan failures
    """

    def __init__(self, path: Path | str, reason: str) -> None:
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to parse {self.path}: {reason}")


class HeaderSyntaxError(ParsingError):
    """Malformed package clause or import declaration.

    The file is the one the location was resolved in. The reason
    ends with the location so a scan failure points at the token.

    Attributes:
        location: Where the offending token starts
        detail: The syntax problem alone, without location
    """

    def __init__(self, location: Location, detail: str) -> None:
        if location is None:
            raise TypeError("location must not be None")
        if not detail:
            raise ValueError("detail must be non-empty string")

        self.location = location
        self.detail = detail
        super().__init__(location.file, f"{detail} at {location}")


class SourceReadError(ParsingError):
    """File could not be read at all; raised from the underlying OSError."""
