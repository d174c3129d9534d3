"""Module resolution exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gopdeps.domain.exceptions.base import GopDepsError

if TYPE_CHECKING:
    from pathlib import Path


class ModuleResolutionError(GopDepsError):
    """Owning module of a path could not be determined.

    Attributes:
        path: Path the lookup started from (or the mod file)
        reason: Why resolution failed
    """

    def __init__(self, path: Path, reason: str) -> None:
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Cannot resolve module for {path}: {reason}")


class ModFileError(ModuleResolutionError):
    """Module marker file exists but is unreadable or malformed."""
