"""Build module entity."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Module:
    """Build module owning the files being scanned.

    Attributes:
        path: Canonical root import path (e.g. "example.com/app")
        dir: Module root directory, if known
        mod_file: Marker file the module was read from, if any
    """

    path: str
    dir: Path | None = None
    mod_file: Path | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.path:
            raise ValueError("module path must not be empty")
        if self.path != self.path.strip():
            raise ValueError(f"module path must not have surrounding whitespace: {self.path!r}")
        if self.path.endswith("/"):
            raise ValueError(f"module path must not end with '/': {self.path!r}")


def is_within_module(import_path: str, module_path: str) -> bool:
    """Check if import_path equals module_path or lies below it.

    Matches whole path elements: "example.com/app2" is not inside
    "example.com/app".
    """
    return import_path == module_path or import_path.startswith(f"{module_path}/")
