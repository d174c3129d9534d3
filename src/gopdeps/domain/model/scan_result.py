"""Result of scanning a module tree."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from gopdeps.domain.model.classification import classify_import
from gopdeps.domain.model.enums import DependencyKind
from gopdeps.domain.model.module import Module


@dataclass(frozen=True, slots=True)
class FileFailure:
    """File that could not be parsed during a scan.

    Attributes:
        path: File path
        reason: Error message (includes location for syntax errors)
    """

    path: Path
    reason: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")
        if not self.reason:
            raise ValueError("reason must not be empty")


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Dependency set of one module plus per-file detail.

    Attributes:
        module: Scanned module
        imports: Union of canonical imports over all parsed files
        file_imports: Parsed file → its canonical imports
        failures: Files that failed to parse
    """

    module: Module
    imports: frozenset[str]
    file_imports: Mapping[Path, frozenset[str]] = field(default_factory=lambda: MappingProxyType({}))
    failures: tuple[FileFailure, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.module is None:
            raise TypeError("module must not be None")

        union: set[str] = set()
        for imports in self.file_imports.values():
            union.update(imports)
        if not union <= self.imports:
            raise ValueError(f"file_imports not covered by imports: {sorted(union - self.imports)}")

        failed = {f.path for f in self.failures}
        both = failed & set(self.file_imports)
        if both:
            raise ValueError(f"files both parsed and failed: {sorted(map(str, both))}")

    @property
    def passed(self) -> bool:
        """True if every file parsed."""
        return not self.failures

    @property
    def file_count(self) -> int:
        """Number of successfully parsed files."""
        return len(self.file_imports)

    def sorted_imports(self) -> tuple[str, ...]:
        """All imports in lexical order."""
        return tuple(sorted(self.imports))

    def by_kind(self) -> Mapping[DependencyKind, tuple[str, ...]]:
        """Imports grouped by DependencyKind, each group sorted.

        Every kind is present, possibly with an empty tuple.
        """
        grouped: dict[DependencyKind, list[str]] = {kind: [] for kind in DependencyKind}
        for path in sorted(self.imports):
            grouped[classify_import(path, self.module.path)].append(path)
        return MappingProxyType({kind: tuple(paths) for kind, paths in grouped.items()})

    @classmethod
    def empty(cls, module: Module) -> ScanResult:
        """Result of a scan that found no files."""
        return cls(module=module, imports=frozenset())
