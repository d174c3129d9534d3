"""Parser and scan configuration.

Immutable configuration objects passed explicitly through constructors.
There is no process-wide default configuration.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field

DEFAULT_EXTENSIONS = frozenset({".go", ".gop"})

DEFAULT_EXCLUDE_DIRS = frozenset({"vendor", "testdata", ".git"})


@dataclass(frozen=True, slots=True)
class HeaderParserConfig:
    """Configuration for the import header parser.

    Attributes:
        optional_package_suffixes: File suffixes whose package clause may be
            omitted (Go+ files default to package main).
        encoding: Source file encoding.
    """

    optional_package_suffixes: frozenset[str] = frozenset({".gop"})
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for suffix in self.optional_package_suffixes:
            if not suffix.startswith("."):
                raise ValueError(f"suffix must start with '.', got {suffix!r}")

        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {self.encoding!r}") from e

    def requires_package_clause(self, suffix: str) -> bool:
        """Check if files with this suffix must start with a package clause."""
        return suffix not in self.optional_package_suffixes


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Configuration for scanning a module directory tree.

    Attributes:
        extensions: Source file suffixes to parse.
        exclude_dirs: Directory names never descended into.
        skip_hidden: Skip files and directories starting with '.' or '_'.
        include_tests: Parse *_test.go files.
        recursive: Descend into subdirectories.
        skip_nested_modules: Skip subdirectories that hold their own module marker.
        fail_fast: Re-raise the first parsing error instead of collecting it.
        parser: Header parser configuration.
    """

    extensions: frozenset[str] = DEFAULT_EXTENSIONS
    exclude_dirs: frozenset[str] = DEFAULT_EXCLUDE_DIRS
    skip_hidden: bool = True
    include_tests: bool = True
    recursive: bool = True
    skip_nested_modules: bool = True
    fail_fast: bool = False
    parser: HeaderParserConfig = field(default_factory=HeaderParserConfig)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.extensions:
            raise ValueError("extensions must not be empty")

        for ext in self.extensions:
            if not ext.startswith(".") or len(ext) < 2:
                raise ValueError(f"extension must look like '.go', got {ext!r}")

        for name in self.exclude_dirs:
            if not name or "/" in name:
                raise ValueError(f"exclude_dirs entries must be plain names, got {name!r}")

        if not isinstance(self.parser, HeaderParserConfig):
            raise TypeError("parser must be HeaderParserConfig")
