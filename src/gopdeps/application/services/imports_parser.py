"""Imports parser: accumulates the canonical dependency set of a module.

Orchestrates header parsing, literal decoding and canonicalization.
FAIL-FIRST: header errors propagate unchanged and leave the set untouched.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from gopdeps.application.discovery.files import is_ignored_name
from gopdeps.domain.ports.module_context import ModuleContext
from gopdeps.infrastructure.adapters.header_parser import GoHeaderParser
from gopdeps.infrastructure.analyzers.canonical import canonicalize
from gopdeps.infrastructure.analyzers.literal import decode_string_literal

if TYPE_CHECKING:
    from collections.abc import Iterator

    from gopdeps.domain.model.configuration import HeaderParserConfig
    from gopdeps.domain.model.fileset import FileSet
    from gopdeps.domain.ports.source_parser import SourceParserPort

logger = logging.getLogger(__name__)


class ImportsParser:
    """Per-session accumulator of canonical import paths.

    One instance per analysis session (a package or a module walk).
    The accumulated set only grows. Not safe for concurrent use: give
    each worker its own parser and combine them with merge_imports().

    Example:
        >>> parser = ImportsParser(FileSet(), Module("example.com/app"))
        >>> parser.parse_imports("main.go")
        frozenset({'fmt', 'example.com/app/util'})
        >>> parser.imports
        frozenset({'fmt', 'example.com/app/util'})
    """

    def __init__(
        self,
        fset: FileSet,
        module: ModuleContext,
        *,
        source_parser: SourceParserPort | None = None,
        config: HeaderParserConfig | None = None,
    ) -> None:
        """Initialize parser.

        Args:
            fset: Shared position context
            module: Module owning every file parsed by this instance
            source_parser: Header parser. Defaults to GoHeaderParser(fset, config).
            config: Header parser configuration (only without source_parser)

        Raises:
            TypeError: If fset or module is None, or module has no path
            ValueError: If both source_parser and config are given
        """
        if fset is None:
            raise TypeError("fset must not be None")
        if module is None:
            raise TypeError("module must not be None")
        if not isinstance(module, ModuleContext):
            raise TypeError(f"module must provide a 'path' property, got {type(module).__name__}")
        if source_parser is not None and config is not None:
            raise ValueError("config applies to the default parser only; configure source_parser instead")

        self._fset = fset
        self._module = module
        self._source_parser = source_parser or GoHeaderParser(fset, config)
        self._imports: set[str] = set()

    @property
    def fset(self) -> FileSet:
        """Shared position context."""
        return self._fset

    @property
    def module(self) -> ModuleContext:
        """Module owning the parsed files."""
        return self._module

    @property
    def imports(self) -> frozenset[str]:
        """Snapshot of the accumulated canonical import paths."""
        return frozenset(self._imports)

    def sorted_imports(self) -> tuple[str, ...]:
        """Accumulated imports in lexical order."""
        return tuple(sorted(self._imports))

    def parse_imports(self, path: Path | str) -> frozenset[str]:
        """Parse one file's import header into the accumulated set.

        Every import is decoded and canonicalized before any is added,
        so a failing file contributes nothing.

        Args:
            path: Source file

        Returns:
            Canonical imports of this file

        Raises:
            ParsingError: If the file cannot be read or its header is malformed
        """
        specs = self._source_parser.parse_imports(Path(path))
        found = frozenset(canonicalize(decode_string_literal(spec.path), self._module) for spec in specs)

        before = len(self._imports)
        self._imports.update(found)
        logger.debug(
            "%s: %d imports, %d new, %d accumulated",
            path,
            len(found),
            len(self._imports) - before,
            len(self._imports),
        )
        return found

    def parse_dir(
        self,
        directory: Path | str,
        *,
        extensions: tuple[str, ...] = (".go", ".gop"),
    ) -> frozenset[str]:
        """Parse every source file directly inside directory (one package).

        Files are parsed in name order. Names starting with '.' or '_'
        are skipped. Stops at the first failing file.

        Args:
            directory: Package directory
            extensions: File suffixes to parse

        Returns:
            Union of the files' canonical imports

        Raises:
            ValueError: If directory is not a directory
            ParsingError: If a file cannot be parsed
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise ValueError(f"directory must be a directory: {directory}")

        found: set[str] = set()
        for path in _package_files(directory, extensions):
            found.update(self.parse_imports(path))
        return frozenset(found)

    def __len__(self) -> int:
        """Number of accumulated imports."""
        return len(self._imports)

    def __contains__(self, import_path: object) -> bool:
        """Check if import_path is in the accumulated set."""
        return import_path in self._imports

    def __repr__(self) -> str:
        """Short summary."""
        return f"ImportsParser(module={self._module.path!r}, imports={len(self._imports)})"


def merge_imports(*parsers: ImportsParser) -> frozenset[str]:
    """Union of several parsers' accumulated sets."""
    merged: set[str] = set()
    for parser in parsers:
        merged.update(parser.imports)
    return frozenset(merged)


def _package_files(directory: Path, extensions: tuple[str, ...]) -> Iterator[Path]:
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if is_ignored_name(entry.name):
            continue
        if entry.suffix in extensions and entry.is_file():
            yield entry
