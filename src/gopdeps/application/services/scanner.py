"""Scan service: dependency set of a whole module tree.

Walks the tree, feeds every source file to one ImportsParser and
collects per-file results. Parsing failures are collected, or
re-raised with fail_fast.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType

from gopdeps.application.discovery.files import iter_source_files
from gopdeps.application.discovery.modules import find_module
from gopdeps.application.services.imports_parser import ImportsParser
from gopdeps.domain.exceptions.parsing import ParsingError
from gopdeps.domain.model.configuration import ScanConfig
from gopdeps.domain.model.fileset import FileSet
from gopdeps.domain.model.module import Module
from gopdeps.domain.model.scan_result import FileFailure, ScanResult

logger = logging.getLogger(__name__)


def scan_module(
    root: Path | str,
    config: ScanConfig | None = None,
    *,
    module: Module | None = None,
) -> ScanResult:
    """Collect the canonical imports of every source file under root.

    Args:
        root: Directory to scan
        config: Scan configuration. Uses defaults if None.
        module: Owning module. Resolved with find_module(root) if None.

    Returns:
        ScanResult with the union of imports, per-file imports and failures

    Raises:
        ValueError: If root is not a directory
        ModuleResolutionError: If module is None and none can be found
        ParsingError: First parsing failure, only with config.fail_fast
    """
    config = config or ScanConfig()
    root = Path(root)
    if not root.is_dir():
        raise ValueError(f"root must be a directory: {root}")

    if module is None:
        module = find_module(root)
    logger.info("scanning %s (module %s)", root, module.path)

    parser = ImportsParser(FileSet(), module, config=config.parser)
    file_imports: dict[Path, frozenset[str]] = {}
    failures: list[FileFailure] = []

    for path in iter_source_files(root, config):
        try:
            file_imports[path] = parser.parse_imports(path)
        except ParsingError as e:
            if config.fail_fast:
                raise
            logger.warning("%s", e)
            failures.append(FileFailure(path=path, reason=e.reason))

    logger.info(
        "scanned %d files: %d imports, %d failures",
        len(file_imports) + len(failures),
        len(parser),
        len(failures),
    )

    return ScanResult(
        module=module,
        imports=parser.imports,
        file_imports=MappingProxyType(file_imports),
        failures=tuple(failures),
    )
