"""JSON reporter: ScanResult → JSON string."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gopdeps.domain.model.module import Module
    from gopdeps.domain.model.scan_result import FileFailure, ScanResult


class JsonReporter:
    """JSON reporter: outputs machine-readable JSON.

    Schema mirrors ScanResult with by_kind and summary added.
    All lists are sorted, so output is stable across runs.
    """

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation. None for compact output.
        """
        self._indent = indent

    def report(self, result: ScanResult) -> str:
        """Format scan result as JSON string.

        Args:
            result: Scan result to format.

        Returns:
            JSON string with module, imports, per-file detail and summary.
        """
        data = {
            "module": _module_to_dict(result.module),
            "imports": list(result.sorted_imports()),
            "by_kind": {kind.value: list(paths) for kind, paths in result.by_kind().items()},
            "files": {
                str(path): sorted(imports)
                for path, imports in sorted(result.file_imports.items(), key=lambda item: str(item[0]))
            },
            "failures": [_failure_to_dict(f) for f in result.failures],
            "summary": _build_summary(result),
        }
        return json.dumps(data, indent=self._indent)


def _build_summary(result: ScanResult) -> dict[str, object]:
    """Build summary statistics."""
    return {
        "files": result.file_count,
        "imports": len(result.imports),
        "failures": len(result.failures),
        "passed": result.passed,
    }


def _module_to_dict(module: Module) -> dict[str, object]:
    """Convert Module to dict."""
    return {
        "path": module.path,
        "dir": str(module.dir) if module.dir is not None else None,
        "mod_file": str(module.mod_file) if module.mod_file is not None else None,
    }


def _failure_to_dict(failure: FileFailure) -> dict[str, object]:
    """Convert FileFailure to dict."""
    return {
        "path": str(failure.path),
        "reason": failure.reason,
    }
