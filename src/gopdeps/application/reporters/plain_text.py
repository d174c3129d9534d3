"""Plain text reporter: ScanResult → one import per line."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gopdeps.domain.model.scan_result import ScanResult


class PlainTextReporter:
    """Plain text reporter for piping into other tools.

    Output is str, not print(). Caller decides destination.
    Failures are not part of the output; the scan logs them.
    """

    def __init__(self, *, group_by_kind: bool = False) -> None:
        """Initialize reporter.

        Args:
            group_by_kind: Emit "# standard", "# module", "# external"
                sections instead of one flat sorted list.
        """
        self._group_by_kind = group_by_kind

    def report(self, result: ScanResult) -> str:
        """Format imports as newline-separated text.

        Args:
            result: Scan result to format.

        Returns:
            Sorted import paths, one per line. Empty string if none.
        """
        if not self._group_by_kind:
            return "\n".join(result.sorted_imports())

        sections: list[str] = []
        for kind, paths in result.by_kind().items():
            if paths:
                sections.append("\n".join([f"# {kind.value}", *paths]))
        return "\n\n".join(sections)
