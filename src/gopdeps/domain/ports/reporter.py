"""Reporter protocol for output formatting.

Users extend gopdeps by implementing this Protocol.
Output is str, not print(). Caller decides destination.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from gopdeps.domain.model.scan_result import ScanResult


class ReporterProtocol(Protocol):
    """Contract for scan result reporters.

    gopdeps provides PlainTextReporter, JsonReporter and ConsoleReporter.

    Example:
        class DotReporter:
            def report(self, result: ScanResult) -> str:
                lines = ["digraph deps {"]
                for imp in result.sorted_imports():
                    lines.append(f'  "{result.module.path}" -> "{imp}";')
                lines.append("}")
                return "\\n".join(lines)
    """

    def report(self, result: ScanResult) -> str:
        """Format scan result as string.

        Args:
            result: Scan result to format.

        Returns:
            Formatted string representation.
        """
        ...
