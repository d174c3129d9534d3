"""Console reporter: ScanResult → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gopdeps.domain.model.enums import DependencyKind

if TYPE_CHECKING:
    from gopdeps.domain.model.scan_result import ScanResult

_KIND_STYLES = {
    DependencyKind.STANDARD: "cyan",
    DependencyKind.MODULE: "green",
    DependencyKind.EXTERNAL: "yellow",
}


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_files: Add a table of per-file import counts.
        force_terminal: Emit ANSI styles even when not writing to a tty.
        width: Console width in characters.
    """

    show_files: bool = False
    force_terminal: bool = True
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: ScanResult) -> str:
        """Format scan result as rich formatted string.

        Args:
            result: Scan result to format.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.force_terminal,
            width=self._config.width,
        )

        self._render_header(console, result)
        self._render_imports(console, result)

        if self._config.show_files:
            self._render_files(console, result)

        if result.failures:
            self._render_failures(console, result)

        return output.getvalue()

    def _render_header(self, console: Console, result: ScanResult) -> None:
        """Render header with summary."""
        console.print()
        console.rule(f"[bold]DEPENDENCIES OF {result.module.path}[/bold]")
        console.print()

        counts = [f"{kind.value}: {len(paths)}" for kind, paths in result.by_kind().items()]
        console.print(
            f"[bold]Files:[/bold] {result.file_count}  "
            f"[bold]Imports:[/bold] {len(result.imports)} ({', '.join(counts)})",
        )
        console.print()

    def _render_imports(self, console: Console, result: ScanResult) -> None:
        """Render imports table grouped by kind."""
        if not result.imports:
            console.print("[dim]No imports found.[/dim]")
            console.print()
            return

        table = Table(show_header=True, header_style="bold")
        table.add_column("Kind", no_wrap=True)
        table.add_column("Import path")

        for kind, paths in result.by_kind().items():
            style = _KIND_STYLES[kind]
            for path in paths:
                table.add_row(f"[{style}]{kind.value}[/{style}]", path)

        console.print(table)
        console.print()

    def _render_files(self, console: Console, result: ScanResult) -> None:
        """Render per-file import counts."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("File")
        table.add_column("Imports", justify="right")

        for path, imports in sorted(result.file_imports.items(), key=lambda item: str(item[0])):
            table.add_row(escape(str(path)), str(len(imports)))

        console.print(table)
        console.print()

    def _render_failures(self, console: Console, result: ScanResult) -> None:
        """Render files that failed to parse."""
        console.print(f"[bold red]FAILURES[/bold red] ({len(result.failures)})")
        console.print()

        table = Table(show_header=True, header_style="bold red")
        table.add_column("File")
        table.add_column("Reason")

        for failure in result.failures:
            table.add_row(escape(str(failure.path)), escape(failure.reason))

        console.print(table)
        console.print()
