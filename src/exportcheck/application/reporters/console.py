"""Console reporter: ClassificationResult → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from exportcheck.domain.model.classification import ClassificationResult


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_artifacts: List build-output entries too, not only source ones.
        width: Console width in columns.
        color: Emit ANSI styling.
    """

    show_artifacts: bool = False
    width: int = 120
    color: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter:
    """Console reporter: one table row per project.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, results: Sequence[ClassificationResult]) -> str:
        """Format classification results as rich formatted string.

        Args:
            results: One result per checked project.

        Returns:
            Formatted table with a summary line.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        console.print(self._build_table(results))

        invalid = sum(1 for r in results if not r.valid)
        if invalid:
            console.print(f"[bold red]{invalid} of {len(results)} project(s) export source files[/bold red]")
        else:
            console.print(f"[bold green]All {len(results)} project(s) export build output[/bold green]")

        return output.getvalue()

    def _build_table(self, results: Sequence[ClassificationResult]) -> Table:
        table = Table(title="Package entry points")
        table.add_column("Project")
        table.add_column("Verdict")
        table.add_column("Entry points")

        for result in results:
            table.add_row(escape(result.project_root), self._verdict(result), self._entries(result))

        return table

    def _verdict(self, result: ClassificationResult) -> str:
        if not result.has_manifest:
            return "[dim]no package.json[/dim]"
        return "[green]valid[/green]" if result.valid else "[red]invalid[/red]"

    def _entries(self, result: ClassificationResult) -> str:
        findings = result.findings if self._config.show_artifacts else result.source_findings
        return "\n".join(escape(str(f)) for f in findings)
