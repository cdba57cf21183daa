"""Console reporter: MatchResult -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from backup_exclude.domain.model.exclusion_set import ExclusionSet
    from backup_exclude.domain.model.match_result import MatchResult


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        show_paths: List owned paths under each pattern.
        max_paths: Max paths listed per pattern. None = unlimited.
        width: Console width in characters.
    """

    show_paths: bool = True
    max_paths: int | None = None
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_paths is not None and self.max_paths < 0:
            raise ValueError(f"max_paths must be >= 0, got {self.max_paths}")
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Renders the interactive "review what will be excluded" view.
    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: MatchResult) -> str:
        """Format match result as rich formatted string.

        Args:
            result: Match result to format.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=True,
            width=self._config.width,
            highlight=False,
        )

        self._render_header(console, result)
        if result.exclusion_set.patterns:
            self._render_table(console, result.exclusion_set)
            if self._config.show_paths:
                self._render_paths(console, result.exclusion_set)
        if result.skipped:
            self._render_skipped(console, result)

        return output.getvalue()

    def _render_header(self, console: Console, result: MatchResult) -> None:
        """Render header with summary."""
        exclusion_set = result.exclusion_set
        console.print()
        console.rule("[bold]EXCLUDE PATTERNS[/bold]")
        console.print()
        console.print(f"[bold]Source:[/bold] {escape(str(result.root))}", soft_wrap=True)
        console.print(
            f"[bold]Files:[/bold] {exclusion_set.file_count}  "
            f"[bold]Directories:[/bold] {exclusion_set.directory_count}  "
            f"[bold]Clauses:[/bold] {len(result.filter_expression)}"
        )
        console.print()

    def _render_table(self, console: Console, exclusion_set: ExclusionSet) -> None:
        """Render one row per pattern."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("Pattern")
        table.add_column("Kind")
        table.add_column("Rank", justify="right")
        table.add_column("Files", justify="right")
        table.add_column("Dirs", justify="right")

        for pattern in exclusion_set.patterns:
            table.add_row(
                escape(pattern.text),
                pattern.kind.name,
                str(pattern.rank),
                str(len(exclusion_set.files_for(pattern.text))),
                str(len(exclusion_set.directories_for(pattern.text))),
            )

        console.print(table)
        console.print()

    def _render_paths(self, console: Console, exclusion_set: ExclusionSet) -> None:
        """Render owned paths per pattern, directories first."""
        for pattern in exclusion_set.patterns:
            entries = exclusion_set.owned.get(pattern.text, ())
            if not entries:
                continue

            console.print(f"[yellow]{escape(pattern.text)}[/yellow] ({len(entries)}):")
            ordered = sorted(entries, key=lambda e: (not e.is_dir, e.path))
            shown = ordered
            if self._config.max_paths is not None:
                shown = ordered[: self._config.max_paths]
            for entry in shown:
                suffix = "/" if entry.is_dir else ""
                console.print(f"  {escape(str(entry.path))}{suffix}", soft_wrap=True)
            hidden = len(entries) - len(shown)
            if hidden:
                console.print(f"  [dim]... {hidden} more[/dim]")
            console.print()

    def _render_skipped(self, console: Console, result: MatchResult) -> None:
        """Render entries skipped because of traversal errors."""
        console.print(f"[bold red]SKIPPED ENTRIES[/bold red] ({len(result.skipped)})")
        console.print()
        for entry in result.skipped:
            console.print(f"  {escape(str(entry))}", soft_wrap=True)
        console.print()
