"""Rich terminal formatter for include-cost."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..graph.models import AnalysisResult, FileMetrics
from .base import BaseFormatter

_DEFAULT_TOP = 25


def _share_style(share: float) -> str:
    if share >= 0.10:
        return "red bold"
    elif share >= 0.02:
        return "yellow"
    else:
        return "green"


class RichFormatter(BaseFormatter):
    """Summary plus the files with the largest aggregate compile cost."""

    def __init__(self, top: Optional[int] = None, console: Optional[Console] = None):
        self.top = top or _DEFAULT_TOP
        self.console = console or Console()

    def render(self, result: AnalysisResult) -> None:
        self._print_summary(result)
        self._print_costliest(result)
        self._print_most_included(result)

    def format(self, result: AnalysisResult) -> str:
        with self.console.capture() as capture:
            self.render(result)
        return capture.get()

    def _print_summary(self, result: AnalysisResult) -> None:
        c = self.console
        c.print()
        c.print("[bold cyan]INCLUDE COST[/bold cyan]")
        c.print(
            f"  [bold]{len(result.sources)}[/bold] sources, "
            f"[bold]{len(result.headers)}[/bold] headers, "
            f"[bold]{len(result.placeholders)}[/bold] external includes, "
            f"[bold]{result.edge_count}[/bold] include edges"
        )
        c.print(f"  Total code lines: [bold]{result.total_code_lines}[/bold]")
        c.print(f"  Total compiled code lines: [bold]{result.total_compiled_lines}[/bold]")
        c.print()

    def _print_costliest(self, result: AnalysisResult) -> None:
        ranked = sorted(
            result.files.values(), key=lambda m: (-m.compile_cost_total, m.path)
        )[: self.top]
        if not ranked:
            self.console.print("[yellow]No files analyzed.[/yellow]")
            return

        compiled = result.total_compiled_lines or 1
        table = Table(title="Largest contributors to compilation", show_header=True)
        table.add_column("File", style="cyan")
        table.add_column("Code lines", justify="right")
        table.add_column("Includes", justify="right")
        table.add_column("With includes", justify="right")
        table.add_column("Sources", justify="right")
        table.add_column("Cmp (self)", justify="right")
        table.add_column("Cmp (total)", justify="right")

        for m in ranked:
            table.add_row(*self._row(m, compiled))
        self.console.print(table)
        self.console.print()

    @staticmethod
    def _row(m: FileMetrics, compiled: int) -> list[str]:
        style = _share_style(m.compile_cost_self / compiled)
        return [
            escape(m.path),
            str(m.code_lines),
            f"{m.direct_includes} / {m.transitive_includes}",
            str(m.total_contribution),
            str(m.source_includers) if not m.is_source else "-",
            f"[{style}]{m.compile_cost_self}[/{style}]",
            str(m.compile_cost_total),
        ]

    def _print_most_included(self, result: AnalysisResult) -> None:
        shown = [n for n in result.most_included if self._in_degree(result, n) > 0][: self.top]
        if not shown:
            return
        self.console.print("[bold]Most included[/bold]")
        for node in shown:
            count = self._in_degree(result, node)
            self.console.print(f"  {escape(result.label(node))} [dim]({count} includers)[/dim]")
        self.console.print()

    @staticmethod
    def _in_degree(result: AnalysisResult, node: str) -> int:
        if node in result.files:
            return result.files[node].included_by
        return result.placeholders[node].included_by
