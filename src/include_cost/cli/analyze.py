"""Analyze command: scan directories and report include costs."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from ..config import load_config
from ..exceptions import FileAccessError, IncludeCostError, IncludeCycleError
from ..formatters import get_formatter
from ..logging_config import get_logger, setup_logging
from ..pipeline import run_analysis
from . import app
from ._common import FORMATS, console


@app.command()
def analyze(
    paths: List[Path] = typer.Argument(
        ...,
        help="Directories to scan for headers and sources",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
    fmt: str = typer.Option(
        "tsv",
        "--format",
        "-f",
        help="Output format: tsv (spreadsheet paste), json, rich",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the report to this file instead of stdout",
        dir_okay=False,
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Parallel workers for scanning",
        min=1,
        max=64,
    ),
    placeholder_lines: Optional[int] = typer.Option(
        None,
        "--placeholder-lines",
        help="Code lines charged for an include that matches no scanned file",
        min=0,
    ),
    ignore_case: bool = typer.Option(
        False,
        "--ignore-case",
        help="Match include paths case-insensitively",
    ),
    exclude: Optional[List[str]] = typer.Option(
        None,
        "--exclude",
        "-x",
        help="Glob pattern to skip (repeatable)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show progress and debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress logging",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
        dir_okay=False,
    ),
):
    """
    Estimate how much each file contributes to compilation.

    Every directory is walked recursively; #include directives are resolved
    against the files found there. The default output is tab-separated so it
    can be pasted straight into a spreadsheet.

    [bold cyan]Examples:[/bold cyan]

      include-cost analyze src include > costs.tsv

      include-cost analyze . --format rich

      include-cost analyze engine --exclude "third_party/*" -o report.json -f json
    """
    if fmt not in FORMATS:
        raise typer.BadParameter(
            f"expected one of {', '.join(FORMATS)}", param_hint="'--format'"
        )

    logger = get_logger()

    try:
        config = load_config(
            workers=workers,
            placeholder_lines=placeholder_lines,
            case_sensitive=False if ignore_case else None,
            exclude_patterns=list(exclude) if exclude else None,
            verbose=verbose,
            quiet=quiet,
        )
        logger = setup_logging(config.verbosity, log_file=str(log_file) if log_file else None)

        result = run_analysis(paths, config)
        formatter = get_formatter(fmt)

        if output is not None:
            try:
                output.write_text(formatter.format(result), encoding="utf-8")
            except OSError as e:
                raise FileAccessError(output, f"Write failed: {e}") from e
            if config.verbosity != "quiet":
                console.print(f"Report written to [green]{escape(str(output))}[/green]")
        else:
            formatter.render(result)

    except typer.Exit:
        raise
    except IncludeCycleError as e:
        console.print("[red]Error:[/red] circular include detected, no report written")
        for name in e.cycle:
            console.print(f"  {escape(name)}")
        raise typer.Exit(1)
    except IncludeCostError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
