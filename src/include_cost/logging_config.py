"""
Logging for include-cost.

The report is the only thing written to stdout, so every diagnostic goes to
stderr through a rich handler. Levels follow the configured verbosity:

    quiet    errors only
    normal   warnings, such as files that are not valid UTF-8
    verbose  pipeline stages and resolver ambiguities
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_ROOT = "include_cost"

LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Route include_cost logging to stderr, and optionally to a file.

    Args:
        verbosity: One of ``quiet``, ``normal`` or ``verbose``
        log_file: Append plain-text records here as well

    Returns:
        The root include_cost logger
    """
    level = LEVELS[verbosity]
    verbose = verbosity == "verbose"

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            # include paths such as <vector> and [x] must print verbatim
            markup=False,
            show_time=verbose,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-7s %(name)s: %(message)s")
        )
        handlers.append(file_handler)

    # repeated CLI invocations in one process replace the previous handlers
    logging.basicConfig(level=level, format="%(message)s", handlers=handlers, force=True)

    logger = logging.getLogger(_ROOT)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the include_cost namespace, e.g. ``include_cost.graph.resolver``."""
    if name is None:
        return logging.getLogger(_ROOT)
    if not name.startswith(_ROOT):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
