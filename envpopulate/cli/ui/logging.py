"""Logging configuration for the CLI.

Log records go to stderr so ``--format json`` and ``--format yaml``
output on stdout stays machine readable.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)


def setup_logging(verbosity: int = 0) -> None:
    """Route package logs through a rich handler on stderr.

    Args:
        verbosity: Number of ``-v`` flags; 0 shows warnings, 1 field
            resolution summaries, 2 or more per-field debug output.
    """
    log_level = max(logging.DEBUG, logging.WARNING - 10 * verbosity)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        if isinstance(handler, RichHandler):
            root_logger.removeHandler(handler)

    handler = RichHandler(
        console=console,
        level=log_level,
        show_time=verbosity > 0,
        show_path=verbosity > 1,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root_logger.addHandler(handler)

    # Library loggers stay quiet unless asked for
    root_logger.setLevel(max(log_level, logging.INFO))
    logging.getLogger("envpopulate").setLevel(log_level)
