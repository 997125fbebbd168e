"""Centralized logging configuration.
Call setup_logging() once at application startup.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING", console: Console | None = None) -> None:
    """Route log records through rich, on stderr so stdout stays clean for --json."""
    root = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    root.setLevel(numeric_level)

    # Avoid duplicate handlers on repeated calls
    if any(isinstance(h, RichHandler) for h in root.handlers):
        for handler in root.handlers:
            handler.setLevel(numeric_level)
        return

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        log_time_format="%H:%M:%S",
    )
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter("%(name)s │ %(message)s"))
    root.addHandler(handler)
