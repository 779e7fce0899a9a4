"""Logging setup shared by the terminal and preview frontends."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(
    log_file: Path | None = None,
    verbose: bool = False,
    to_console: bool = False,
) -> None:
    """Configure the root logger.

    The full-screen terminal owns the tty, so records only reach the
    screen when *to_console* is set (preview mode). Otherwise they go to
    *log_file*, or nowhere.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)

    if to_console:
        root.addHandler(
            RichHandler(console=Console(stderr=True), show_path=False)
        )

    if not root.handlers:
        root.addHandler(logging.NullHandler())
