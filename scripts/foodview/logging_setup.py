"""Root logger configuration for the CLI and the TUI."""

from __future__ import annotations

import logging
import sys

from foodview.config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# The TUI owns the terminal, so its records go to a file.
TUI_LOG_FILE = "foodfacts.log"


def setup_logging(settings: Settings, *, tui: bool = False) -> None:
    """Configure the root logger from settings."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    log_file = settings.log_file or (TUI_LOG_FILE if tui else "")
    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.setLevel(level)
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)

    logging.captureWarnings(True)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
