# log.py
# Logging goes through a RichHandler bound to the app console so records
# print above the live banner instead of tearing it.

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(name)s: %(message)s"


def setup_logging(level: str = "WARNING", console: Optional[Console] = None) -> logging.Logger:
    root = logging.getLogger("glamdm")
    for h in list(root.handlers):
        root.removeHandler(h)
    handler = RichHandler(
        console=console,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    root.propagate = False
    return root
