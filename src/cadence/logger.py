# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Route the cadence loggers through Rich on stderr."""
    handler = RichHandler(
        console=Console(stderr=True), show_path=False, rich_tracebacks=True
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root = logging.getLogger("cadence")
    root.handlers = [handler]
    root.setLevel(level)
    root.propagate = False
