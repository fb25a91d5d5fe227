"""
up_functions/cli/logging_setup.py

Configures provider logging so:
- The JSON response owns stdout (handled by the codec).
- Diagnostics/trace/debug go to stderr via logging.
- Default is WARNING: a provider runs once per template call and stays silent.
- quiet suppresses stderr chatter (ERROR only).
- trace enables DEBUG.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO


def setup_cli_logging(*, trace: bool = False, quiet: bool = False, stream: TextIO | None = None) -> None:
    """
    Configure logging for one provider run.

    - quiet=True: only ERROR logs to stderr (wins over trace)
    - trace=True: DEBUG logs to stderr
    - default: WARNING logs to stderr
    """
    if quiet:
        level = logging.ERROR
    elif trace:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    root = logging.getLogger()

    # Remove existing handlers to avoid duplicate logs in pytest runs
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(stream=stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))

    root.addHandler(handler)
    root.setLevel(level)

    # Faker logs locale resolution at DEBUG; keep it out of traces unless asked.
    logging.getLogger("faker").setLevel(logging.DEBUG if trace else logging.WARNING)
