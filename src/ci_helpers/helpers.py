"""Print, warning and error helpers.

These write plain text with ``print`` so they stay decoupled from click; the
CLI layer (cli.py) only turns their results into exit codes.
"""

import sys
from typing import IO

from .models import Outcome

WARNING_MARKER = "\u26a0"
ERROR_MARKER = "\u2718"


def _format(template: object, args: tuple) -> str:
    if not args:
        return str(template)
    try:
        return str(template) % args
    except (TypeError, ValueError, OverflowError):
        # Template does not take these arguments: write everything as words.
        return " ".join(str(part) for part in (template, *args))


def println(*args: object, file: IO[str] | None = None) -> None:
    """Write a formatted line to stdout (or ``file``).

    The first argument is a ``%``-style template for the rest. With a single
    argument the template is written verbatim; with none, only the line
    terminator is written.
    """
    stream = file if file is not None else sys.stdout
    text = _format(args[0], args[1:]) if args else ""
    print(text, file=stream)


def warn(message: str) -> Outcome:
    """Emit a warning to stderr. Always succeeds."""
    println("%s %s", WARNING_MARKER, message, file=sys.stderr)
    return Outcome.success(message)


def err(message: str) -> Outcome:
    """Emit an error to stderr. Always fails."""
    println("%s %s", ERROR_MARKER, message, file=sys.stderr)
    return Outcome.failure(message)
