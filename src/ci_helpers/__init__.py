"""ci-helpers: diagnostic print, warning, error and failure-suppression helpers."""

from .helpers import ERROR_MARKER, WARNING_MARKER, err, println, warn
from .models import CommandResult, Outcome
from .suppress import ignore_failure, run_command

__version__ = "0.1.0"
__all__ = [
    "CommandResult",
    "ERROR_MARKER",
    "Outcome",
    "WARNING_MARKER",
    "err",
    "ignore_failure",
    "println",
    "run_command",
    "warn",
]
