"""Failure suppression: run a command and downgrade its failure to a warning."""

import subprocess
import sys
from collections.abc import Callable

from .helpers import warn
from .models import CommandResult, Outcome

# Shell conventions for "cannot execute" and "command not found".
_EXIT_NOT_EXECUTABLE = 126
_EXIT_NOT_FOUND = 127


def run_command(command: str, *args: str) -> CommandResult:
    """Run ``command`` with ``args``, letting its output pass through.

    Parameters
    ----------
    command:
        Executable name or path, looked up on ``PATH`` as a shell would.
    args:
        Arguments passed unchanged.

    Returns
    -------
    CommandResult
        The argv that was run and its exit status. A missing executable is
        reported as status 127; any other failure to start it as 126.
    """
    argv = [str(command), *(str(a) for a in args)]

    # Keep our own buffered output ahead of the child's.
    sys.stdout.flush()
    sys.stderr.flush()

    try:
        completed = subprocess.run(argv)
    except FileNotFoundError:
        return CommandResult(argv=argv, returncode=_EXIT_NOT_FOUND)
    except PermissionError:
        return CommandResult(argv=argv, returncode=_EXIT_NOT_EXECUTABLE)
    except OSError:
        # Not a directory, exec format error and the like: it could not run.
        return CommandResult(argv=argv, returncode=_EXIT_NOT_EXECUTABLE)
    return CommandResult(argv=argv, returncode=completed.returncode)


def _call_name(func: Callable) -> str:
    return getattr(func, "__qualname__", None) or getattr(func, "__name__", None) or repr(func)


def _ignore_callable_failure(func: Callable, args: tuple) -> Outcome:
    try:
        result = func(*args)
    except Exception as exc:
        reason = str(exc) or type(exc).__name__
        return warn(f"ignoring failure: {_call_name(func)}(...): {reason}")

    if isinstance(result, Outcome) and not result.ok:
        reason = result.message or "reported failure"
        return warn(f"ignoring failure: {_call_name(func)}(...): {reason}")
    return Outcome.success()


def ignore_failure(command: str | Callable, *args) -> Outcome:
    """Run a command; if it fails, emit one warning instead of failing.

    ``command`` is either an executable (run via :func:`run_command`) or a
    Python callable invoked with ``args``. A callable fails when it raises an
    ``Exception`` or returns a failed :class:`Outcome`.

    Always returns a successful :class:`Outcome`.
    """
    if callable(command):
        return _ignore_callable_failure(command, args)

    result = run_command(command, *args)
    if result.failed:
        return warn(f"ignoring failure (exit status {result.returncode}): {result.description}")
    return Outcome.success()
