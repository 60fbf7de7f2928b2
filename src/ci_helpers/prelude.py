"""Shell rendering of the helpers, for carrying into CI steps.

CI runners start every step in a fresh shell. Rendering the helpers once into
an environment variable lets each step pick them up with::

    eval "$CI_HELPERS"
"""

import re
import secrets
from pathlib import Path

from .helpers import ERROR_MARKER, WARNING_MARKER

DEFAULT_VAR_NAME = "CI_HELPERS"

_VAR_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

_PRELUDE_TEMPLATE = """\
println() {
  if [ "$#" -eq 1 ]; then
    printf '%s' "$1"
  elif [ "$#" -gt 1 ]; then
    # shellcheck disable=SC2059
    printf "$@"
  fi
  printf '\\n'
}
warn() {
  println '@WARN@ %s' "$*" >&2
  return 0
}
err() {
  println '@ERROR@ %s' "$*" >&2
  return 1
}
ignore_failure() {
  "$@" || warn "ignoring failure (exit status $?): $*"
  return 0
}
"""


def render_prelude() -> str:
    """Return POSIX-shell definitions of println, warn, err and ignore_failure.

    Markers and return statuses match the Python helpers. Formatting follows
    the shell's ``printf``: surplus arguments reuse the template
    (``println '%s' a b`` prints ``ab``), where the Python :func:`println`
    falls back to space-joined words (``%s a b``).
    """
    return _PRELUDE_TEMPLATE.replace("@WARN@", WARNING_MARKER).replace("@ERROR@", ERROR_MARKER)


def github_env_block(name: str, value: str, delimiter: str | None = None) -> str:
    """Render ``name=value`` in the multi-line ``$GITHUB_ENV`` syntax.

    Raises
    ------
    ValueError
        If ``name`` is not a valid variable name, or ``delimiter`` appears as
        a line of ``value``.
    """
    if not _VAR_NAME_RE.fullmatch(name):
        raise ValueError(f"Invalid environment variable name: {name!r}")

    if delimiter is None:
        delimiter = f"EOF_{secrets.token_hex(8)}"
    if delimiter in value.splitlines():
        raise ValueError(f"Delimiter {delimiter!r} occurs in the value.")

    body = value if value.endswith("\n") else value + "\n"
    return f"{name}<<{delimiter}\n{body}{delimiter}\n"


def export_prelude(env_file: str | Path, name: str = DEFAULT_VAR_NAME) -> None:
    """Append the prelude to a ``$GITHUB_ENV``-style file under ``name``."""
    block = github_env_block(name, render_prelude())
    with open(env_file, "a", encoding="utf-8") as fh:
        fh.write(block)
