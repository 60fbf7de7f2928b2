"""Command-line interface for ci-helpers."""

import os
import sys

import click

from .helpers import err, println, warn
from .prelude import DEFAULT_VAR_NAME, export_prelude, render_prelude
from .suppress import ignore_failure

# Everything after the command name is passed through untouched, --help
# included; `ci-helpers --help` lists these commands.
_PASSTHROUGH = dict(
    ignore_unknown_options=True,
    allow_interspersed_args=False,
    help_option_names=[],
)


@click.group()
@click.version_option(package_name="ci-helpers")
def main() -> None:
    """Diagnostic helpers for shell scripts and CI steps.

    \b
    Examples
    --------
        ci-helpers println 'built %s in %ss' app 42
        ci-helpers warn cache miss
        ci-helpers err deploy key missing || exit
        ci-helpers ignore-failure rm -r build/tmp
        eval "$(ci-helpers prelude)"
    """


@main.command("println", context_settings=_PASSTHROUGH)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def println_command(args: tuple[str, ...]) -> None:
    """Print FORMAT with ARGS substituted, followed by a newline."""
    println(*args)


@main.command("warn", context_settings=_PASSTHROUGH)
@click.argument("message", nargs=-1, type=click.UNPROCESSED)
def warn_command(message: tuple[str, ...]) -> None:
    """Print a warning to stderr and exit 0."""
    sys.exit(warn(" ".join(message)).exit_code)


@main.command("err", context_settings=_PASSTHROUGH)
@click.argument("message", nargs=-1, type=click.UNPROCESSED)
def err_command(message: tuple[str, ...]) -> None:
    """Print an error to stderr and exit 1."""
    sys.exit(err(" ".join(message)).exit_code)


@main.command("ignore-failure", context_settings=_PASSTHROUGH)
@click.argument("command")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def ignore_failure_command(command: str, args: tuple[str, ...]) -> None:
    """Run COMMAND; if it fails, print a warning and exit 0 anyway."""
    sys.exit(ignore_failure(command, *args).exit_code)


@main.command("prelude")
@click.option(
    "--github-env", is_flag=True, default=False,
    help="Append the helpers to the file named by $GITHUB_ENV instead of printing them.",
)
@click.option(
    "--name", envvar="CI_HELPERS_VAR",
    default=DEFAULT_VAR_NAME, show_default=True,
    help="Environment variable that carries the helpers (with --github-env).",
)
def prelude_command(github_env: bool, name: str) -> None:
    """Print the helpers as shell functions.

    Load them in a step with ``eval "$(ci-helpers prelude)"``, or once per job
    with ``--github-env`` and ``eval "$CI_HELPERS"`` in later steps.
    """
    if not github_env:
        click.echo(render_prelude(), nl=False)
        return

    env_file = os.environ.get("GITHUB_ENV")
    if not env_file:
        sys.exit(err("GITHUB_ENV is not set; --github-env only works inside GitHub Actions.").exit_code)
    try:
        export_prelude(env_file, name)
    except ValueError as e:
        sys.exit(err(str(e)).exit_code)
    except OSError as e:
        sys.exit(err(f"Could not write {env_file!r}: {e}").exit_code)


if __name__ == "__main__":
    main()
