# test_suppress.py
#
# Tests:
# - run_command: exit status of the child is reported
# - run_command: missing executable is status 127
# - run_command: any other failure to start (not a directory, not executable,
#   no shebang) is status 126
# - ignore_failure: failing command emits exactly one warning and succeeds
# - ignore_failure: succeeding command emits nothing and succeeds
# - ignore_failure: missing command is warned about, not raised
# - ignore_failure: commands that cannot start are warned about, not raised
# - ignore_failure: callables that raise or return a failed Outcome are warned about
# - ignore_failure: callables that succeed are silent

import os
import sys

import pytest

from ci_helpers.helpers import WARNING_MARKER
from ci_helpers.models import Outcome
from ci_helpers.suppress import ignore_failure, run_command

_EXIT_1 = [sys.executable, "-c", "raise SystemExit(1)"]
_EXIT_0 = [sys.executable, "-c", "pass"]
_MISSING = "ci-helpers-no-such-command-xyz"


def _not_a_directory(tmp_path):
    plain = tmp_path / "plain.txt"
    plain.write_text("data\n", encoding="utf-8")
    return str(plain / "child")


def _not_executable(tmp_path):
    script = tmp_path / "script.sh"
    script.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    os.chmod(script, 0o644)
    return str(script)


def _no_shebang(tmp_path):
    script = tmp_path / "noshebang"
    script.write_text("echo hi\n", encoding="utf-8")
    os.chmod(script, 0o755)
    return str(script)


_CANNOT_START = pytest.mark.parametrize(
    "make_path", [_not_a_directory, _not_executable, _no_shebang]
)
_POSIX_ONLY = pytest.mark.skipif(sys.platform == "win32", reason="POSIX exec semantics")


# ---------------------------------------------------------------------------
# run_command
# ---------------------------------------------------------------------------

class TestRunCommand:
    def test_reports_exit_status(self):
        result = run_command(sys.executable, "-c", "raise SystemExit(3)")
        assert result.returncode == 3
        assert result.failed
        assert result.argv[0] == sys.executable

    def test_success(self):
        assert not run_command(*_EXIT_0).failed

    def test_missing_command(self):
        result = run_command(_MISSING)
        assert result.returncode == 127

    @_POSIX_ONLY
    @_CANNOT_START
    def test_cannot_start(self, make_path, tmp_path):
        result = run_command(make_path(tmp_path))
        assert result.returncode == 126


# ---------------------------------------------------------------------------
# ignore_failure with processes
# ---------------------------------------------------------------------------

class TestIgnoreFailureCommand:
    def test_failure_becomes_single_warning(self, capsys):
        outcome = ignore_failure(*_EXIT_1)
        captured = capsys.readouterr()
        lines = captured.err.splitlines()
        assert len(lines) == 1
        assert lines[0].startswith(f"{WARNING_MARKER} ")
        assert "exit status 1" in lines[0]
        assert "SystemExit(1)" in lines[0]
        assert outcome.ok
        assert outcome.exit_code == 0

    def test_success_is_silent(self, capsys):
        outcome = ignore_failure(*_EXIT_0)
        captured = capsys.readouterr()
        assert captured.err == ""
        assert outcome.ok

    def test_missing_command_is_warned(self, capsys):
        outcome = ignore_failure(_MISSING, "--flag")
        line = capsys.readouterr().err.strip()
        assert "exit status 127" in line
        assert f"{_MISSING} --flag" in line
        assert outcome.ok

    @_POSIX_ONLY
    @_CANNOT_START
    def test_cannot_start_is_warned(self, make_path, tmp_path, capsys):
        outcome = ignore_failure(make_path(tmp_path))
        lines = capsys.readouterr().err.splitlines()
        assert len(lines) == 1
        assert lines[0].startswith(f"{WARNING_MARKER} ")
        assert "exit status 126" in lines[0]
        assert outcome.ok


# ---------------------------------------------------------------------------
# ignore_failure with callables
# ---------------------------------------------------------------------------

def _boom(path):
    raise OSError(f"cannot remove {path}")


def _reports_failure():
    return Outcome.failure("nothing to prune")


class TestIgnoreFailureCallable:
    def test_exception_is_warned(self, capsys):
        outcome = ignore_failure(_boom, "/tmp/x")
        lines = capsys.readouterr().err.splitlines()
        assert len(lines) == 1
        assert "_boom" in lines[0]
        assert "cannot remove /tmp/x" in lines[0]
        assert outcome.ok

    def test_failed_outcome_is_warned(self, capsys):
        outcome = ignore_failure(_reports_failure)
        line = capsys.readouterr().err
        assert "nothing to prune" in line
        assert outcome.ok

    def test_success_is_silent(self, capsys):
        calls = []
        outcome = ignore_failure(calls.append, 1)
        assert calls == [1]
        assert capsys.readouterr().err == ""
        assert outcome.ok
