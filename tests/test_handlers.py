"""Tests for the complete and setup handlers."""

from pathlib import Path

from vcomplete.completions.handlers import get_default_path, handle_complete, handle_setup
from vcomplete.logging_setup import get_logger
from vcomplete.models import ExitCode

log = get_logger("tests")


class TestComplete:
    def test_bash(self, tables, host):
        output = handle_complete("bash", ["v", "bui"], tables, log, host)
        assert output.splitlines() == [
            "COMPREPLY+=('build')",
            "COMPREPLY+=('build-examples')",
            "COMPREPLY+=('build-tools')",
            "COMPREPLY+=('build-vbinaries')",
        ]

    def test_fish(self, tables, host):
        assert handle_complete("fish", ["v build -sh"], tables, log, host) == "-showcc\n-show-c-output\n-show-timings"

    def test_unknown_shell_gives_nothing(self, tables, host):
        assert handle_complete("tcsh", ["v", "bui"], tables, log, host) == ""

    def test_no_candidates(self, workdir, tables, host):
        assert handle_complete("zsh", ["v", "run", "zzz"], tables, log, host) == ""


class TestSetup:
    def test_print_script(self, tables):
        status, content = handle_setup(["bash"], tables, log)
        assert status == ExitCode.SUCCESS
        assert "complete -o nospace -F _v_completions v" in content

    def test_usage(self, tables):
        status, message = handle_setup([], tables, log)
        assert status == ExitCode.USAGE_ERROR
        assert message.startswith("Usage: setup <bash|fish|zsh|powershell>")

    def test_unsupported_shell(self, tables):
        status, message = handle_setup(["tcsh"], tables, log)
        assert status == ExitCode.USAGE_ERROR
        assert "Unsupported shell: tcsh" in message

    def test_relative_path_refused(self, tables):
        status, message = handle_setup(["fish", "completions/v.fish"], tables, log)
        assert status == ExitCode.USAGE_ERROR
        assert "Relative paths not supported" in message

    def test_write_to_path(self, tables, tmp_path):
        target = tmp_path / "deep" / "v.fish"
        status, message = handle_setup(["fish", str(target)], tables, log)
        assert status == ExitCode.SUCCESS
        assert message.startswith("Completions written to")
        assert "__v_completions" in target.read_text()

    def test_write_to_default_path(self, tables, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        status, message = handle_setup(["zsh", "default"], tables, log)
        assert status == ExitCode.SUCCESS
        assert (tmp_path / ".zsh" / "completions" / "_v").exists()
        assert "fpath" in message

    def test_write_failure(self, tables, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("")
        status, message = handle_setup(["bash", str(blocker / "v")], tables, log)
        assert status == ExitCode.ENV_ERROR
        assert message.startswith("Failed to write completion file")


def test_default_path(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_default_path("bash", "v") == str(tmp_path / ".local/share/bash-completion/completions/v")
    assert get_default_path("fish", "v") == str(Path(tmp_path) / ".config/fish/completions/v.fish")
