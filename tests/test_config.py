"""Tests for configuration loading and table building."""

import pytest

from vcomplete.completions.tables import COMMANDS, GLOBAL_FLAGS, CompletionTables, build_tables
from vcomplete.config_loader import ConfigLoader
from vcomplete.logging_setup import get_logger
from vcomplete.models import ConfigError
from vcomplete.utils import merge, unique

log = get_logger("tests")

SAMPLE = """
[vcomplete]
program = "vdev"
commands = ["deploy", "build"]
global_flags = ["-trace"]
compilers = ["zig"]

[flags]
deploy = ["-target", "-dry-run"]
fmt = ["-inplace"]

[flag_values]
"-os" = ["plan9"]
"-target" = ["staging", "prod"]
"""


def test_merge_dicts():
    d1 = {"a": 1, "b": {"x": 10}}
    d2 = {"b": {"y": 20}, "c": 3}
    assert merge(d1, d2) == {"a": 1, "b": {"x": 10, "y": 20}, "c": 3}


def test_merge_lists():
    assert merge({"a": [1, 2]}, {"a": [3, 4]}) == {"a": [1, 2, 3, 4]}


def test_merge_overwrite():
    assert merge({"a": 1}, {"a": 2}) == {"a": 2}


def test_unique_keeps_first_occurrence():
    assert unique(["b", "a", "b", "c", "a"]) == ("b", "a", "c")


def test_default_tables():
    tables = build_tables({})
    assert tables == CompletionTables()
    assert tables.program == "v"
    assert tables.flags_for("run") is None
    assert tables.flags_for("build") == GLOBAL_FLAGS


def test_tables_are_read_only():
    tables = build_tables({})
    with pytest.raises(TypeError):
        tables.command_flags["run"] = ("-x",)  # type: ignore[index]
    with pytest.raises(AttributeError):
        tables.program = "x"  # type: ignore[misc]


class TestLoader:
    def test_missing_default_file(self):
        assert ConfigLoader(log).load() == {}

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigError):
            ConfigLoader(log).load(str(tmp_path / "nope.toml"))

    def test_syntax_error(self, tmp_path):
        broken = tmp_path / "broken.toml"
        broken.write_text("[vcomplete\n")
        with pytest.raises(ConfigError):
            ConfigLoader(log).load(str(broken))

    def test_file(self, tmp_path):
        conf = tmp_path / "config.toml"
        conf.write_text(SAMPLE)
        config = ConfigLoader(log).load(str(conf))
        assert config["vcomplete"]["program"] == "vdev"
        assert config["flags"]["deploy"] == ["-target", "-dry-run"]

    def test_environment_variable(self, tmp_path, monkeypatch):
        conf = tmp_path / "config.toml"
        conf.write_text(SAMPLE)
        monkeypatch.setenv("VCOMPLETE_CONFIG", str(conf))
        assert ConfigLoader(log).load()["vcomplete"]["program"] == "vdev"

    def test_default_location(self, tmp_path, monkeypatch):
        conf = tmp_path / "config.toml"
        conf.write_text(SAMPLE)
        monkeypatch.setattr("vcomplete.config_loader.CONFIG_FILE", conf)
        assert ConfigLoader(log).load()["vcomplete"]["compilers"] == ["zig"]

    def test_directory(self, tmp_path):
        (tmp_path / "10-base.toml").write_text('[vcomplete]\ncommands = ["one"]\n')
        (tmp_path / "20-more.toml").write_text('[vcomplete]\ncommands = ["two"]\n')
        (tmp_path / "notes.txt").write_text("ignored")
        config = ConfigLoader(log).load(str(tmp_path))
        assert config["vcomplete"]["commands"] == ["one", "two"]

    def test_include(self, tmp_path):
        extra = tmp_path / "extra.toml"
        extra.write_text('[flags]\ndeploy = ["-force"]\n')
        conf = tmp_path / "config.toml"
        conf.write_text(f'[vcomplete]\ninclude = ["{extra}"]\n\n[flags]\ndeploy = ["-target"]\n')
        config = ConfigLoader(log).load(str(conf))
        assert config["flags"]["deploy"] == ["-target", "-force"]


class TestBuildTables:
    @pytest.fixture
    def tables(self, tmp_path):
        conf = tmp_path / "config.toml"
        conf.write_text(SAMPLE)
        return build_tables(ConfigLoader(log).load(str(conf)))

    def test_program(self, tables):
        assert tables.program == "vdev"

    def test_commands_appended_without_duplicates(self, tables):
        assert tables.commands == (*COMMANDS, "deploy")

    def test_new_flag_table(self, tables):
        assert tables.flags_for("deploy") == ("-target", "-dry-run")

    def test_extended_flag_table(self, tables):
        assert tables.flags_for("fmt")[-1] == "-inplace"

    def test_global_flags_shared_by_build(self, tables):
        assert tables.global_flags[-1] == "-trace"
        assert tables.flags_for("build") == tables.global_flags

    def test_compilers_and_values(self, tables):
        assert tables.compilers[-1] == "zig"
        assert tables.flag_values["-os"][-1] == "plan9"
        assert tables.flag_values["-target"] == ("staging", "prod")
