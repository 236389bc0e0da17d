" generic fixtures "
import pytest

from vcomplete.completions.tables import CompletionTables

from .testtools import FakeHost


def pytest_configure():
    "Runs once before all"
    from vcomplete.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)


@pytest.fixture(autouse=True)
def no_user_config(monkeypatch, tmp_path):
    "Never read the configuration of the machine running the tests"
    monkeypatch.setattr("vcomplete.config_loader.CONFIG_FILE", tmp_path / "missing" / "config.toml")
    monkeypatch.delenv("VCOMPLETE_CONFIG", raising=False)


@pytest.fixture
def tables():
    "Built-in tables"
    return CompletionTables()


@pytest.fixture
def workdir(monkeypatch, tmp_path):
    "A working directory with a few files and folders"
    root = tmp_path / "work"
    root.mkdir()
    (root / "main.x").write_text("fn main() {}\n")
    (root / "lib").mkdir()
    (root / "lib" / "math.x").write_text("")
    (root / "lib" / "mem.x").write_text("")
    (root / "lib" / "sub").mkdir()
    (root / "build.sh").write_text("")
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def home(tmp_path):
    "A home directory with a few entries"
    home = tmp_path / "home" / "u"
    home.mkdir(parents=True)
    (home / "projects").mkdir()
    (home / "pictures").mkdir()
    (home / "notes.txt").write_text("")
    return home


@pytest.fixture
def host(home):
    "Local filesystem, fake home and gcc + clang installed"
    return FakeHost(home=str(home), executables=("gcc", "clang"))
