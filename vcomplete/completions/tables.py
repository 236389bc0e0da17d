"""Command, flag and compiler tables.

The built-in tables describe the `v` command line. They can be extended from
the configuration file; once built, a `CompletionTables` is never modified and
can be shared by any number of completion requests.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from ..constants import DEFAULT_PROGRAM
from ..utils import unique

__all__ = [
    "COMMANDS",
    "COMMAND_FLAGS",
    "COMPILERS",
    "FLAG_VALUES",
    "GLOBAL_FLAGS",
    "CompletionTables",
    "build_tables",
]

COMMANDS = (
    "help",
    "new",
    "init",
    "complete",
    "test",
    "test-all",
    "test-cleancode",
    "test-fmt",
    "test-parser",
    "test-self",
    "ast",
    "bin2v",
    "bug",
    "build",
    "build-examples",
    "build-tools",
    "build-vbinaries",
    "bump",
    "check-md",
    "create",
    "doc",
    "doctor",
    "fmt",
    "gret",
    "install",
    "list",
    "ls",
    "missdoc",
    "outdated",
    "remove",
    "repl",
    "retry",
    "run",
    "scan",
    "search",
    "self",
    "setup-freetype",
    "shader",
    "should-compile-all",
    "show",
    "symlink",
    "tracev",
    "translate",
    "up",
    "update",
    "upgrade",
    "vet",
    "vlib-docs",
    "watch",
    "where",
    "wipe-cache",
)

# Flags understood by `v [build] file.v`
GLOBAL_FLAGS = (
    "-apk",
    "-check-syntax",
    "-check",
    "-v",
    "-progress",
    "-silent",
    "-g",
    "-cg",
    "-prof",
    "-repl",
    "-live",
    "-enable-globals",
    "-autofree",
    "-compress",
    "-freestanding",
    "-no-builtin",
    "-no-preludes",
    "-no-bounds-checking",
    "-no-rsp",
    "-no-std",
    "-prealloc",
    "-usecache",
    "-nocache",
    "-showcc",
    "-show-c-output",
    "-dump-c-flags",
    "-dump-modules",
    "-dump-files",
    "-dump-defines",
    "-use-os-system-to-run",
    "-macosx-version-min",
    "-cflags",
    "-ldflags",
    "-d",
    "-define",
    "-cc",
    "-o",
    "-output",
    "-b",
    "-backend",
    "-os",
    "-printfn",
    "-cstrict",
    "-path",
    "-prod",
    "-skip-unused",
    "-stats",
    "-obf",
    "-translated",
    "-color",
    "-nocolor",
    "-gc",
    "-e",
    "-experimental",
    "-w",
    "-W",
    "-Wfatal-errors",
    "-Wimpure-v",
    "-show-timings",
    "-run-only",
    "-exclude",
)

COMMAND_FLAGS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "build": GLOBAL_FLAGS,
        "build-examples": GLOBAL_FLAGS,
        "bin2v": ("-h", "-help", "-m", "-module", "-p", "-prefix", "-w", "-write"),
        "doc": (
            "-all",
            "-f",
            "-h",
            "-help",
            "-m",
            "-o",
            "-readme",
            "-v",
            "-filename",
            "-pos",
            "-no-timestamp",
            "-inline-assets",
            "-theme-dir",
            "-open",
            "-p",
            "-s",
            "-l",
            "-comments",
        ),
        "fmt": ("-c", "-diff", "-l", "-w", "-debug", "-verify", "-inprocess"),
        "self": ("-prod",),
        "shader": ("-h", "-help", "-l", "-output", "-o", "-slang", "-u", "-v", "-verbose"),
        "missdoc": (
            "-h",
            "--help",
            "--tags",
            "--deprecated",
            "--private",
            "--js",
            "--no-line-numbers",
            "--exclude",
            "--verify",
            "--diff",
        ),
        "vet": ("-e", "-p", "-r", "-W", "-v", "-F", "-I", "-hide-warnings"),
        "where": ("-h", "-f", "-v"),
    }
)

COMPILERS = ("cc", "gcc", "tcc", "tinyc", "clang", "mingw", "msvc")

# Static values offered after a flag (the compiler flag is resolved on the host)
FLAG_VALUES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "-os": (
            "windows",
            "linux",
            "macos",
            "darwin",
            "freebsd",
            "openbsd",
            "netbsd",
            "dragonfly",
            "js",
            "android",
            "termux",
            "solaris",
            "serenity",
            "haiku",
            "wasm32",
            "wasm32-emscripten",
            "wasm32-wasi",
        ),
        "-b": ("c", "go", "interpret", "js", "js_node", "js_browser", "js_freestanding", "native", "wasm"),
        "-backend": ("c", "go", "interpret", "js", "js_node", "js_browser", "js_freestanding", "native", "wasm"),
        "-gc": ("none", "boehm", "boehm_full", "boehm_incr", "boehm_full_opt", "boehm_incr_opt", "boehm_leak"),
    }
)


@dataclass(frozen=True)
class CompletionTables:
    """Read-only tables consumed by the completion engine."""

    program: str = DEFAULT_PROGRAM
    commands: tuple[str, ...] = COMMANDS
    global_flags: tuple[str, ...] = GLOBAL_FLAGS
    command_flags: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: COMMAND_FLAGS)
    compilers: tuple[str, ...] = COMPILERS
    flag_values: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: FLAG_VALUES)

    def flags_for(self, command: str) -> tuple[str, ...] | None:
        """Return the dedicated flag table of `command`, None if it has none."""
        return self.command_flags.get(command)


def _extend_mapping(base: Mapping[str, tuple[str, ...]], extra: dict[str, list[str]]) -> Mapping[str, tuple[str, ...]]:
    """Return `base` with the lists of `extra` appended (or added)."""
    merged = dict(base)
    for key, values in extra.items():
        merged[key] = unique([*merged.get(key, ()), *values])
    return MappingProxyType(merged)


def build_tables(config: dict[str, Any] | None = None) -> CompletionTables:
    """Build the tables from the built-in defaults and a loaded configuration.

    Args:
        config: Configuration as returned by `ConfigLoader.load` (may be empty)
    """
    config = config or {}
    section = config.get("vcomplete", {})
    global_flags = unique([*GLOBAL_FLAGS, *section.get("global_flags", [])])
    # commands sharing the global table follow its extensions
    command_flags = {name: global_flags if flags is GLOBAL_FLAGS else flags for name, flags in COMMAND_FLAGS.items()}
    return CompletionTables(
        program=section.get("program", DEFAULT_PROGRAM),
        commands=unique([*COMMANDS, *section.get("commands", [])]),
        global_flags=global_flags,
        command_flags=_extend_mapping(command_flags, config.get("flags", {})),
        compilers=unique([*COMPILERS, *section.get("compilers", [])]),
        flag_values=_extend_mapping(FLAG_VALUES, config.get("flag_values", {})),
    )
