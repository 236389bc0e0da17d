"""Shared constants for vcomplete."""

import os
from pathlib import Path

from .models import Shell

__all__ = [
    "COMPILER_FLAG",
    "COMPLETE_COMMAND",
    "CONFIG_FILE",
    "DEFAULT_PROGRAM",
    "EXECUTABLE",
    "FLAG_PREFIX",
    "HELP_KEYWORD",
    "HOME_SHORTHAND",
    "SUPPORTED_SHELLS",
]

# Config file path - use XDG_CONFIG_HOME with fallback to ~/.config
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
CONFIG_FILE = _xdg_config_home / "vcomplete" / "config.toml"

# Program the completion hook is registered for
DEFAULT_PROGRAM = "v"

# Name of our own executable, called back by the shell hooks
EXECUTABLE = "vcomplete"

SUPPORTED_SHELLS = tuple(shell.value for shell in Shell)

# Command line grammar
FLAG_PREFIX = "-"
HOME_SHORTHAND = "~"

# `v help<TAB>` lists the subcommands
HELP_KEYWORD = "help"
# Never offered after `help`
COMPLETE_COMMAND = "complete"

# Value completion for this flag only lists compilers found on the host
COMPILER_FLAG = "-cc"
