"""Common types: errors, exit codes and supported shells."""

from enum import IntEnum, StrEnum

__all__ = ["CompletionError", "ConfigError", "ExitCode", "Shell"]


class CompletionError(Exception):
    """Used for errors which already triggered logging."""


class ConfigError(CompletionError):
    """The configuration could not be loaded."""


class ExitCode(IntEnum):
    """Exit codes for the command line."""

    SUCCESS = 0
    USAGE_ERROR = 1  # No command provided, invalid arguments
    ENV_ERROR = 2  # Config or filesystem problem


class Shell(StrEnum):
    """Shells with a formatter and a setup script."""

    BASH = "bash"
    FISH = "fish"
    ZSH = "zsh"
    POWERSHELL = "powershell"
