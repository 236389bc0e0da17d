"""Structured candidates: commands, flags and flag values.

Nothing here touches the filesystem; an empty result lets the engine fall back
to path completion.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..constants import COMPILER_FLAG, COMPLETE_COMMAND, HELP_KEYWORD
from ..logging_setup import get_logger

if TYPE_CHECKING:
    from .context import CompletionContext
    from .host import HostSystem
    from .tables import CompletionTables

__all__ = ["available_compilers", "resolve", "resolve_commands", "resolve_flag_values", "resolve_flags"]


def available_compilers(tables: CompletionTables, host: HostSystem) -> list[str]:
    """Return the known compilers which can be found on the host."""
    log = get_logger("completions")
    found = []
    for compiler in tables.compilers:
        if host.resolve_executable(compiler):
            found.append(compiler)
        else:
            log.debug("Compiler %s not found", compiler)
    return found


def resolve_flags(context: CompletionContext, tables: CompletionTables, host: HostSystem) -> list[str]:
    """Complete a flag for the parent command.

    Commands without a dedicated table use the global one, where typing the
    complete compiler flag lists the installed compilers.
    """
    part = context.current_token
    flags = tables.flags_for(context.parent_command)
    if flags is not None:
        candidates = [flag for flag in flags if flag.startswith(part)]
    else:
        candidates = []
        for flag in tables.global_flags:
            if flag == part:
                if flag == COMPILER_FLAG:
                    candidates.extend(available_compilers(tables, host))
            elif flag.startswith(part):
                candidates.append(flag)

    return candidates


def resolve_flag_values(context: CompletionContext, tables: CompletionTables, host: HostSystem) -> list[str] | None:
    """Complete the value of the previous flag.

    Returns:
        The matching values, or None if the previous token takes no known values
    """
    flag = context.previous_token
    if flag == COMPILER_FLAG:
        values: tuple[str, ...] | list[str] = available_compilers(tables, host)
    elif flag in tables.flag_values:
        values = tables.flag_values[flag]
    else:
        return None
    part = context.current_token
    return [value for value in values if value != part and value.startswith(part)]


def resolve_commands(context: CompletionContext, tables: CompletionTables) -> list[str]:
    """Complete a top-level command.

    `help` itself expands to the commands it can document.
    """
    part = context.current_token
    if part == HELP_KEYWORD:
        return [command for command in tables.commands if command not in (part, COMPLETE_COMMAND)]
    return [command for command in tables.commands if command != part and command.startswith(part)]


def resolve(context: CompletionContext, tables: CompletionTables, host: HostSystem) -> list[str]:
    """Return the structured candidates for `context` (may be empty)."""
    if context.is_flag:
        return resolve_flags(context, tables, host)
    values = resolve_flag_values(context, tables, host)
    if values is not None:
        return values
    return resolve_commands(context, tables)
