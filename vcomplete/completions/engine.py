"""Completion pipeline: tokenize, classify, resolve, fall back to paths."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..logging_setup import get_logger
from .context import classify, tokenize
from .host import LocalHost
from .paths import complete_path
from .resolver import resolve
from .tables import CompletionTables

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .host import HostSystem

__all__ = ["complete_line", "complete_request"]


def complete_line(line: str, tables: CompletionTables | None = None, host: HostSystem | None = None) -> list[str]:
    """Return the candidates for a command line typed up to the cursor.

    Args:
        line: Words typed so far, space separated, trailing space included
        tables: Command and flag tables (built-in ones by default)
        host: Host system access (the local machine by default)
    """
    if not line:
        return []
    tables = tables or CompletionTables()
    host = host or LocalHost()

    tokens = tokenize(line)
    if len(tokens) <= 1:
        # only the program name: every command
        return list(tables.commands)

    context = classify(tokens)
    get_logger("completions").debug("Completing %r", context)
    candidates = resolve(context, tables, host)
    if not candidates:
        candidates = complete_path(context.current_token, tables, host)
    return candidates


def complete_request(words: Sequence[str], tables: CompletionTables | None = None, host: HostSystem | None = None) -> list[str]:
    """Return the candidates for the words passed by a shell hook.

    The words are joined with spaces, so a hook may pass the whole line as one
    word or every word separately.
    """
    return complete_line(" ".join(words), tables, host)
