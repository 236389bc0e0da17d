"""Completion engine for the `v` command line.

This package provides:
- The command, flag and compiler tables
- The engine: tokenizer, context classifier, candidate resolver and path completion
- Shell specific formatters and setup scripts (bash, zsh, fish, powershell)
- CLI handlers for the `complete` and `setup` commands
"""

from __future__ import annotations

from .context import CompletionContext, classify, tokenize
from .engine import complete_line, complete_request
from .generators import FORMATTERS, SETUP_SCRIPTS
from .handlers import get_default_path, handle_complete, handle_setup
from .host import HostSystem, LocalHost
from .tables import CompletionTables, build_tables

__all__ = [
    "FORMATTERS",
    "SETUP_SCRIPTS",
    "CompletionContext",
    "CompletionTables",
    "HostSystem",
    "LocalHost",
    "build_tables",
    "classify",
    "complete_line",
    "complete_request",
    "get_default_path",
    "handle_complete",
    "handle_setup",
    "tokenize",
]
