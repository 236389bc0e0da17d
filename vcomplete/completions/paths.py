"""Filesystem path completion.

Mimics the file completion of the shells when no command, flag or flag value
matches: `~` is expanded (and restored on output), the directory to list is
derived from the token and directories get a trailing separator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..constants import HOME_SHORTHAND
from ..logging_setup import get_logger

if TYPE_CHECKING:
    from .host import HostSystem
    from .tables import CompletionTables

__all__ = ["complete_path", "nearest_directory"]

_CURRENT_DIR = "."
_PARENT_DIR = ".."


def _join(directory: str, entry: str, sep: str) -> str:
    """Join a directory and an entry name without doubling the separator."""
    if directory.endswith(sep):
        return directory + entry
    return directory + sep + entry


def nearest_directory(path: str, host: HostSystem) -> str:
    """Return `path` or its nearest existing ancestor.

    Trailing segments are trimmed one at a time; the filesystem root (or the
    current directory for a relative path) is the last resort. Returned paths
    other than the last resort end with the separator.
    """
    sep = host.path_separator()
    root = sep if path.startswith(sep) else _CURRENT_DIR
    candidate = path
    while candidate and candidate != root and not host.is_directory(candidate):
        candidate = candidate.rstrip(sep).rpartition(sep)[0]
        if candidate:
            candidate += sep
    return candidate or root


def _expand_home(part: str, host: HostSystem) -> tuple[str, str]:
    """Expand a leading home shorthand.

    Returns:
        Tuple of (expanded token, home directory or "" if nothing was expanded)
    """
    if not part.startswith(HOME_SHORTHAND):
        return part, ""
    sep = host.path_separator()
    home = host.home_directory().rstrip(sep) or sep
    suffix = sep if part == HOME_SHORTHAND else ""
    return home + part[len(HOME_SHORTHAND) :] + suffix, home


def _restore_home(candidate: str, home: str, sep: str) -> str:
    """Replace a leading home directory by the shorthand, on segment boundaries only."""
    if candidate == home:
        return HOME_SHORTHAND
    home_dir = _join(home, "", sep)
    if candidate.startswith(home_dir):
        return HOME_SHORTHAND + sep + candidate[len(home_dir) :]
    return candidate


def _listing_plan(part: str, tables: CompletionTables, host: HostSystem) -> tuple[str, str, str]:
    """Decide what to list for `part`.

    Returns:
        Tuple of (directory to list, entry name prefix, text prepended to kept entries)
    """
    sep = host.path_separator()
    is_abs_path = part.startswith(sep)

    # 'v <command> (dir/|.|..)<tab>' -> the whole directory
    if part.endswith(sep) or part in (_CURRENT_DIR, _PARENT_DIR):
        if part in (_CURRENT_DIR, _PARENT_DIR):
            return part, "", ""
        directory = nearest_directory(part, host)
        return directory, "", "" if directory == _CURRENT_DIR else directory

    # 'v <command> dir/na<tab>' -> entries of dir/ starting with "na"
    if sep in part:
        parent, _, last = part.rpartition(sep)
        if not parent and is_abs_path:
            parent = sep
        if host.is_directory(parent):
            return parent, last, _join(parent, "", sep)

    # 'v <command> na<tab>' -> entries of the current directory starting with "na"
    if part in tables.commands:
        # the token is a complete command name: show everything
        return _CURRENT_DIR, "", ""
    return _CURRENT_DIR, part, ""


def complete_path(part: str, tables: CompletionTables, host: HostSystem) -> list[str]:
    """Return the filesystem candidates for the token `part`.

    Never raises: an unreadable directory gives no candidates.
    """
    sep = host.path_separator()
    part, home = _expand_home(part, host)
    directory, prefix, lead = _listing_plan(part, tables, host)

    try:
        entries = host.list_directory(directory)
    except OSError as e:
        get_logger("completions").debug("Can't list %s: %s", directory, e)
        return []

    candidates = []
    for entry in entries:
        if not entry.startswith(prefix):
            continue
        candidate = lead + entry
        if host.is_directory(_join(directory, entry, sep)):
            candidate += sep
        candidates.append(candidate)

    if home:
        # shells complete the token as typed: give the shorthand back
        candidates = [_restore_home(c, home, sep) for c in candidates]
    return candidates
