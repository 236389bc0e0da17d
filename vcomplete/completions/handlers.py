"""CLI handlers for the completion commands.

`handle_complete` answers a shell hook, `handle_setup` prints or installs the
hook itself.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from ..constants import EXECUTABLE, SUPPORTED_SHELLS
from ..models import ExitCode
from .engine import complete_request
from .generators import FORMATTERS, SETUP_SCRIPTS

if TYPE_CHECKING:
    import logging
    from collections.abc import Sequence

    from .host import HostSystem
    from .tables import CompletionTables

__all__ = ["DEFAULT_PATHS", "get_default_path", "handle_complete", "handle_setup"]

# Default user-level completion paths, `{program}` is the completed program
DEFAULT_PATHS = {
    "bash": "~/.local/share/bash-completion/completions/{program}",
    "zsh": "~/.zsh/completions/_{program}",
    "fish": "~/.config/fish/completions/{program}.fish",
    "powershell": "~/.config/powershell/completions/{program}.ps1",
}


def get_default_path(shell: str, program: str) -> str:
    """Get the default user-level completion path for a shell.

    Args:
        shell: Shell type ("bash", "zsh", "fish" or "powershell")
        program: Program the completions are for

    Returns:
        Expanded absolute path to the default completion file
    """
    return str(Path(DEFAULT_PATHS[shell].format(program=program)).expanduser())


def handle_complete(
    shell: str,
    words: Sequence[str],
    tables: CompletionTables,
    log: logging.Logger,
    host: HostSystem | None = None,
) -> str:
    """Return the rendered candidates for a completion request.

    Problems are logged and give an empty output: anything printed would be
    evaluated by the calling shell.

    Args:
        shell: Shell type of the calling hook
        words: Words typed so far
        tables: Command and flag tables
        log: Logger instance
        host: Host system access (the local machine by default)
    """
    formatter = FORMATTERS.get(shell)
    if formatter is None:
        log.warning("Unsupported shell: %s. Supported: %s", shell, ", ".join(SUPPORTED_SHELLS))
        return ""
    candidates = complete_request(words, tables, host)
    log.debug("%d candidates for %r", len(candidates), " ".join(words))
    return formatter(candidates)


def _get_success_message(shell: str, output_path: str, used_default: bool) -> str:
    """Generate a friendly success message after installing completions.

    Args:
        shell: Shell type
        output_path: Path where completions were written
        used_default: Whether the default path was used
    """
    # Use ~ in display path for readability
    display_path = output_path.replace(str(Path.home()), "~")

    if not used_default:
        return f"Completions written to {display_path}"

    if shell == "bash":
        return f"Completions installed to {display_path}\nReload your shell or run: source ~/.bashrc"

    if shell == "zsh":
        return (
            f"Completions installed to {display_path}\n"
            "Ensure ~/.zsh/completions is in your fpath. Add to ~/.zshrc:\n"
            "  fpath=(~/.zsh/completions $fpath)\n"
            "  autoload -Uz compinit && compinit\n"
            "Then reload your shell."
        )

    if shell == "fish":
        return f"Completions installed to {display_path}\nReload your shell or run: source ~/.config/fish/config.fish"

    if shell == "powershell":
        return f"Completions installed to {display_path}\nAdd to your $PROFILE: . {display_path}"

    return f"Completions written to {display_path}"


def _parse_setup_args(args: Sequence[str]) -> tuple[bool, str, str | None]:
    """Parse and validate setup command arguments.

    Args:
        args: Arguments after "setup" (e.g., ["zsh"] or ["zsh", "default"])

    Returns:
        Tuple of (success, shell_or_error, path_arg):
        - On success: (True, shell, path_arg or None)
        - On failure: (False, error_message, None)
    """
    if not args:
        shells = "|".join(SUPPORTED_SHELLS)
        return (False, f"Usage: setup <{shells}> [default|path]", None)

    shell = args[0]
    if shell not in SUPPORTED_SHELLS:
        return (False, f"Unsupported shell: {shell}. Supported: {', '.join(SUPPORTED_SHELLS)}", None)

    path_arg = " ".join(args[1:]) or None
    if path_arg is not None and path_arg != "default" and not path_arg.startswith(("/", "~")):
        return (False, "Relative paths not supported. Use absolute path, ~/path, or 'default'.", None)

    return (True, shell, path_arg)


def handle_setup(args: Sequence[str], tables: CompletionTables, log: logging.Logger) -> tuple[ExitCode, str]:
    """Handle the setup command with path semantics.

    Args:
        args: Arguments after "setup" (e.g., ["zsh"] or ["zsh", "default"])
        tables: Command and flag tables (for the program name)
        log: Logger instance

    Returns:
        Tuple of (exit code, result):
        - No path arg: result is the script content
        - With path arg: result is success/error message
    """
    success, shell_or_error, path_arg = _parse_setup_args(args)
    if not success:
        return (ExitCode.USAGE_ERROR, shell_or_error)

    shell = shell_or_error
    content = SETUP_SCRIPTS[shell](tables.program, EXECUTABLE)

    if path_arg is None:
        return (ExitCode.SUCCESS, content)

    if path_arg == "default":
        output_path = get_default_path(shell, tables.program)
        used_default = True
    else:
        output_path = str(Path(path_arg).expanduser())
        used_default = False

    log.debug("Writing completions to: %s", output_path)

    try:
        parent_dir = Path(output_path).parent
        parent_dir.mkdir(parents=True, exist_ok=True)
        Path(output_path).write_text(content, encoding="utf-8")
    except OSError as e:
        return (ExitCode.ENV_ERROR, f"Failed to write completion file: {e}")

    return (ExitCode.SUCCESS, _get_success_message(shell, output_path, used_default))
