"""vcomplete - command line entry point.

    vcomplete [--debug FILE] [--config FILE] <shell>
    vcomplete [--debug FILE] [--config FILE] setup <shell> [default|PATH]
    vcomplete [--debug FILE] [--config FILE] complete <shell> WORD...
"""

import sys
from typing import TYPE_CHECKING

from .completions import build_tables, handle_complete, handle_setup
from .completions.tables import CompletionTables
from .config_loader import ConfigLoader
from .constants import EXECUTABLE, SUPPORTED_SHELLS
from .logging_setup import get_logger, init_logger
from .models import CompletionError, ConfigError, ExitCode

if TYPE_CHECKING:
    import logging

__all__ = ["main", "run"]

USAGE = f"""Usage:
  {EXECUTABLE} [--debug FILE] [--config FILE] <{"|".join(SUPPORTED_SHELLS)}>
  {EXECUTABLE} [--debug FILE] [--config FILE] setup <shell> [default|PATH]
  {EXECUTABLE} [--debug FILE] [--config FILE] complete <shell> WORD...

Print the completion setup script of a shell, install it, or complete a command line."""


def use_param(args: list[str], txt: str) -> str:
    """Check if parameter `txt` is in args.

    if found, removes it from args & returns the argument value
    """
    v = ""
    if txt in args:
        i = args.index(txt)
        v = args[i + 1] if i + 1 < len(args) else ""
        del args[i : i + 2]
    return v


def load_tables(config_filename: str, log: "logging.Logger", strict: bool = True) -> CompletionTables:
    """Build the completion tables from the configuration.

    Args:
        config_filename: Explicit configuration file or directory ("" for the default)
        log: Logger instance
        strict: If False, configuration errors fall back to the built-in tables
    """
    try:
        config = ConfigLoader(log).load(config_filename)
    except ConfigError:
        if strict:
            raise
        log.warning("Ignoring the configuration, using built-in tables")
        config = {}
    return build_tables(config)


def run(args: list[str], config_filename: str = "") -> int:
    """Run one command and return its exit code.

    Args:
        args: Command line arguments, without the program name
        config_filename: Explicit configuration file or directory
    """
    log = get_logger("vcomplete")

    if not args or args[0] in {"help", "--help", "-h"}:
        print(USAGE, file=sys.stderr)
        return ExitCode.SUCCESS if args else ExitCode.USAGE_ERROR

    command, rest = args[0], args[1:]

    if command == "complete":
        # the output is evaluated by the shell: never fail, never print errors on stdout
        if not rest:
            log.warning("complete requires a shell and the words to complete")
            return ExitCode.SUCCESS
        tables = load_tables(config_filename, log, strict=False)
        output = handle_complete(rest[0], rest[1:], tables, log)
        if output:
            print(output)
        return ExitCode.SUCCESS

    if command == "setup" or command in SUPPORTED_SHELLS:
        setup_args = rest if command == "setup" else [command]
        status, result = handle_setup(setup_args, load_tables(config_filename, log), log)
        if status != ExitCode.SUCCESS:
            log.error("%s", result)
            return status
        print(result)
        return status

    log.error("Unknown command: %s", command)
    print(USAGE, file=sys.stderr)
    return ExitCode.USAGE_ERROR


def main() -> None:
    """Run the command."""
    args = sys.argv[1:]
    debug_flag = use_param(args, "--debug")
    if debug_flag:
        init_logger(filename=debug_flag, force_debug=True)
    else:
        init_logger()
    log = get_logger("startup")

    config_override = use_param(args, "--config")

    try:
        code = run(args, config_override)
    except KeyboardInterrupt:
        code = ExitCode.SUCCESS
    except CompletionError:
        log.critical("Command failed.")
        code = ExitCode.ENV_ERROR
    except Exception:  # pylint: disable=W0718
        log.critical("Unhandled exception:", exc_info=True)
        code = ExitCode.ENV_ERROR
    sys.exit(code)


if __name__ == "__main__":
    main()
