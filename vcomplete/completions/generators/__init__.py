"""Shell specific rendering.

`FORMATTERS` turn a candidate list into what the shell hook evaluates;
`SETUP_SCRIPTS` generate the hook itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .bash import format_bash, setup_bash
from .fish import format_fish, setup_fish
from .powershell import format_powershell, setup_powershell
from .zsh import format_zsh, setup_zsh

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["FORMATTERS", "SETUP_SCRIPTS"]

FORMATTERS: dict[str, Callable[[list[str]], str]] = {
    "bash": format_bash,
    "fish": format_fish,
    "zsh": format_zsh,
    "powershell": format_powershell,
}

SETUP_SCRIPTS: dict[str, Callable[[str, str], str]] = {
    "bash": setup_bash,
    "fish": setup_fish,
    "zsh": setup_zsh,
    "powershell": setup_powershell,
}
