"""Zsh output: compadd calls evaluated by the completion function."""

from __future__ import annotations

__all__ = ["format_zsh", "setup_zsh"]


def format_zsh(candidates: list[str]) -> str:
    """Render the candidates as `compadd` calls."""
    lines = []
    for candidate in candidates:
        quoted = candidate.replace("'", "'\\''")
        lines.append(f"compadd -U -S \"\" -- '{quoted}';")
    return "\n".join(lines)


def setup_zsh(program: str, executable: str) -> str:
    """Generate the zsh completion hook for `program`."""
    func = f"_{program.replace('-', '_')}"
    return f"""#compdef {program}
# Zsh completion for {program}
# Generated by: {executable} setup zsh

{func}() {{
    local src
    # Send all words up to the one under the cursor, joined by spaces
    src=$({executable} complete zsh "${{(j: :)words[1,$CURRENT]}}")
    if [[ $? == 0 ]]; then
        eval "${{src}}"
    fi
}}

compdef {func} {program}
"""
