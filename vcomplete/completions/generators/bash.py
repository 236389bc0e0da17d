"""Bash output: COMPREPLY assignments evaluated by the completion function."""

from __future__ import annotations

__all__ = ["format_bash", "setup_bash"]


def _quote(candidate: str) -> str:
    return "'" + candidate.replace("'", "'\\''") + "'"


def format_bash(candidates: list[str]) -> str:
    """Render the candidates as `COMPREPLY+=(...)` lines."""
    return "\n".join(f"COMPREPLY+=({_quote(c)})" for c in candidates)


def setup_bash(program: str, executable: str) -> str:
    """Generate the bash completion hook for `program`."""
    func = f"_{program.replace('-', '_')}_completions"
    return f"""# Bash completion for {program}
# Generated by: {executable} setup bash

{func}() {{
    local src
    # Send the line up to the cursor, trailing space included
    src=$({executable} complete bash "${{COMP_LINE:0:$COMP_POINT}}")
    if [[ $? == 0 ]]; then
        eval "${{src}}"
    fi
}}

complete -o nospace -F {func} {program}
"""
