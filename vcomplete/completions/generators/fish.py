"""Fish output: one candidate per line."""

from __future__ import annotations

__all__ = ["format_fish", "setup_fish"]


def format_fish(candidates: list[str]) -> str:
    """Render the candidates, one per line."""
    return "\n".join(candidates)


def setup_fish(program: str, executable: str) -> str:
    """Generate the fish completion hook for `program`."""
    func = f"__{program.replace('-', '_')}_completions"
    return f"""# Fish completion for {program}
# Generated by: {executable} setup fish

function {func}
    # Send the line up to the cursor
    {executable} complete fish (commandline -cp)
end

complete -f -c {program} -a "({func})"
"""
