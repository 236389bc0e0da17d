"""PowerShell output: one candidate per line."""

from __future__ import annotations

__all__ = ["format_powershell", "setup_powershell"]


def format_powershell(candidates: list[str]) -> str:
    """Render the candidates, one per line."""
    return "\n".join(candidates)


def setup_powershell(program: str, executable: str) -> str:
    """Generate the PowerShell argument completer for `program`."""
    return f"""# PowerShell completion for {program}
# Generated by: {executable} setup powershell

Register-ArgumentCompleter -Native -CommandName {program} -ScriptBlock {{
    param($wordToComplete, $commandAst, $cursorPosition)
    $length = $cursorPosition - $commandAst.Extent.StartOffset
    $line = $commandAst.Extent.Text.PadRight($length).Substring(0, $length)
    {executable} complete powershell "$line" | ForEach-Object {{
        [System.Management.Automation.CompletionResult]::new($_, $_, 'ParameterValue', $_)
    }}
}}
"""
