"""vcomplete - shell auto-completion for the `v` command line.

Given the partial command line typed into an interactive shell, works out
whether a command, a flag, a flag value or a filesystem path is being completed
and prints the matching candidates in the syntax the calling shell expects.
"""
