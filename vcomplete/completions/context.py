"""Tokenizer and context classifier.

Shells call the completion on incomplete, ungrammatical input, so the
classification is a heuristic: the parent command is found by scanning the
tokens backward and skipping everything that looks like a flag.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..constants import FLAG_PREFIX

__all__ = ["CompletionContext", "classify", "tokenize"]


@dataclass(frozen=True)
class CompletionContext:
    """What is being completed."""

    current_token: str
    parent_command: str
    is_flag: bool
    previous_token: str = ""


def tokenize(line: str) -> list[str]:
    """Split a command line on single spaces.

    Trailing whitespace is trimmed first; when there was some, an empty token
    is appended: the user is starting a new word.

    Eg:
        tokenize("v build ") == ["v", "build", ""]
    """
    trimmed = line.rstrip()
    tokens = trimmed.split(" ")
    if trimmed != line:
        tokens.append("")
    return tokens


def find_parent_command(tokens: list[str]) -> str:
    """Return the last token not starting with the flag prefix, "" if none."""
    for token in reversed(tokens):
        if token.startswith(FLAG_PREFIX):
            continue
        return token
    return ""


def classify(tokens: list[str]) -> CompletionContext:
    """Build the completion context of a tokenized command line.

    Args:
        tokens: Tokens as returned by `tokenize`, at least one
    """
    current = tokens[-1].strip(" ")
    return CompletionContext(
        current_token=current,
        parent_command=find_parent_command(tokens),
        is_flag=current.startswith(FLAG_PREFIX),
        previous_token=tokens[-2] if len(tokens) > 1 else "",
    )
