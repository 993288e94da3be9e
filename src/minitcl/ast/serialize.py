"""Render an AST back into script text.

The output is not the original text (groups are flattened by the parser and
cannot be recovered), but parsing it again yields an equal AST.
"""

from __future__ import annotations

from typing import Iterable

from .types import BareWord, CommandNode, Fragment, Literal, QuotedWord, SubstWord, Word


def _fragment_to_text(fragment: Fragment) -> str:
    if isinstance(fragment, Literal):
        return fragment.text
    # Braced form so the name never runs into a following literal
    return "${" + fragment.name + "}"


def word_to_text(word: Word) -> str:
    """Render a single word."""
    if isinstance(word, BareWord):
        text = "".join(_fragment_to_text(f) for f in word.fragments)
        # `;` is only a word character inside a group
        if any(isinstance(f, Literal) and ";" in f.text for f in word.fragments):
            return "{" + text + "}"
        return text
    if isinstance(word, QuotedWord):
        return '"' + "".join(_fragment_to_text(f) for f in word.fragments) + '"'
    if isinstance(word, SubstWord):
        return "[" + command_to_text(word.command) + "]"
    raise TypeError(f"Unknown word type: {type(word).__name__}")


def command_to_text(command: CommandNode) -> str:
    """Render a command as space-separated words."""
    return " ".join(word_to_text(w) for w in command.words)


def to_script(commands: Iterable[CommandNode]) -> str:
    """Render a parsed script, one command per line."""
    return "\n".join(command_to_text(c) for c in commands)
