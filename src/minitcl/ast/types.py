"""AST node types.

A parsed script is a list of CommandNode values. Each command holds the
words it was written with; each bare or quoted word holds the fragments
(literal runs and variable references) it was built from. Nothing here is
resolved: substitution happens at evaluation time against the bindings that
are live when the command runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Literal:
    """A run of literal text.

    Inside a quoted word the text is kept raw, with its backslash escapes
    still encoded.
    """

    text: str


@dataclass(frozen=True)
class VariableRef:
    """A `$name` or `${name}` reference."""

    name: str


Fragment = Union[Literal, VariableRef]


@dataclass(frozen=True)
class BareWord:
    """An unquoted word."""

    fragments: tuple[Fragment, ...]


@dataclass(frozen=True)
class QuotedWord:
    """A double-quoted word. An empty `""` has no fragments."""

    fragments: tuple[Fragment, ...] = ()


@dataclass(frozen=True)
class SubstWord:
    """A `[...]` nested command whose result becomes the word value."""

    command: CommandNode


Word = Union[BareWord, QuotedWord, SubstWord]


@dataclass(frozen=True)
class CommandNode:
    """One command: the name word followed by argument words."""

    words: tuple[Word, ...]

    def __post_init__(self):
        if not self.words:
            raise ValueError("CommandNode requires at least one word")

    @property
    def name(self) -> Word:
        """The word that resolves to the command name."""
        return self.words[0]

    @property
    def args(self) -> tuple[Word, ...]:
        return self.words[1:]
