"""Word Expansion.

Resolves parsed words into strings at evaluation time:
- Literal text (decoded with unescape() inside quoted words)
- Variable references ($name, ${name}); unbound names expand to ""
- Command substitution [...], evaluated with the live variable bindings
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..ast.types import BareWord, Fragment, Literal, QuotedWord, SubstWord, VariableRef, Word
from .errors import ExecutionLimitError
from .escapes import unescape

if TYPE_CHECKING:
    from .types import InterpreterContext, Variables

log = logging.getLogger(__name__)


def get_variable(variables: "Variables", name: str) -> str:
    """Look up a variable, treating unbound names as empty."""
    return variables.get(name, "")


def expand_fragment(variables: "Variables", fragment: Fragment, quoted: bool = False) -> str:
    """Expand a single fragment."""
    if isinstance(fragment, Literal):
        return unescape(fragment.text) if quoted else fragment.text
    elif isinstance(fragment, VariableRef):
        return get_variable(variables, fragment.name)
    raise TypeError(f"Unknown fragment type: {type(fragment).__name__}")


def expand_fragments(
    variables: "Variables", fragments: tuple[Fragment, ...], quoted: bool = False
) -> str:
    """Concatenate the expansion of each fragment.

    A word made of one fragment returns that fragment's string as is, so
    plain words and lone variable references are not copied.
    """
    if len(fragments) == 1:
        return expand_fragment(variables, fragments[0], quoted)
    return "".join(expand_fragment(variables, f, quoted) for f in fragments)


def expand_subst(ctx: "InterpreterContext", word: SubstWord) -> str:
    """Evaluate a nested command and return its result."""
    state = ctx.state
    if state.substitution_depth >= ctx.limits.max_substitution_depth:
        raise ExecutionLimitError(
            f"command substitution nested too deeply (>{ctx.limits.max_substitution_depth}), "
            "increase execution_limits.max_substitution_depth",
            "substitution_depth",
        )
    state.substitution_depth += 1
    log.debug("substitution depth %d", state.substitution_depth)
    try:
        return ctx.execute_command(word.command)
    finally:
        state.substitution_depth -= 1


def expand_word(ctx: "InterpreterContext", word: Word) -> str:
    """Expand a word to its final string value."""
    if isinstance(word, BareWord):
        return expand_fragments(ctx.state.variables, word.fragments)
    elif isinstance(word, QuotedWord):
        return expand_fragments(ctx.state.variables, word.fragments, quoted=True)
    elif isinstance(word, SubstWord):
        return expand_subst(ctx, word)
    raise TypeError(f"Unknown word type: {type(word).__name__}")
