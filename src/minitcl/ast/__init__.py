"""AST node types for minitcl scripts."""

from .types import (
    BareWord,
    CommandNode,
    Fragment,
    Literal,
    QuotedWord,
    SubstWord,
    VariableRef,
    Word,
)
from .serialize import to_script

__all__ = [
    "BareWord",
    "CommandNode",
    "Fragment",
    "Literal",
    "QuotedWord",
    "SubstWord",
    "VariableRef",
    "Word",
    "to_script",
]
