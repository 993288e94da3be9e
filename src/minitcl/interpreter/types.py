"""Interpreter types for minitcl."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Protocol

from ..parser.parser import MAX_NESTING_DEPTH

if TYPE_CHECKING:
    from ..ast.types import CommandNode

Variables = dict[str, str]
"""Variable bindings: one flat, case-sensitive namespace."""


class Dispatcher(Protocol):
    """Executes a resolved command by name.

    The interpreter calls eval once per command, in script order. The
    dispatcher may read and write variables for the duration of the call
    and must not keep a reference to it afterwards.
    """

    def eval(self, variables: Variables, name: str, args: list[str]) -> str:
        ...


class CommandHandler(Protocol):
    """A single command that can be registered with a CommandRegistry."""

    name: str

    def execute(self, args: list[str], variables: Variables) -> str:
        ...


@dataclass
class ExecutionLimits:
    """Execution limits for one interpreter."""

    max_substitution_depth: int = MAX_NESTING_DEPTH
    """How deeply `[ ]` substitutions may nest at evaluation time."""


@dataclass
class InterpreterState:
    """Mutable state maintained by the interpreter."""

    variables: Variables = field(default_factory=dict)
    """Current variable bindings."""

    substitution_depth: int = 0
    """Current `[ ]` nesting depth."""


@dataclass
class InterpreterContext:
    """Context provided to the expansion functions."""

    state: InterpreterState
    """Mutable interpreter state."""

    limits: ExecutionLimits
    """Execution limits."""

    execute_command: Callable[["CommandNode"], str]
    """Function to evaluate a nested command AST."""
