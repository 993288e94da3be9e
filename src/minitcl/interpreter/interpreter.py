"""Interpreter - AST Execution Engine.

Evaluates parsed commands in order against one set of variable bindings.
Word expansion lives in expansion.py; the commands themselves are executed
by an injected Dispatcher (see builtins/ for a registry-based one).
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..ast.types import CommandNode
from .expansion import expand_word
from .types import Dispatcher, ExecutionLimits, InterpreterContext, InterpreterState, Variables

log = logging.getLogger(__name__)


class Interpreter:
    """AST interpreter for minitcl scripts."""

    def __init__(
        self,
        dispatcher: Dispatcher,
        limits: Optional[ExecutionLimits] = None,
        state: Optional[InterpreterState] = None,
    ):
        """Initialize the interpreter.

        Args:
            dispatcher: Executes each resolved command.
            limits: Execution limits
            state: Optional initial state (creates empty bindings if not provided)
        """
        self._dispatcher = dispatcher
        self._limits = limits or ExecutionLimits()
        self._state = state or InterpreterState()

        self._ctx = InterpreterContext(
            state=self._state,
            limits=self._limits,
            execute_command=self.execute_command,
        )

    @property
    def state(self) -> InterpreterState:
        """Get the interpreter state."""
        return self._state

    @property
    def variables(self) -> Variables:
        """The live variable bindings."""
        return self._state.variables

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    def reset(self) -> None:
        """Drop all variable bindings."""
        self._state.variables.clear()
        self._state.substitution_depth = 0

    def eval(self, commands: Iterable[CommandNode]) -> str:
        """Evaluate commands in order and return the last result.

        Stops at the first error and re-raises it; bindings changed by the
        commands before it are kept. No commands evaluates to "".
        """
        self._state.substitution_depth = 0

        result = ""
        for command in commands:
            result = self.execute_command(command)
        return result

    def execute_command(self, command: CommandNode) -> str:
        """Expand a command's words and dispatch it."""
        words = [expand_word(self._ctx, word) for word in command.words]
        name, args = words[0], words[1:]

        log.debug("dispatch %s %r", name, args)
        return self._dispatcher.eval(self._state.variables, name, args)
