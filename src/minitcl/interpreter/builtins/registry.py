"""Command registry - the default Dispatcher.

Maps command names to handler objects. Embedding applications register
their own commands alongside (or instead of) the built-in ones.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, Optional, Union

from ..errors import ArityError, UnknownCommandError
from ..types import CommandHandler, Variables

log = logging.getLogger(__name__)

HandlerFunction = Callable[[Variables, list[str]], str]


def check_arity(command: str, args: list[str], expected: int) -> None:
    """Raise ArityError unless exactly `expected` arguments were given."""
    if len(args) != expected:
        raise ArityError(command, expected, len(args))


class FunctionCommand:
    """Adapts a plain `f(variables, args) -> str` function to a handler."""

    def __init__(self, name: str, func: HandlerFunction):
        self.name = name
        self._func = func

    def execute(self, args: list[str], variables: Variables) -> str:
        return self._func(variables, args)


class CommandRegistry:
    """Dispatcher backed by a name -> handler mapping."""

    def __init__(self, commands: Optional[Iterable[CommandHandler]] = None):
        self._commands: dict[str, CommandHandler] = {}
        for command in commands or ():
            self.register(command)

    def register(
        self,
        command: Union[CommandHandler, HandlerFunction],
        name: Optional[str] = None,
    ) -> None:
        """Register a handler object, or a function under `name`.

        A later registration under the same name replaces the earlier one.
        """
        if not hasattr(command, "execute"):
            if name is None:
                name = getattr(command, "__name__", None)
            if not name or name == "<lambda>":
                raise ValueError("a name is required to register a function")
            command = FunctionCommand(name, command)
        elif name is None:
            name = command.name
        self._commands[name] = command

    def unregister(self, name: str) -> None:
        self._commands.pop(name, None)

    def get(self, name: str) -> Optional[CommandHandler]:
        return self._commands.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._commands))

    def __len__(self) -> int:
        return len(self._commands)

    def eval(self, variables: Variables, name: str, args: list[str]) -> str:
        """Execute the handler registered for `name`."""
        handler = self._commands.get(name)
        if handler is None:
            raise UnknownCommandError(name)
        return handler.execute(args, variables)
