"""Built-in commands.

None of these are known to the interpreter; they are ordinary handlers
registered with a CommandRegistry.
"""

from typing import Callable, Optional

from .append import AppendCommand
from .get import GetCommand
from .puts import PutsCommand
from .registry import CommandRegistry, FunctionCommand, check_arity
from .set import SetCommand
from .unset import UnsetCommand

BUILTINS = {
    "append": AppendCommand,
    "get": GetCommand,
    "puts": PutsCommand,
    "set": SetCommand,
    "unset": UnsetCommand,
}


def create_command_registry(write: Optional[Callable[[str], object]] = None) -> CommandRegistry:
    """Create a registry holding every built-in command.

    Args:
        write: Output sink for puts. Defaults to sys.stdout.write at call time.
    """
    return CommandRegistry([
        AppendCommand(),
        GetCommand(),
        PutsCommand(write),
        SetCommand(),
        UnsetCommand(),
    ])


__all__ = [
    "AppendCommand",
    "BUILTINS",
    "CommandRegistry",
    "FunctionCommand",
    "GetCommand",
    "PutsCommand",
    "SetCommand",
    "UnsetCommand",
    "check_arity",
    "create_command_registry",
]
