"""Main Tcl class - the primary API for minitcl.

Example usage:
    from minitcl import Tcl

    tcl = Tcl()
    result = tcl.exec("set x 5\\nputs $x")
    print(result.stdout)  # "5\\n"

    # Raise on errors instead of reporting them
    value = tcl.run("set x 5; get x")  # "5"

    # With custom commands
    tcl = Tcl()
    tcl.register(lambda variables, args: args[0].upper(), name="upper")
    tcl.run("upper hello")  # "HELLO"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, TextIO, Union

from .ast.types import CommandNode
from .interpreter import EvalError, ExecutionLimits, Interpreter, InterpreterState
from .interpreter.builtins import CommandRegistry, create_command_registry
from .interpreter.builtins.registry import HandlerFunction
from .interpreter.types import CommandHandler, Dispatcher, Variables
from .parser import ParseException, parse


@dataclass
class ExecResult:
    """Outcome of Tcl.exec()."""

    result: str = ""
    """Value of the last command that ran."""

    stdout: str = ""
    """Output written by puts during this call."""

    stderr: str = ""
    """Error message, if the script failed."""

    exit_code: int = 0
    """0 on success, 1 for evaluation errors, 2 for parse errors."""

    variables: Variables = field(default_factory=dict)
    """Snapshot of the bindings after the call."""


class Tcl:
    """Main minitcl interpreter class.

    Parses and evaluates scripts with one persistent set of variable
    bindings. puts output is collected per call and, if a stream was given,
    written through to it as the script runs.
    """

    def __init__(
        self,
        *,
        commands: Optional[Dispatcher] = None,
        variables: Optional[dict[str, str]] = None,
        limits: Optional[ExecutionLimits] = None,
        stdout: Optional[TextIO] = None,
    ):
        """Initialize the interpreter.

        Args:
            commands: Dispatcher to use. If not provided, creates a registry
                with the built-in commands.
            variables: Initial variable bindings.
            limits: Execution limits.
            stdout: Stream puts output is also written to.
        """
        self._stdout = stdout
        self._output: list[str] = []

        if commands is not None:
            self._commands = commands
        else:
            self._commands = create_command_registry(self._write)
        self._limits = limits or ExecutionLimits()
        self._initial_variables = dict(variables or {})

        self._interpreter = Interpreter(
            self._commands,
            limits=self._limits,
            state=InterpreterState(variables=dict(self._initial_variables)),
        )

    def _write(self, text: str) -> None:
        self._output.append(text)
        if self._stdout is not None:
            self._stdout.write(text)

    @property
    def commands(self) -> Dispatcher:
        """Get the dispatcher."""
        return self._commands

    @property
    def variables(self) -> Variables:
        """Get the live variable bindings."""
        return self._interpreter.variables

    def register(
        self,
        command: Union[CommandHandler, HandlerFunction],
        name: Optional[str] = None,
    ) -> None:
        """Register a command with the built-in registry."""
        if not isinstance(self._commands, CommandRegistry):
            raise TypeError("register() requires the default CommandRegistry dispatcher")
        self._commands.register(command, name)

    def parse(self, script: str) -> list[CommandNode]:
        """Parse a script without evaluating it."""
        return parse(script)

    def run(self, script: str) -> str:
        """Parse and evaluate a script, returning the last result.

        Raises:
            ParseException: If the script is malformed.
            EvalError: If a command fails.
        """
        self._output = []
        return self._interpreter.eval(parse(script))

    def exec(self, script: str) -> ExecResult:
        """Parse and evaluate a script, reporting failures in the result.

        Output and bindings produced before a failure are kept.
        """
        self._output = []
        try:
            commands = parse(script)
        except ParseException as e:
            return ExecResult(
                stderr=f"Error: {e}\n",
                exit_code=2,
                variables=dict(self.variables),
            )

        try:
            result = self._interpreter.eval(commands)
        except EvalError as e:
            return ExecResult(
                stdout="".join(self._output),
                stderr=f"Error: {e}\n",
                exit_code=1,
                variables=dict(self.variables),
            )

        return ExecResult(
            result=result,
            stdout="".join(self._output),
            variables=dict(self.variables),
        )

    def reset(self) -> None:
        """Reset the variable bindings to their initial values."""
        self._interpreter.reset()
        self._interpreter.variables.update(self._initial_variables)
