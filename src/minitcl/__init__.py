"""minitcl - a small command-script language.

Scripts are sequences of commands made of words. Words may be bare, quoted
or `[ ]` substitutions, and may reference variables as `$name` or `${name}`.
Commands are executed through a pluggable dispatcher.
"""

from .ast import BareWord, CommandNode, Literal, QuotedWord, SubstWord, VariableRef, to_script
from .errors import TclError
from .interpreter import (
    ArityError,
    ConversionError,
    Dispatcher,
    EvalError,
    ExecutionLimitError,
    ExecutionLimits,
    Interpreter,
    InvalidEscapeError,
    MalformedError,
    UnknownCommandError,
    unescape,
)
from .interpreter.builtins import CommandRegistry, create_command_registry
from .parser import ParseError, ParseException, parse
from .tcl import ExecResult, Tcl

__version__ = "0.1.0"

__all__ = [
    "ArityError",
    "BareWord",
    "CommandNode",
    "CommandRegistry",
    "ConversionError",
    "Dispatcher",
    "EvalError",
    "ExecResult",
    "ExecutionLimitError",
    "ExecutionLimits",
    "Interpreter",
    "InvalidEscapeError",
    "Literal",
    "MalformedError",
    "ParseError",
    "ParseException",
    "QuotedWord",
    "SubstWord",
    "Tcl",
    "TclError",
    "UnknownCommandError",
    "VariableRef",
    "create_command_registry",
    "parse",
    "to_script",
    "unescape",
]
