"""Interpreter module for minitcl."""

from .errors import (
    ArityError,
    ConversionError,
    EvalError,
    ExecutionLimitError,
    InvalidEscapeError,
    MalformedError,
    UnknownCommandError,
)
from .escapes import unescape
from .expansion import expand_fragments, expand_word
from .interpreter import Interpreter
from .types import (
    CommandHandler,
    Dispatcher,
    ExecutionLimits,
    InterpreterContext,
    InterpreterState,
    Variables,
)

__all__ = [
    "ArityError",
    "CommandHandler",
    "ConversionError",
    "Dispatcher",
    "EvalError",
    "ExecutionLimitError",
    "ExecutionLimits",
    "Interpreter",
    "InterpreterContext",
    "InterpreterState",
    "InvalidEscapeError",
    "MalformedError",
    "UnknownCommandError",
    "Variables",
    "expand_fragments",
    "expand_word",
    "unescape",
]
