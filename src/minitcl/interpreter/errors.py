"""Interpreter error types.

Every evaluation failure derives from EvalError. The interpreter stops at the
first one and propagates it; effects of commands that already ran stay.
"""

from __future__ import annotations

from ..errors import TclError


class EvalError(TclError):
    """Base class for errors raised while evaluating commands."""

    pass


class InvalidEscapeError(EvalError):
    """A quoted word contained an unknown or truncated backslash escape."""

    def __init__(self, sequence: str):
        self.sequence = sequence
        super().__init__(f"Invalid escape sequence '{sequence}'")


class UnknownCommandError(EvalError):
    """No handler is registered for the command name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown command '{name}'")


class ArityError(EvalError):
    """A handler received the wrong number of arguments."""

    def __init__(self, command: str, expected: int, received: int):
        self.command = command
        self.expected = expected
        self.received = received
        super().__init__(
            f"Expected {expected} arguments to '{command}', received {received}"
        )


class ConversionError(EvalError):
    """A handler could not interpret an argument value."""

    def __init__(self, value: str, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Unable to convert '{value}': {reason}")


class MalformedError(EvalError):
    """A handler received arguments it cannot make sense of."""

    def __init__(self, command: str, reason: str, received_words: list[str]):
        self.command = command
        self.reason = reason
        self.received_words = list(received_words)
        super().__init__(
            f"Malformed '{command}' command: {reason} got {' '.join(self.received_words)}"
        )


class ExecutionLimitError(EvalError):
    """An execution limit was exceeded."""

    def __init__(self, message: str, limit_type: str):
        self.limit_type = limit_type
        super().__init__(message)
