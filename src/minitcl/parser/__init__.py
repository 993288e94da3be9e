"""Parser module for minitcl."""

from .lexer import (
    is_braced_variable_char,
    is_command_end,
    is_grouped_word_char,
    is_space,
    is_variable_char,
    is_word_char,
)
from .parser import (
    Parser,
    ParseException,
    parse,
    MAX_INPUT_SIZE,
    MAX_NESTING_DEPTH,
)

ParseError = ParseException

__all__ = [
    # Lexer
    "is_braced_variable_char",
    "is_command_end",
    "is_grouped_word_char",
    "is_space",
    "is_variable_char",
    "is_word_char",
    # Parser
    "Parser",
    "ParseException",
    "ParseError",
    "parse",
    "MAX_INPUT_SIZE",
    "MAX_NESTING_DEPTH",
]
