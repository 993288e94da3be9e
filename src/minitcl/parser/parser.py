"""Parser for minitcl scripts.

Converts script text into a list of CommandNode values using recursive
descent directly over the characters; there is no separate token stream.
Malformed input always raises ParseException, never anything else.
"""

from __future__ import annotations

import logging

from ..ast.types import (
    BareWord,
    CommandNode,
    Fragment,
    Literal,
    QuotedWord,
    SubstWord,
    VariableRef,
    Word,
)
from ..errors import TclError
from .lexer import (
    BACKSLASH,
    DOLLAR,
    GROUP_CLOSE,
    GROUP_OPEN,
    QUOTE,
    SUBST_CLOSE,
    SUBST_OPEN,
    is_braced_variable_char,
    is_command_end,
    is_grouped_word_char,
    is_space,
    is_variable_char,
    is_word_char,
)

log = logging.getLogger(__name__)

MAX_INPUT_SIZE = 1_000_000
MAX_NESTING_DEPTH = 100


class ParseException(TclError):
    """Raised when script text does not follow the grammar.

    Attributes:
        position: 0-based offset of the offending character.
        line: 1-based line of the offending character.
        column: 1-based column of the offending character.
        reason: What was wrong.
        remaining: The unconsumed input starting at position.
    """

    def __init__(self, reason: str, position: int, text: str):
        self.reason = reason
        self.position = position
        self.line = text.count("\n", 0, position) + 1
        self.column = position - (text.rfind("\n", 0, position) + 1) + 1
        self.remaining = text[position:]
        super().__init__(f"Parse error at line {self.line}, column {self.column}: {reason}")


class Parser:
    """Recursive descent parser for minitcl scripts."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.depth = 0

    def peek(self) -> str:
        """Current character, or "" at end of input."""
        if self.pos < len(self.text):
            return self.text[self.pos]
        return ""

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def error(self, reason: str, position: int | None = None) -> ParseException:
        return ParseException(reason, self.pos if position is None else position, self.text)

    def unexpected(self) -> ParseException:
        """Error for the character at the current position."""
        if self.at_end():
            return self.error("unexpected end of input")
        c = self.peek()
        if c == "\n":
            return self.error("unexpected newline")
        return self.error(f"unexpected '{c}'")

    def skip_spaces(self, newlines: bool = False) -> None:
        """Skip horizontal whitespace, and newlines too when asked."""
        text = self.text
        while self.pos < len(text) and (is_space(text[self.pos]) or (newlines and text[self.pos] == "\n")):
            self.pos += 1

    def skip_separators(self) -> None:
        """Skip whitespace, newlines and semicolons between commands."""
        text = self.text
        while self.pos < len(text) and (is_space(text[self.pos]) or is_command_end(text[self.pos])):
            self.pos += 1

    def parse(self) -> list[CommandNode]:
        """Parse the entire script."""
        if len(self.text) > MAX_INPUT_SIZE:
            raise self.error(f"input too large ({len(self.text)} > {MAX_INPUT_SIZE} characters)", 0)

        commands: list[CommandNode] = []
        while True:
            self.skip_separators()
            if self.at_end():
                break
            commands.append(self.parse_command(nested=False))
            if not self.at_end() and not is_command_end(self.peek()):
                raise self.unexpected()

        log.debug("parsed %d commands", len(commands))
        return commands

    def parse_command(self, nested: bool) -> CommandNode:
        """Parse one command.

        At top level the command stops at a newline or semicolon. When nested
        inside `[ ]`, newlines only separate words and the command stops at
        the closing bracket.
        """
        start = self.pos
        words: list[Word] = []
        while True:
            self.skip_spaces(newlines=nested)
            if self.at_end():
                break
            c = self.peek()
            if not nested and is_command_end(c):
                break
            if c == GROUP_OPEN:
                words.extend(self.parse_group())
            elif c == SUBST_OPEN:
                words.append(self.parse_subst())
            elif c == QUOTE:
                words.append(self.parse_quoted())
            elif c == GROUP_CLOSE or c == SUBST_CLOSE:
                break
            else:
                words.append(self.parse_bare(grouped=nested))

        if not words:
            # Only empty groups were consumed
            if self.pos > start:
                raise self.error("empty command", start)
            raise self.unexpected()
        return CommandNode(tuple(words))

    def enter(self, position: int) -> None:
        self.depth += 1
        if self.depth > MAX_NESTING_DEPTH:
            raise self.error(f"nesting too deep (more than {MAX_NESTING_DEPTH} levels)", position)

    def parse_group(self) -> list[Word]:
        """Parse `{ ... }` and return its words for the enclosing command."""
        open_pos = self.pos
        self.pos += 1
        self.enter(open_pos)

        words: list[Word] = []
        while True:
            self.skip_spaces(newlines=True)
            if self.at_end():
                raise self.error("unterminated group", open_pos)
            c = self.peek()
            if c == GROUP_CLOSE:
                self.pos += 1
                break
            if c == QUOTE:
                words.append(self.parse_quoted())
            elif c in (GROUP_OPEN, SUBST_OPEN, SUBST_CLOSE):
                raise self.unexpected()
            else:
                words.append(self.parse_bare(grouped=True))

        self.depth -= 1
        return words

    def parse_subst(self) -> SubstWord:
        """Parse `[ ... ]` into a nested command."""
        open_pos = self.pos
        self.pos += 1
        self.enter(open_pos)

        self.skip_spaces(newlines=True)
        if self.at_end():
            raise self.error("unterminated command substitution", open_pos)
        if self.peek() == SUBST_CLOSE:
            raise self.error("empty command substitution", open_pos)

        command = self.parse_command(nested=True)
        self.skip_spaces(newlines=True)
        if self.at_end():
            raise self.error("unterminated command substitution", open_pos)
        if self.peek() != SUBST_CLOSE:
            raise self.unexpected()
        self.pos += 1

        self.depth -= 1
        return SubstWord(command)

    def parse_bare(self, grouped: bool) -> BareWord:
        """Parse a bare word: literal runs interleaved with variable references."""
        accept = is_grouped_word_char if grouped else is_word_char
        text = self.text
        fragments: list[Fragment] = []
        while not self.at_end():
            c = text[self.pos]
            if c == DOLLAR:
                fragments.append(self.parse_variable())
            elif accept(c):
                start = self.pos
                while self.pos < len(text) and accept(text[self.pos]):
                    self.pos += 1
                fragments.append(Literal(text[start:self.pos]))
            else:
                break

        if not fragments:
            raise self.unexpected()
        return BareWord(tuple(fragments))

    def parse_quoted(self) -> QuotedWord:
        """Parse a double-quoted word.

        Backslash pairs are kept verbatim in the literal text; they are
        decoded when the word is evaluated.
        """
        open_pos = self.pos
        self.pos += 1
        text = self.text
        fragments: list[Fragment] = []
        start = self.pos
        while True:
            if self.pos >= len(text):
                raise self.error("unterminated quoted word", open_pos)
            c = text[self.pos]
            if c == QUOTE:
                if self.pos > start:
                    fragments.append(Literal(text[start:self.pos]))
                self.pos += 1
                break
            if c == BACKSLASH:
                self.pos += 2
            elif c == DOLLAR:
                if self.pos > start:
                    fragments.append(Literal(text[start:self.pos]))
                fragments.append(self.parse_variable())
                start = self.pos
            else:
                self.pos += 1

        return QuotedWord(tuple(fragments))

    def parse_variable(self) -> VariableRef:
        """Parse `$name` or `${name}` starting at the `$`."""
        dollar_pos = self.pos
        text = self.text
        self.pos += 1

        if self.peek() == GROUP_OPEN:
            self.pos += 1
            start = self.pos
            while self.pos < len(text) and is_braced_variable_char(text[self.pos]):
                self.pos += 1
            if self.at_end():
                raise self.error("unterminated variable reference", dollar_pos)
            if self.peek() == GROUP_OPEN:
                raise self.unexpected()
            if self.pos == start:
                raise self.error("empty variable name", dollar_pos)
            name = text[start:self.pos]
            self.pos += 1
            return VariableRef(name)

        start = self.pos
        while self.pos < len(text) and is_variable_char(text[self.pos]):
            self.pos += 1
        if self.pos == start:
            raise self.error("expected variable name after '$'", dollar_pos)
        return VariableRef(text[start:self.pos])


def parse(script: str) -> list[CommandNode]:
    """Parse script text into a list of commands.

    Empty or whitespace-only input yields an empty list.

    Raises:
        ParseException: If the text is malformed.
    """
    return Parser(script).parse()
