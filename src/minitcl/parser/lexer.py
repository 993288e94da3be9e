"""Character classes for the minitcl grammar.

Commands are separated by newlines or semicolons. Inside a `{ }` group or a
`[ ]` substitution, newlines only separate words and semicolons are ordinary
word characters. `$name` and `${name}` are variable references, and double
quotes keep spaces and special characters inside one word.
"""

SPACE_CHARS = frozenset(" \t")
COMMAND_END_CHARS = frozenset("\n;")
DELIMITER_CHARS = frozenset('{}[]"$')

GROUP_OPEN = "{"
GROUP_CLOSE = "}"
SUBST_OPEN = "["
SUBST_CLOSE = "]"
QUOTE = '"'
DOLLAR = "$"
BACKSLASH = "\\"


def is_space(c: str) -> bool:
    """Horizontal whitespace."""
    return c in SPACE_CHARS


def is_command_end(c: str) -> bool:
    return c in COMMAND_END_CHARS


def is_grouped_word_char(c: str) -> bool:
    """Bare word character inside a group or substitution."""
    return c not in DELIMITER_CHARS and c not in SPACE_CHARS and c != "\n"


def is_word_char(c: str) -> bool:
    """Bare word character at command level."""
    return is_grouped_word_char(c) and not is_command_end(c)


def is_variable_char(c: str) -> bool:
    """Character allowed in an inline `$name` reference."""
    return c == "_" or (c.isascii() and c.isalnum())


def is_braced_variable_char(c: str) -> bool:
    """Character allowed inside `${...}`."""
    return c != "{" and c != "}"
