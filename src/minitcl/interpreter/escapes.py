"""Backslash escape processing for quoted words."""

from .errors import InvalidEscapeError

ESCAPES = {
    "\\": "\\",
    '"': '"',
    "n": "\n",
}


def unescape(text: str) -> str:
    """Decode the backslash escapes in a quoted word's literal text.

    Only `\\\\`, `\\"` and `\\n` are recognized. Text without a backslash is
    returned as the same object.

    Raises:
        InvalidEscapeError: For any other escape, or a trailing backslash.
    """
    if "\\" not in text:
        return text

    result = []
    i = 0
    n = len(text)
    while i < n:
        backslash = text.find("\\", i)
        if backslash == -1:
            result.append(text[i:])
            break
        result.append(text[i:backslash])
        if backslash + 1 >= n:
            raise InvalidEscapeError("\\")
        c = text[backslash + 1]
        if c not in ESCAPES:
            raise InvalidEscapeError("\\" + c)
        result.append(ESCAPES[c])
        i = backslash + 2
    return "".join(result)
