"""Puts builtin implementation.

Usage: puts [arg ...]

Write the arguments joined by single spaces, followed by a newline.
"""

import sys
from typing import Callable, Optional

from ..types import Variables


class PutsCommand:
    """The puts command."""

    name = "puts"

    def __init__(self, write: Optional[Callable[[str], object]] = None):
        self._write = write

    def execute(self, args: list[str], variables: Variables) -> str:
        write = self._write or sys.stdout.write
        write(" ".join(args) + "\n")
        return ""
