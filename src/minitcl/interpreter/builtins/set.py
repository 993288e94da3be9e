"""Set builtin implementation.

Usage: set name value

Bind name to value, replacing any earlier binding.
"""

from ..types import Variables
from .registry import check_arity


class SetCommand:
    """The set command."""

    name = "set"

    def execute(self, args: list[str], variables: Variables) -> str:
        check_arity(self.name, args, 2)
        variables[args[0]] = args[1]
        return ""
