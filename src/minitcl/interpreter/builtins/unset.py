"""Unset builtin implementation.

Usage: unset name

Remove the binding for name. Unsetting an unbound name is not an error.
"""

from ..types import Variables
from .registry import check_arity


class UnsetCommand:
    """The unset command."""

    name = "unset"

    def execute(self, args: list[str], variables: Variables) -> str:
        check_arity(self.name, args, 1)
        variables.pop(args[0], None)
        return ""
