"""Get builtin implementation.

Usage: get name

Return the value bound to name, or the empty string if it is unbound.
"""

from ..types import Variables
from .registry import check_arity


class GetCommand:
    """The get command."""

    name = "get"

    def execute(self, args: list[str], variables: Variables) -> str:
        check_arity(self.name, args, 1)
        return variables.get(args[0], "")
