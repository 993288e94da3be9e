"""Append builtin implementation.

Usage: append name [value ...]

Append each value to the variable name (unbound counts as empty) and
return the new value.
"""

from ..errors import MalformedError
from ..types import Variables


class AppendCommand:
    """The append command."""

    name = "append"

    def execute(self, args: list[str], variables: Variables) -> str:
        if not args:
            raise MalformedError(self.name, "expected a variable name,", args)
        name, values = args[0], args[1:]
        value = variables.get(name, "") + "".join(values)
        variables[name] = value
        return value
