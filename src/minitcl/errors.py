"""Base exception shared by the parser and the interpreter."""


class TclError(Exception):
    """Base class for every error minitcl raises on bad input."""

    pass
