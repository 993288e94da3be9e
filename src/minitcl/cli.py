"""minitcl command line.

Usage:
    minitcl FILE              # run a script, print its result
    minitcl FILE --verbose    # also log progress to stderr

Set MINITCL_DEBUG=1 to log every dispatched command.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from .interpreter import EvalError
from .parser import ParseException
from .tcl import Tcl

log = logging.getLogger(__name__)

console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the minitcl package.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (--verbose): INFO level
    - Debug (MINITCL_DEBUG=1): DEBUG level, including each dispatch
    """
    if os.environ.get("MINITCL_DEBUG"):
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=verbose,
        show_path=bool(os.environ.get("MINITCL_DEBUG")),
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("minitcl")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False


typer_app = typer.Typer(add_completion=False)


@typer_app.command()
def cli(
    file: Path = typer.Argument(..., help="Script file to run."),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log progress to stderr."),
) -> None:
    """Run a minitcl script and print the value of its last command."""
    setup_logging(verbose)

    try:
        script = file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"Error: cannot read {file}: {e}", err=True)
        raise typer.Exit(1)

    log.info("running %s", file)
    tcl = Tcl(stdout=sys.stdout)
    try:
        result = tcl.run(script)
    except ParseException as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)
    except EvalError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(result)


def main() -> None:
    typer_app()


if __name__ == "__main__":
    main()
