"""CLI application entry point for the ``clivo`` console script.

``clivo`` parses a token list against options declared on its own
command line and prints the result — handy for checking how a given
argv will be understood::

    clivo -o order:o -o takeout:t -- -t --order=burger cola

This module is the **sole error boundary** for the application.  It
catches :class:`~clivo.exceptions.ClivoError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, and maps them to exit codes.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

from clivo.cli import exit_codes
from clivo.cli.console import console, get_rich_console
from clivo.core.models import OptionSpec, ParseRequest, ResultDictionary
from clivo.core.parser import parse_arguments
from clivo.exceptions import ClivoError, EnvironmentError, InvalidOptionDeclarationError
from clivo.version import __version__

logger = logging.getLogger(__name__)

TOKEN_SEPARATOR: str = "--"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Everything after the first ``--`` is handed to clivo untouched, so
    tokens may themselves look like options.
    """
    parser = argparse.ArgumentParser(
        prog="clivo",
        description="Parse TOKENS with clivo's permissive option grammar.",
        epilog="Put TOKENS after '--' when they start with a dash.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parser decisions to stderr.",
    )
    parser.add_argument(
        "-o",
        "--option",
        dest="options",
        action="append",
        default=[],
        metavar="NAME[:LETTER[:LABEL]]",
        help="Declare a recognised option (repeatable).",
    )
    parser.add_argument(
        "--accept-unspecified",
        action="store_true",
        help="Keep options that were not declared.",
    )
    parser.add_argument(
        "--strict-equals",
        action="store_true",
        help="Only accept values given with '='.",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Render the result as a table instead of JSON.",
    )
    parser.add_argument("tokens", nargs="*", metavar="TOKENS")
    return parser


def parse_option_declaration(text: str) -> OptionSpec:
    """Read a ``NAME[:LETTER[:LABEL]]`` declaration.

    Raises
    ------
    InvalidOptionDeclarationError
        If the name part is empty.
    """
    name, _, rest = text.partition(":")
    letter, _, label = rest.partition(":")
    if not name:
        raise InvalidOptionDeclarationError(
            f"Invalid option declaration: {text!r}",
            hint="Use NAME, NAME:LETTER or NAME:LETTER:LABEL.",
        )
    return OptionSpec(name=name, letter=letter or None, label=label or None)


def _split_tokens(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Separate clivo's own arguments from the tokens after ``--``."""
    argv = list(argv)
    if TOKEN_SEPARATOR in argv:
        index = argv.index(TOKEN_SEPARATOR)
        return argv[:index], argv[index + 1:]
    return argv, []


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    handler: logging.Handler
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler(sys.stderr)
    else:
        handler = RichHandler(console=get_rich_console(), show_path=False)
    logging.basicConfig(level=logging.DEBUG, format="%(message)s", handlers=[handler])


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for result rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


def _render_table(result: ResultDictionary, specs: Sequence[OptionSpec]) -> None:
    table_class = _import_rich_table()
    labels = {spec.name: spec.label for spec in specs if spec.label}

    table = table_class(
        title="Parsed options",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Option", style="bold")
    table.add_column("Label")
    table.add_column("Values")

    for name, values in result.items():
        table.add_row(name, labels.get(name, ""), ", ".join(values))

    get_rich_console(stderr=False).print(table)


def _render_json(result: ResultDictionary) -> None:
    sys.stdout.write(json.dumps(result, indent=2) + "\n")


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the clivo CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    own_args, extra_tokens = _split_tokens(sys.argv[1:] if argv is None else argv)
    args = _build_parser().parse_args(own_args)
    _configure_logging(args.verbose)

    specs = tuple(parse_option_declaration(text) for text in args.options)
    logger.debug("declared options: %s", ", ".join(spec.name for spec in specs) or "none")
    request = ParseRequest(
        tokens=(*args.tokens, *extra_tokens),
        specs=specs,
        accept_unspecified=args.accept_unspecified,
        strict_equals=args.strict_equals,
    )
    result = parse_arguments(request)

    if args.table:
        _render_table(result, specs)
    else:
        _render_json(result)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except ClivoError as exc:
        console.print_labelled("[bold red]Error:[/bold red]", str(exc))
        if exc.hint:
            console.print_labelled("[yellow]Hint:[/yellow]", exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print_labelled(
            "[bold red]Unexpected error.[/bold red]",
            f"Please report this issue.\n  {type(exc).__name__}: {exc}",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
