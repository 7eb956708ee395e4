"""CLI for the ``csv2beancount`` package.

This module exposes callable command handlers (``cmd_convert``,
``cmd_version``) and a Typer-based console interface. Environment variables
are loaded from a local ``.env`` using ``python-dotenv`` before delegating to
command logic. Conversion logic lives in ``csv2beancount.api``.
"""

from __future__ import annotations

import codecs
import csv
import os
import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from typer.models import ArgumentInfo, OptionInfo

from . import __version__
from .logging_setup import TRACE, configure_logging


def cmd_convert(
    csv_path: str,
    *,
    config_path: str | None = None,
    template_path: str | None = None,
    encoding: str = "utf-8",
) -> int:
    """Convert ``csv_path`` and print the rendered entries to stdout.

    Errors are written to stderr and the function returns a non-zero exit
    status. On success, returns ``0``.
    """

    from .api import convert_csv
    from .classifier import RowShapeError
    from .config import ConfigError, load_config
    from .rendering import load_template

    try:
        config = load_config(config_path)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        codecs.lookup(encoding)
    except LookupError:
        print(f"Error: Unknown encoding: {encoding}", file=sys.stderr)
        return 1

    template = load_template(template_path)

    try:
        with open(csv_path, encoding=encoding, newline="") as f:
            convert_csv(f, config, output=sys.stdout, template=template)
    except FileNotFoundError:
        print(f"Error: File not found: {csv_path}", file=sys.stderr)
        return 1
    except PermissionError:
        print(f"Error: Permission denied: {csv_path}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: Cannot read {csv_path}: {e.strerror or e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: '{csv_path}' is not valid {encoding}: {e}", file=sys.stderr)
        return 1
    except csv.Error as e:
        print(f"Error: Failed to parse CSV: {e}", file=sys.stderr)
        return 1
    except RowShapeError as e:
        print(f"Error: Row does not fit the configured layout: {e}", file=sys.stderr)
        return 1

    return 0


def cmd_version() -> int:
    print(f"Version: {__version__}")
    print(f"Commit: {os.getenv('CSV2BEANCOUNT_COMMIT', 'unknown')}")
    return 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="A small utility to convert your CSV file of bank transactions to beancount format.",
)

# Module-level argument/option objects to satisfy ruff B008 (no calls in
# parameter defaults).
CSV_FILE_ARGUMENT: ArgumentInfo = typer.Argument(
    ...,
    help="CSV file to convert",
    dir_okay=False,
    file_okay=True,
    exists=False,  # allow non-existent here; the handler will report nice errors
)
TEMPLATE_OPTION: OptionInfo = typer.Option(
    ...,
    "--template",
    "-t",
    help="Template file used to render each entry (defaults to the builtin ledger template).",
    dir_okay=False,
)


@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    csv_file: Annotated[Path, CSV_FILE_ARGUMENT],
    template: Annotated[Path | None, TEMPLATE_OPTION] = None,
    encoding: str = typer.Option("utf-8", "--encoding", help="Text encoding of the CSV file."),
) -> None:
    """Convert a CSV file into Beancount (ledger like) format.

    Reads the CSV file and the config describing its fields, then renders
    every row with the builtin template, or the one given with --template, to
    stdout. The CSV file itself is never modified.
    """

    config_path = (ctx.obj or {}).get("config")
    rc = cmd_convert(
        str(csv_file),
        config_path=config_path,
        template_path=str(template) if template is not None else None,
        encoding=encoding,
    )
    if rc:
        raise typer.Exit(rc)


@app.command("version")
def version_cmd() -> None:
    """Print the version of csv2beancount."""

    cmd_version()


@app.callback(invoke_without_command=True)
def _root(
    ctx: typer.Context,
    *,
    config: str | None = typer.Option(
        None,
        "--config",
        help="Config file (defaults to config.yaml in the current directory).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output."),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug output."),
) -> None:
    """Root command.

    Loads ``.env`` from the current working directory (without overriding any
    already-set environment variables), configures logging and keeps the
    config path for subcommands.
    """

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    if debug:
        configure_logging(TRACE)
    elif verbose:
        configure_logging("DEBUG")
    else:
        configure_logging()

    ctx.obj = {"config": config}

    if ctx.invoked_subcommand is None:
        typer.echo("No subcommand provided. Use --help to see available commands.")
        raise typer.Exit(1)


if __name__ == "__main__":  # pragma: no cover
    # Running as a module: `python -m csv2beancount.cli`
    app()
