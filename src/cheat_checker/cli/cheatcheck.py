"""
cheatcheck - Action Replay DS Cheat Validator Command-Line Interface
====================================================================

This module implements the command-line interface for the cheat checker.
It validates cheat documents produced by a cheat file parser and prints
every problem found, line by line.

Usage Examples
--------------
Validate a document:
    $ cheatcheck validate codes.json

Fail on warnings too:
    $ cheatcheck validate --strict codes.json

Use localized messages:
    $ cheatcheck validate --catalog messages_fr.json codes.json

List the instruction set and the rule bound to each opcode:
    $ cheatcheck opcodes
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from cheat_checker import __version__
from cheat_checker.cheat import OPCODE_INFO, load_cheats
from cheat_checker.check import RULES, format_report, summarize, validate_all
from cheat_checker.cli.errors import ExitCode, handle_cli_exception
from cheat_checker.config import CheckerConfig


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.version_option(__version__, "--version", "-V", prog_name="cheatcheck")
def main() -> None:
    """
    Cheat code validator for Action Replay DS.

    Checks every line of every cheat against its opcode's encoding rules
    and reports all problems found.

    \b
    Commands:
      validate  Validate cheat documents
      opcodes   List opcodes and their validation rules

    \b
    Examples:
      cheatcheck validate codes.json
      cheatcheck validate --strict a.json b.json
      cheatcheck opcodes
    """
    pass


# =============================================================================
# Validate Command
# =============================================================================

@main.command("validate")
@click.argument(
    "input_files",
    nargs=-1,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Exit with failure on warnings as well as errors "
         "(default: CHEATCHECK_STRICT or off)",
)
@click.option(
    "--show-passes",
    is_flag=True,
    help="List passing checks as well as problems",
)
@click.option(
    "-c", "--catalog",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON message catalog overriding the default messages",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging)",
)
def cmd_validate(
    input_files: tuple[Path, ...],
    strict: Optional[bool],
    show_passes: bool,
    catalog: Optional[Path],
    verbose: bool,
) -> None:
    """
    Validate cheat documents.

    INPUT_FILES are JSON documents holding one cheat object or a list of
    cheats, each with a name and its decoded instructions.

    \b
    Exit codes:
      0  all cheats pass (warnings allowed unless --strict)
      1  errors found (or warnings with --strict)
      2  unreadable input
      3  internal error
    """
    setup_logging(verbose)

    try:
        config = CheckerConfig.from_env()
        if strict is not None:
            config.strict = strict
        if show_passes:
            config.show_passes = True
        if catalog is not None:
            config.catalog_path = catalog

        messages = config.load_catalog()

        reports = []
        for input_file in input_files:
            cheats = load_cheats(input_file, catalog=messages)
            reports.extend(validate_all(cheats, catalog=messages))

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)

    for report in reports:
        click.echo(format_report(report, show_passes=config.show_passes))
        click.echo()

    summary = summarize(reports)
    click.echo(f"Checked {summary.cheats} cheats: {summary}")

    if summary.failed or (config.strict and summary.warnings):
        sys.exit(ExitCode.CHECK_FAILED)


# =============================================================================
# Opcodes Command
# =============================================================================

@main.command("opcodes")
def cmd_opcodes() -> None:
    """
    List every opcode with its encoding and validation rule.

    \b
    Example:
      cheatcheck opcodes
    """
    name_width = max(len(str(opcode)) for opcode in OPCODE_INFO)
    for opcode, info in OPCODE_INFO.items():
        rule = RULES[opcode].__name__
        click.echo(f"{str(opcode):<{name_width}}  {info.layout}  {rule:<22}  {info.description}")


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
