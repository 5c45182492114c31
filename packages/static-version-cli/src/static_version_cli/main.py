# SPDX-License-Identifier: MIT
"""CLI entry point for staticver command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from static_version import ReportError

from .commands import compare, sort, parse, check, report
from .config import ConfigError
from .output import Context, echo_error, pass_context


@click.group()
@click.version_option(package_name="static-version")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Change to directory before running command.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Loose version comparison tool.

    Compare, sort and inspect version strings, and report dependency updates.

    \b
    Examples:
        staticver compare 1.0-rc 1.0
        staticver sort 1.0.1 1.0 1.0-SNAPSHOT
        staticver parse 7.0.12beta5
        staticver check 1.2.3 1.3.0
        staticver report dependencies.json
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


cli.add_command(compare.compare)
cli.add_command(sort.sort)
cli.add_command(parse.parse)
cli.add_command(check.check)
cli.add_command(report.report)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except ReportError as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
