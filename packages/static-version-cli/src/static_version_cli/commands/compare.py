# SPDX-License-Identifier: MIT
"""Compare two version strings."""

from __future__ import annotations

import click

from static_version import compare_versions

from ..output import echo_info

_SYMBOLS = {-1: "<", 0: "=", 1: ">"}


@click.command()
@click.argument("version1")
@click.argument("version2")
@click.option(
    "--symbol",
    "-s",
    is_flag=True,
    help="Print <, = or > instead of -1, 0 or 1.",
)
def compare(version1: str, version2: str, symbol: bool) -> None:
    """Compare VERSION1 against VERSION2.

    Prints -1 if VERSION1 is older, 0 if both rank the same and 1 if
    VERSION1 is newer.

    \b
    Examples:
        staticver compare 1.0-rc 1.0        # -1
        staticver compare 1.0 01.0          # 0
        staticver compare -s 1.2.1 1.2      # >
        staticver compare -- -1.0 1.0       # versions starting with -
    """
    result = compare_versions(version1, version2)
    echo_info(_SYMBOLS[result] if symbol else str(result))
