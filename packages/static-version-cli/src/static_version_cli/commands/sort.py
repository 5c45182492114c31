# SPDX-License-Identifier: MIT
"""Sort version strings."""

from __future__ import annotations

import click

from static_version import sort_versions

from ..output import echo_info


@click.command()
@click.argument("versions", nargs=-1)
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Print the newest version first.",
)
def sort(versions: tuple[str, ...], reverse: bool) -> None:
    """Sort VERSIONS oldest first, one per line.

    Without arguments, versions are read from stdin, one per line. Blank
    lines are skipped.

    \b
    Examples:
        staticver sort 1.0.1 1.0 1.0-SNAPSHOT
        git tag | staticver sort -r
    """
    if not versions:
        stdin = click.get_text_stream("stdin")
        versions = tuple(line.strip() for line in stdin if line.strip())

    for version in sort_versions(versions, reverse=reverse):
        echo_info(version)
