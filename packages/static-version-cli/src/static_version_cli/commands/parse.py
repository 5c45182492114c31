# SPDX-License-Identifier: MIT
"""Show how a version string is split into segments."""

from __future__ import annotations

import json

import click

from static_version import is_release, is_snapshot, parse_version

from ..output import echo_info


@click.command()
@click.argument("version")
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the result as JSON.",
)
def parse(version: str, as_json: bool) -> None:
    """Show the segments of VERSION.

    \b
    Examples:
        staticver parse 7.0.12beta5
        staticver parse --json 1.2.3-SNAPSHOT
    """
    parsed = parse_version(version)
    info = {
        "source": parsed.source,
        "parts": list(parsed.parts),
        "numeric_parts": list(parsed.numeric_parts),
        "base_version": parsed.base_version.source,
        "qualified": parsed.is_qualified,
        "snapshot": is_snapshot(parsed),
        "release": is_release(parsed),
    }

    if as_json:
        echo_info(json.dumps(info, indent=2))
        return

    echo_info(f"Version:      {parsed.source}")
    echo_info(f"Parts:        {', '.join(repr(p) for p in parsed.parts)}")
    echo_info(
        "Numeric:      "
        + ", ".join("-" if n is None else str(n) for n in parsed.numeric_parts)
    )
    echo_info(f"Base version: {parsed.base_version.source}")
    echo_info(f"Qualified:    {'yes' if parsed.is_qualified else 'no'}")
    echo_info(f"Snapshot:     {'yes' if info['snapshot'] else 'no'}")
    echo_info(f"Release:      {'yes' if info['release'] else 'no'}")
