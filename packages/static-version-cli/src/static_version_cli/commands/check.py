# SPDX-License-Identifier: MIT
"""Check whether a candidate version is an upgrade."""

from __future__ import annotations

import click

from static_version import UpdateKind, classify_update

from ..output import echo_error, echo_info


@click.command()
@click.argument("current")
@click.argument("candidate")
@click.option(
    "--fail-on-downgrade",
    is_flag=True,
    help="Exit with status 1 if CANDIDATE is older than CURRENT.",
)
def check(current: str, candidate: str, fail_on_downgrade: bool) -> None:
    """Classify moving from CURRENT to CANDIDATE.

    Prints upgrade, downgrade or match.

    \b
    Examples:
        staticver check 1.2.3 1.3.0                       # upgrade
        staticver check --fail-on-downgrade 1.0 1.0-rc    # downgrade, exit 1
        staticver check -- -1.0 1.0                       # versions starting with -
    """
    kind = classify_update(current, candidate)
    echo_info(kind.value)

    if kind is UpdateKind.DOWNGRADE and fail_on_downgrade:
        echo_error(f"{candidate} is older than {current}")
        raise SystemExit(1)
