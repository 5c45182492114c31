# SPDX-License-Identifier: MIT
"""Write a plain-text dependency update report."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from static_version import ReportError, build_report, load_dependencies, render_plain_text

from ..config import ConfigError
from ..output import Context, echo_error, echo_info, echo_success, echo_warning, pass_context


@click.command()
@click.argument(
    "dependencies",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the report to a file instead of stdout.",
)
@click.option(
    "--revision",
    help="Revision level named in the report (default: from config or 'release').",
)
@click.option(
    "--project",
    help="Project path shown in the report header (default: from config).",
)
@pass_context
def report(
    ctx: Context,
    dependencies: Path,
    output: Optional[Path],
    revision: Optional[str],
    project: Optional[str],
) -> None:
    """Report dependency updates from a JSON file.

    DEPENDENCIES is a JSON list (or an object with a "dependencies" list) of
    entries with group, name, version, latest, and optional project_url,
    user_reason and reason fields.

    \b
    Examples:
        staticver report deps.json
        staticver report deps.json -o build/dependencyUpdates/report.txt
        staticver report deps.json --revision milestone --project :core
    """
    try:
        config = ctx.load_config()
        entries = load_dependencies(dependencies)
    except (ConfigError, ReportError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    result = build_report(entries)
    if result.unresolved:
        echo_warning(
            f"Could not determine the latest version of {len(result.unresolved)} dependencies"
        )
    text = render_plain_text(
        result,
        project_path=project or config.project,
        revision=revision or config.revision,
    )

    output = output or config.report_output
    if output is None:
        click.echo(text, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    echo_success(f"Wrote report for {result.count} dependencies to {output}")
    if ctx.verbose:
        echo_info(
            f"  current: {len(result.current)}, outdated: {len(result.outdated)}, "
            f"exceeded: {len(result.exceeded)}, undeclared: {len(result.undeclared)}, "
            f"unresolved: {len(result.unresolved)}"
        )
