# SPDX-License-Identifier: MIT
"""Plain-text dependency update report.

Sorts declared dependencies into buckets by comparing the declared version
against the latest version found for the requested revision level, then
renders the buckets as the plain-text report:

    ------------------------------------------------------------
    : Project Dependency Updates (report to plain text file)
    ------------------------------------------------------------

    The following dependencies have later release versions:
     - org.example:lib [1.0 -> 1.1]
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Optional

from pydantic import BaseModel, Field, ValidationError

from .compare import compare_versions

logger = logging.getLogger(__name__)

_RULE = "-" * 60


class ReportError(Exception):
    """Raised when dependency data cannot be loaded."""

    def __init__(self, path: Path | str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


class Dependency(BaseModel):
    """A declared dependency and the latest version found for it."""

    group: Optional[str] = None
    name: str
    version: Optional[str] = Field(default=None, description="Declared version")
    latest: Optional[str] = Field(default=None, description="Latest version found")
    project_url: Optional[str] = None
    user_reason: Optional[str] = None
    reason: Optional[str] = Field(
        default=None, description="Why the latest version could not be determined"
    )

    @property
    def label(self) -> str:
        """Return ``group:name`` (group may be empty)."""
        return f"{self.group or ''}:{self.name}"


class DependencyReport(BaseModel):
    """Dependencies grouped by update status."""

    current: list[Dependency] = Field(default_factory=list)
    outdated: list[Dependency] = Field(default_factory=list)
    exceeded: list[Dependency] = Field(default_factory=list)
    undeclared: list[Dependency] = Field(default_factory=list)
    unresolved: list[Dependency] = Field(default_factory=list)

    @property
    def count(self) -> int:
        """Total number of dependencies in the report."""
        return (
            len(self.current)
            + len(self.outdated)
            + len(self.exceeded)
            + len(self.undeclared)
            + len(self.unresolved)
        )


def build_report(dependencies: Iterable[Dependency]) -> DependencyReport:
    """Group dependencies by comparing declared and latest versions.

    - No declared version: undeclared
    - No latest version: unresolved
    - Declared equal to latest: current
    - Declared older than latest: outdated
    - Declared newer than latest: exceeded
    """
    report = DependencyReport()
    for dependency in dependencies:
        if dependency.version is None:
            report.undeclared.append(dependency)
        elif dependency.latest is None:
            report.unresolved.append(dependency)
        else:
            result = compare_versions(dependency.version, dependency.latest)
            if result == 0:
                report.current.append(dependency)
            elif result < 0:
                report.outdated.append(dependency)
            else:
                report.exceeded.append(dependency)
    return report


def load_dependencies(path: Path | str) -> list[Dependency]:
    """Load dependencies from a JSON file.

    The file holds either a list of dependency objects or an object with a
    ``dependencies`` list.

    Raises:
        ReportError: If the file cannot be read or does not match the format
    """
    path = Path(path)
    try:
        data: Any = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ReportError(path, f"Cannot read dependency file: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise ReportError(path, f"Cannot decode dependency file: {e}") from e
    except json.JSONDecodeError as e:
        raise ReportError(path, f"Invalid JSON: {e}") from e

    if isinstance(data, dict):
        data = data.get("dependencies")
    if not isinstance(data, list):
        raise ReportError(path, "Expected a list of dependencies")

    try:
        return [Dependency.model_validate(item) for item in data]
    except ValidationError as e:
        raise ReportError(path, f"Invalid dependency entry: {e}") from e


def _details(dependency: Dependency, with_url: bool = True) -> list[str]:
    lines = []
    if dependency.user_reason is not None:
        lines.append(f"     {dependency.user_reason}")
    if with_url and dependency.project_url is not None:
        lines.append(f"     {dependency.project_url}")
    return lines


def _sorted(dependencies: list[Dependency]) -> list[Dependency]:
    return sorted(dependencies, key=lambda d: d.label)


def render_plain_text(
    report: DependencyReport,
    project_path: str = ":",
    revision: str = "release",
) -> str:
    """Render a report as plain text.

    Args:
        report: The grouped dependencies
        project_path: Project name shown in the header
        revision: Revision level the latest versions were resolved at

    Returns:
        The report text, ending with a newline
    """
    lines = [
        "",
        _RULE,
        f"{project_path} Project Dependency Updates (report to plain text file)",
        _RULE,
    ]

    if report.count == 0:
        lines.extend(["", "No dependencies found."])
        return "\n".join(lines) + "\n"

    if report.current:
        lines.append("")
        lines.append(f"The following dependencies are using the latest {revision} version:")
        for dependency in _sorted(report.current):
            lines.append(f" - {dependency.label}:{dependency.version}")
            lines.extend(_details(dependency, with_url=False))

    if report.exceeded:
        lines.append("")
        lines.append(
            f"The following dependencies exceed the version found at the {revision} revision level:"
        )
        for dependency in _sorted(report.exceeded):
            lines.append(f" - {dependency.label} [{dependency.version} <- {dependency.latest}]")
            lines.extend(_details(dependency))

    if report.outdated:
        lines.append("")
        lines.append(f"The following dependencies have later {revision} versions:")
        for dependency in _sorted(report.outdated):
            lines.append(f" - {dependency.label} [{dependency.version} -> {dependency.latest}]")
            lines.extend(_details(dependency))

    if report.undeclared:
        lines.append("")
        lines.append(
            "Failed to compare versions for the following dependencies because they were "
            "declared without version:"
        )
        for dependency in _sorted(report.undeclared):
            lines.append(f" - {dependency.label}")

    if report.unresolved:
        lines.append("")
        lines.append("Failed to determine the latest version for the following dependencies:")
        for dependency in _sorted(report.unresolved):
            lines.append(f" - {dependency.label}")
            lines.extend(_details(dependency))
            logger.warning(
                "Failed to determine the latest version for %s: %s",
                dependency.label,
                dependency.reason or "no reason given",
            )

    return "\n".join(lines) + "\n"
