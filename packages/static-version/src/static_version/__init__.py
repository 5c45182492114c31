# SPDX-License-Identifier: MIT
"""Loose version parsing and comparison.

Orders arbitrary version strings the way package repositories do: numeric
segments outrank text, and well-known qualifiers (dev, rc, snapshot, final,
ga, release, sp) rank pre- and post-releases.

Example:
    >>> from static_version import parse_version, compare_versions, sort_versions
    >>>
    >>> version = parse_version("7.0.12beta5")
    >>> version.parts
    ('7', '0', '12', 'beta', '5')
    >>> version.base_version.source
    '7.0.12'
    >>>
    >>> compare_versions("1.0-rc", "1.0")
    -1
    >>>
    >>> sort_versions(["1.0.1", "1.0", "1.0-SNAPSHOT"])
    ['1.0-SNAPSHOT', '1.0', '1.0.1']
"""

__version__ = "0.1.0"

from .parser import (
    ParsedVersion,
    parse_version,
    SEPARATORS,
)
from .compare import (
    QUALIFIER_WEIGHTS,
    VERSION_COMPARATOR,
    VersionComparator,
    compare_versions,
    latest_version,
    sort_versions,
    version_key,
)
from .updates import (
    UpdateKind,
    classify_update,
    is_newer,
    is_release,
    is_snapshot,
)
from .report import (
    Dependency,
    DependencyReport,
    ReportError,
    build_report,
    load_dependencies,
    render_plain_text,
)

__all__ = [
    # Version parsing
    "ParsedVersion",
    "parse_version",
    "SEPARATORS",
    # Version comparison
    "QUALIFIER_WEIGHTS",
    "VERSION_COMPARATOR",
    "VersionComparator",
    "compare_versions",
    "latest_version",
    "sort_versions",
    "version_key",
    # Update decisions
    "UpdateKind",
    "classify_update",
    "is_newer",
    "is_release",
    "is_snapshot",
    # Dependency report
    "Dependency",
    "DependencyReport",
    "ReportError",
    "build_report",
    "load_dependencies",
    "render_plain_text",
]
