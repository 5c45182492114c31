# SPDX-License-Identifier: MIT
"""Release and update decisions built on version comparison."""

from __future__ import annotations

from enum import Enum

from .compare import (
    QUALIFIER_WEIGHTS,
    VersionLike,
    _as_parsed,
    _qualifier_weight,
    compare_versions,
)

# Qualifiers marking a finished release (final, ga, release, sp)
_RELEASE_WEIGHT = QUALIFIER_WEIGHTS["final"]


class UpdateKind(str, Enum):
    """How a candidate version relates to the currently declared one."""

    UPGRADE = "upgrade"
    DOWNGRADE = "downgrade"
    MATCH = "match"


def classify_update(current: VersionLike, candidate: VersionLike) -> UpdateKind:
    """Classify moving from ``current`` to ``candidate``.

    Examples:
        >>> classify_update("1.0", "1.0.1")
        <UpdateKind.UPGRADE: 'upgrade'>
        >>> classify_update("1.0", "1.0-rc")
        <UpdateKind.DOWNGRADE: 'downgrade'>
        >>> classify_update("1.0", "01.0")
        <UpdateKind.MATCH: 'match'>
    """
    result = compare_versions(candidate, current)
    if result > 0:
        return UpdateKind.UPGRADE
    if result < 0:
        return UpdateKind.DOWNGRADE
    return UpdateKind.MATCH


def is_newer(candidate: VersionLike, current: VersionLike) -> bool:
    """Return True if ``candidate`` orders after ``current``."""
    return compare_versions(candidate, current) > 0


def is_snapshot(version: VersionLike) -> bool:
    """Return True for snapshot builds (last segment is ``SNAPSHOT``, any case).

    Examples:
        >>> is_snapshot("1.2-SNAPSHOT")
        True
        >>> is_snapshot("1.2.snapshot.3")
        False
    """
    parts = _as_parsed(version).parts
    return bool(parts) and parts[-1].isascii() and parts[-1].lower() == "snapshot"


def is_release(version: VersionLike) -> bool:
    """Return True if the version looks like a finished release.

    A release has at least one numeric segment, and every text segment is a
    post-release qualifier such as ``final`` or ``ga``.

    Examples:
        >>> is_release("1.2.3")
        True
        >>> is_release("1.2.3.Final")
        True
        >>> is_release("1.2.3-rc1")
        False
        >>> is_release("1.2-SNAPSHOT")
        False
    """
    parsed = _as_parsed(version)
    if all(number is None for number in parsed.numeric_parts):
        return False
    for part, number in zip(parsed.parts, parsed.numeric_parts):
        if number is not None:
            continue
        weight = _qualifier_weight(part)
        if weight is None or weight < _RELEASE_WEIGHT:
            return False
    return True
