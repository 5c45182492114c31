# SPDX-License-Identifier: MIT
"""Version comparison for loosely structured version strings.

Segments are compared left to right:
- Numeric segments outrank text segments at the same position
- Numeric segments compare by value ("01" == "1")
- Text segments use qualifier weights: dev < (unknown) < rc < snapshot
  < final < ga < release < sp
- Unknown text segments compare by plain, case-sensitive string order

The trailing segment rule only looks at the next unmatched segment of the
longer version, so the ordering is not guaranteed to be transitive for every
mix of qualifiers and lengths.
"""

from __future__ import annotations

from functools import cmp_to_key
from types import MappingProxyType
from typing import Callable, Iterable, Optional, Union

from .parser import ParsedVersion, parse_version

VersionLike = Union[str, ParsedVersion]

# Weight of recognized qualifiers; unknown text segments weigh 0
QUALIFIER_WEIGHTS = MappingProxyType(
    {
        "dev": -1,
        "rc": 1,
        "snapshot": 2,
        "final": 3,
        "ga": 4,
        "release": 5,
        "sp": 6,
    }
)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _qualifier_weight(part: str) -> Optional[int]:
    """Look up a qualifier weight, folding ASCII case only."""
    if not part.isascii():
        return None
    return QUALIFIER_WEIGHTS.get(part.lower())


def _as_parsed(version: VersionLike) -> ParsedVersion:
    return version if isinstance(version, ParsedVersion) else parse_version(version)


def _compare_parsed(version1: ParsedVersion, version2: ParsedVersion) -> int:
    if version1.source == version2.source:
        return 0

    parts1, parts2 = version1.parts, version2.parts
    numbers1, numbers2 = version1.numeric_parts, version2.numeric_parts

    common = min(len(parts1), len(parts2))
    for i in range(common):
        part1, part2 = parts1[i], parts2[i]
        num1, num2 = numbers1[i], numbers2[i]

        if part1 == part2:
            continue
        if num1 is not None and num2 is None:
            return 1
        if num2 is not None and num1 is None:
            return -1
        if num1 is not None and num2 is not None:
            if num1 == num2:
                continue
            return -1 if num1 < num2 else 1

        # Both are text segments
        weight1 = _qualifier_weight(part1)
        weight2 = _qualifier_weight(part2)
        if weight1 is not None:
            return _sign(weight1 - (weight2 or 0))
        if weight2 is not None:
            return _sign(-weight2)
        return -1 if part1 < part2 else 1

    # A trailing number makes the longer version newer, a trailing qualifier older
    if len(parts1) > common:
        return 1 if numbers1[common] is not None else -1
    if len(parts2) > common:
        return -1 if numbers2[common] is not None else 1
    return 0


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two version strings.

    Args:
        version1: First version (string or ParsedVersion)
        version2: Second version (string or ParsedVersion)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Never raises for string input, including empty strings.

    Examples:
        >>> compare_versions("1.2.3", "1.2.a")
        1
        >>> compare_versions("1.0-rc", "1.0-final")
        -1
        >>> compare_versions("1.0", "01.0")
        0
        >>> compare_versions("1.2-beta", "1.2")
        -1
    """
    return _compare_parsed(_as_parsed(version1), _as_parsed(version2))


_VersionKey = cmp_to_key(compare_versions)


def version_key(version: VersionLike) -> object:
    """Return a sort key for a version.

    Examples:
        >>> sorted(["1.0", "1.0-rc", "1.0.1"], key=version_key)
        ['1.0-rc', '1.0', '1.0.1']
    """
    return _VersionKey(version)


class VersionComparator:
    """Reusable comparator object for handing to sorting and reporting code.

    Instances are stateless; ``VERSION_COMPARATOR`` is the shared instance.

    Example:
        >>> VERSION_COMPARATOR("1.0", "1.0.1")
        -1
        >>> VERSION_COMPARATOR.max(["1.0", "1.0-SNAPSHOT", "0.9"])
        '1.0'
    """

    __slots__ = ()

    def __call__(self, version1: VersionLike, version2: VersionLike) -> int:
        return compare_versions(version1, version2)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    @property
    def key(self) -> Callable[[VersionLike], object]:
        """Sort key function, usable with ``sorted`` and ``max``."""
        return version_key

    def sort(self, versions: Iterable[str], reverse: bool = False) -> list[str]:
        """Return the versions sorted oldest first (newest first if reverse)."""
        return sorted(versions, key=version_key, reverse=reverse)

    def max(self, versions: Iterable[str]) -> Optional[str]:
        """Return the newest version, or None if there are none.

        The first of several equal-ranked versions is returned.
        """
        return max(versions, key=version_key, default=None)

    def min(self, versions: Iterable[str]) -> Optional[str]:
        """Return the oldest version, or None if there are none."""
        return min(versions, key=version_key, default=None)


VERSION_COMPARATOR = VersionComparator()


def sort_versions(versions: Iterable[str], reverse: bool = False) -> list[str]:
    """Sort version strings oldest first.

    The sort is stable: versions that compare equal ("1.0" and "01.0") keep
    their input order.

    Examples:
        >>> sort_versions(["1.0", "1.0.1", "1.0-rc", "1.0-SNAPSHOT", "1.0-final"])
        ['1.0-rc', '1.0-SNAPSHOT', '1.0-final', '1.0', '1.0.1']
    """
    return VERSION_COMPARATOR.sort(versions, reverse=reverse)


def latest_version(versions: Iterable[str]) -> Optional[str]:
    """Return the newest version in an iterable, or None if it is empty."""
    return VERSION_COMPARATOR.max(versions)
