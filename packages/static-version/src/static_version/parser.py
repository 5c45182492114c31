# SPDX-License-Identifier: MIT
"""Loose version string parsing.

Splits arbitrary version strings (not necessarily SemVer) into segments:
- Separators: ``.``, ``_``, ``-`` and ``+``
- Implicit boundaries between digit runs and non-digit runs
  (``7.0.12beta5`` -> ``7``, ``0``, ``12``, ``beta``, ``5``)

Parsing never fails; every string produces a ParsedVersion.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional

SEPARATORS = frozenset(".-_+")

# Segments larger than a signed 64-bit integer are treated as text
_MAX_NUMERIC = 2**63 - 1


def _to_number(part: str) -> Optional[int]:
    """Return the integer value of an all-ASCII-digit segment, else None."""
    if not part or not part.isascii() or not part.isdigit():
        return None
    value = int(part)
    if value > _MAX_NUMERIC:
        return None
    return value


@dataclass(frozen=True, slots=True, eq=False)
class ParsedVersion:
    """A version string split into comparable segments.

    Two instances are equal only when their source strings are equal, even if
    their segments have the same numeric values ("1.0" != "01.0").

    Attributes:
        source: The original version string
        parts: Segments in order (may contain empty strings for "1..2")
        numeric_parts: Integer value of each segment, or None for text segments
    """

    source: str
    parts: tuple[str, ...]
    numeric_parts: tuple[Optional[int], ...] = field(init=False)
    # None means the version is its own base version
    _base: Optional[ParsedVersion] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "numeric_parts", tuple(_to_number(p) for p in self.parts))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParsedVersion):
            return NotImplemented
        return self.source == other.source

    def __hash__(self) -> int:
        return hash(self.source)

    def __str__(self) -> str:
        return self.source

    @property
    def base_version(self) -> ParsedVersion:
        """Return the version without qualifiers.

        ``1.2.3-beta-4`` has base ``1.2.3`` and ``7.0.12beta5`` has base
        ``7.0.12``. An unqualified version is its own base version.
        """
        return self if self._base is None else self._base

    @property
    def is_qualified(self) -> bool:
        """Return True if the version carries any qualifier (``1.2-beta-3``)."""
        return self._base is not None


def parse_version(version_string: str) -> ParsedVersion:
    """Parse a version string into a ParsedVersion.

    Args:
        version_string: Any version string, including the empty string

    Returns:
        A ParsedVersion for the string

    Examples:
        >>> parse_version("7.0.12beta5").parts
        ('7', '0', '12', 'beta', '5')

        >>> parse_version("1.2.3-beta-4").base_version.source
        '1.2.3'

        >>> parse_version("1.2.3").is_qualified
        False
    """
    return _parse_cached(version_string)


@lru_cache(maxsize=1024)
def _parse_cached(original: str) -> ParsedVersion:
    parts: list[str] = []
    digit = False
    start = 0
    # Base version cut point: segment count and string position.
    # A position of 0 means no cut point has been found yet.
    end_base = 0
    end_base_pos = 0

    for pos, ch in enumerate(original):
        if ch in SEPARATORS:
            parts.append(original[start:pos])
            start = pos + 1
            digit = False
            if ch != "." and end_base_pos == 0:
                end_base = len(parts)
                end_base_pos = pos
        elif "0" <= ch <= "9":
            if not digit and pos > start:
                if end_base_pos == 0:
                    end_base = len(parts) + 1
                    end_base_pos = pos
                parts.append(original[start:pos])
                start = pos
            digit = True
        else:
            if digit:
                if end_base_pos == 0:
                    end_base = len(parts) + 1
                    end_base_pos = pos
                parts.append(original[start:pos])
                start = pos
            digit = False

    if len(original) > start:
        parts.append(original[start:])

    base = None
    if end_base_pos > 0:
        base = ParsedVersion(original[:end_base_pos], tuple(parts[:end_base]))
    return ParsedVersion(original, tuple(parts), base)
