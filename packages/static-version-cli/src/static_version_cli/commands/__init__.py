# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import compare, sort, parse, check, report

__all__ = ["compare", "sort", "parse", "check", "report"]
