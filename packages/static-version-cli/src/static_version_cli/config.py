# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


def _get_str(table: dict[str, Any], key: str, default: Optional[str]) -> Optional[str]:
    value = table.get(key, default)
    if value is not None and not isinstance(value, str):
        raise ConfigError(
            f"[tool.staticver].{key} must be a string, got {type(value).__name__}"
        )
    return value


@dataclass
class CLIConfig:
    """CLI configuration loaded from the ``[tool.staticver]`` table.

    Attributes:
        project_dir: Directory containing pyproject.toml
        revision: Revision level named in dependency reports
        project: Project path shown in the report header
        report_output: Default file to write reports to (stdout if unset)
    """

    project_dir: Path
    revision: str = "release"
    project: str = ":"
    report_output: Optional[Path] = None

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If the file is invalid or a value has the wrong type
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        Raises:
            ConfigError: If ``[tool.staticver]`` is not a table or a value
                has the wrong type
        """
        tool = pyproject.get("tool", {}).get("staticver", {})
        if not isinstance(tool, dict):
            raise ConfigError("[tool.staticver] must be a table")

        revision = _get_str(tool, "revision", "release")
        project = _get_str(tool, "project", None)
        report_output = _get_str(tool, "report-output", None)

        # Default the header to the project name when one is declared
        if project is None:
            name = pyproject.get("project", {}).get("name")
            project = name if isinstance(name, str) and name else ":"

        return cls(
            project_dir=project_dir,
            revision=revision or "release",
            project=project,
            report_output=project_dir / report_output if report_output else None,
        )


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the project root by looking for pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory

    Raises:
        ConfigError: If no project root is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    raise ConfigError("Could not find project root (no pyproject.toml found)")


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration from the project directory.

    Without an explicit directory the project root is searched for from the
    current directory; if none is found the defaults are used.

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    if project_dir is None:
        try:
            project_dir = find_project_root()
        except ConfigError:
            return CLIConfig(project_dir=Path.cwd())

    project_path = Path(project_dir)

    if (project_path / "pyproject.toml").exists():
        return CLIConfig.from_pyproject(project_path)

    return CLIConfig(project_dir=project_path)
