# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory with pyproject.toml."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "test-project"
version = "1.0.0"

[tool.staticver]
revision = "milestone"
project = ":app"
"""
    )

    yield project_dir


@pytest.fixture
def dependencies_file(tmp_path: Path) -> Path:
    """Create a dependency JSON file covering every report section."""
    path = tmp_path / "dependencies.json"
    path.write_text(
        json.dumps(
            {
                "dependencies": [
                    {"group": "org.example", "name": "current", "version": "1.0", "latest": "1.0"},
                    {"group": "org.example", "name": "old", "version": "1.0", "latest": "1.2"},
                    {"group": "org.example", "name": "ahead", "version": "3.0", "latest": "2.0"},
                    {"group": "org.example", "name": "loose"},
                    {
                        "group": "org.example",
                        "name": "gone",
                        "version": "1.0",
                        "reason": "Could not resolve",
                    },
                ]
            }
        )
    )
    return path
