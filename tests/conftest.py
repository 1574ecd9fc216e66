"""Shared pytest fixtures for the MEVN generate test suite.

Provides reusable fixtures for:
- Temporary MEVN project directories (with and without a server)
- Command configuration pointing at a temporary project
- Scripted prompt capabilities
- Mock subprocess helpers
"""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.config import Config, ProjectConfig


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------

def write_mevn_json(project_dir: Path, template: str = "Default", **extra: Any) -> Path:
    """Write a ``mevn.json`` into *project_dir* and return its path."""
    path = project_dir / "mevn.json"
    payload = {"name": project_dir.name, "template": template, **extra}
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def write_config() -> Callable[..., Path]:
    """Expose ``write_mevn_json`` to tests."""
    return write_mevn_json


@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Temporary MEVN project with ``mevn.json`` and a client, but no server."""
    project_dir = tmp_path / "test-project"
    project_dir.mkdir()
    write_mevn_json(project_dir)
    (project_dir / "client" / "src" / "components").mkdir(parents=True)
    yield project_dir


@pytest.fixture
def server_project_dir(tmp_project_dir: Path) -> Path:
    """Project with an empty ``server`` directory, ready for CRUD scaffolding."""
    (tmp_project_dir / "server").mkdir()
    return tmp_project_dir


@pytest.fixture
def graphql_project_dir(server_project_dir: Path) -> Path:
    """Server-ready project whose boilerplate template is GraphQL."""
    write_mevn_json(server_project_dir, template="graphql")
    return server_project_dir


@pytest.fixture
def rest_project() -> ProjectConfig:
    return ProjectConfig(template="rest")


@pytest.fixture
def graphql_project() -> ProjectConfig:
    return ProjectConfig(template="graphql")


@pytest.fixture
def config_for() -> Callable[[Path], Config]:
    """Factory building a quiet ``Config`` for a project directory."""
    def factory(project_dir: Path, **overrides: Any) -> Config:
        settings: dict[str, Any] = {"project_dir": project_dir, "show_banner": False, **overrides}
        return Config(**settings)

    return factory


# ---------------------------------------------------------------------------
# Prompt capabilities
# ---------------------------------------------------------------------------

@pytest.fixture
def scripted_choose() -> Callable[[str], MagicMock]:
    """Factory for a menu prompt that always answers with *label*.

    Usage:
        def test_menu(scripted_choose):
            choose = scripted_choose("CRUD Template (server)")
            ...
            choose.assert_called_once()
    """
    def factory(label: str) -> MagicMock:
        def _choose(message: str, choices: Sequence[str]) -> str:
            assert label in choices
            return label

        return MagicMock(side_effect=_choose)

    return factory


@pytest.fixture
def failing_choose() -> MagicMock:
    """Menu prompt that must never be shown."""
    return MagicMock(side_effect=AssertionError("prompt should not be shown"))


# ---------------------------------------------------------------------------
# Mock Subprocess (generic)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    stdout, stderr, and return codes.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory


@pytest.fixture
def fake_installer() -> MagicMock:
    """Stand-in ``PackageInstaller`` recording install calls."""
    installer = MagicMock()
    installer.install = AsyncMock(return_value="")
    return installer
