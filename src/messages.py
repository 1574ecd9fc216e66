"""Precondition checks and diagnostics for the generate command.

Each ``ensure_*`` function raises a ``ScaffoldError`` subclass when its
precondition does not hold; ``report`` renders such an error on the console.
Process termination is left to the command boundary.
"""

from __future__ import annotations

from pathlib import Path

from rich.markup import escape

from src.config import ProjectConfig, config_path
from src.errors import (
    ConfigMissingError,
    DependencyMissingError,
    IncompatibleTemplateError,
    ScaffoldError,
)
from src.utils import console, which


def ensure_config_present(project_dir: str | Path) -> None:
    """Fail unless ``mevn.json`` exists in *project_dir*."""
    path = config_path(project_dir)
    if not path.is_file():
        raise ConfigMissingError(path)


def ensure_template_supports_mvc(config: ProjectConfig) -> None:
    """Fail when the project's boilerplate has no model/route/controller layout."""
    if config.is_graphql:
        raise IncompatibleTemplateError(config.template)


def ensure_dependency_installed(executable: str, url: str | None = None) -> str:
    """Fail unless *executable* is on ``PATH``.

    Returns:
        The resolved executable path.
    """
    resolved = which(executable)
    if resolved is None:
        raise DependencyMissingError(executable, url)
    return resolved


def report(error: ScaffoldError) -> None:
    """Render *error* the way the CLI presents fatal diagnostics."""
    headline, _, detail = escape(error.message).partition("\n")
    console.print()
    if isinstance(error, ConfigMissingError):
        console.print(f"[bold cyan] {headline}[/bold cyan]")
        console.print(f"[bold red] {detail}[/bold red]")
        return

    console.print(f"[bold red] {headline}[/bold red]")
    if detail:
        console.print(f"[bold cyan] {detail}[/bold cyan]")
