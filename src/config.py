"""MEVN generate configuration.

Two typed layers, both Pydantic v2 models:

* ``ProjectConfig`` -- the per-project ``mevn.json`` written by the project
  initialisation tooling.  Read-only here.
* ``Config`` -- settings for the generate command itself (where the project
  lives, where templates come from, which package manager and ORM to use).
  Built from environment variables and then overridden by CLI flags.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.errors import ConfigInvalidError, ConfigMissingError, SettingsInvalidError

CONFIG_FILENAME = "mevn.json"

GRAPHQL_TEMPLATE = "graphql"
NUXT_TEMPLATE = "Nuxt-js"
DEFAULT_TEMPLATE = "Default"

DB_URL = "mongodb://localhost:27017"

_DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "scaffolder" / "templates"


# ---------------------------------------------------------------------------
# Per-project configuration (mevn.json)
# ---------------------------------------------------------------------------


class ProjectConfig(BaseModel):
    """Contents of a project's ``mevn.json``.

    Only ``template`` drives scaffolding decisions, and only on the server
    path; a file without it reads as the ``Default`` boilerplate.  Any other
    keys written by the initialisation tooling (``name``, ``isConfigured``,
    ...) are kept so the record round-trips unchanged.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    template: str = Field(
        default=DEFAULT_TEMPLATE, min_length=1, description="Boilerplate template identifier"
    )

    @property
    def is_graphql(self) -> bool:
        return self.template == GRAPHQL_TEMPLATE

    @property
    def is_nuxt(self) -> bool:
        return self.template == NUXT_TEMPLATE


def config_path(project_dir: str | Path) -> Path:
    """Return the location of ``mevn.json`` inside *project_dir*."""
    return Path(project_dir) / CONFIG_FILENAME


def load_project_config(project_dir: str | Path) -> ProjectConfig:
    """Read and validate ``mevn.json`` from *project_dir*.

    Raises:
        ConfigMissingError: If the file does not exist.
        ConfigInvalidError: If the file is not a JSON object, or its
            ``template`` is not a non-empty string.
    """
    path = config_path(project_dir)
    if not path.is_file():
        raise ConfigMissingError(path)

    try:
        data: Any = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigInvalidError(path, f"not valid JSON ({exc.msg})") from exc

    if not isinstance(data, dict):
        raise ConfigInvalidError(path, "expected a JSON object")

    try:
        return ProjectConfig.model_validate(data)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "<root>"
        raise ConfigInvalidError(path, f"{location}: {first['msg']}") from exc


# ---------------------------------------------------------------------------
# Command configuration
# ---------------------------------------------------------------------------


class Config(BaseModel):
    """Settings for a single ``generate`` invocation.

    Instances are created once by the CLI entry point and passed through to
    the resolver and executor.
    """

    project_dir: Path = Field(default=Path("."))
    templates_dir: Path = Field(default=_DEFAULT_TEMPLATES_DIR)
    package_manager: str = Field(default="npm")
    package_manager_url: str = Field(default="https://nodejs.org/en/download/")
    orm_package: str = Field(default="mongoose")
    install_timeout: int | None = Field(
        default=None, ge=1, description="Install timeout in seconds; None waits indefinitely"
    )
    show_banner: bool = Field(default=True)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def config_file(self) -> Path:
        """Path to the project's ``mevn.json``."""
        return config_path(self.project_dir)

    @property
    def server_dir(self) -> Path:
        """The ``server`` directory server-side templates are copied into."""
        return self.project_dir / "server"

    @property
    def models_dir(self) -> Path:
        """``server/models``; its presence means server scaffolding already ran."""
        return self.server_dir / "models"

    @property
    def routes_file(self) -> Path:
        """The CRUD routing file written from ``routes/index.js``."""
        return self.server_dir / "routes" / "api.js"

    @property
    def env_file(self) -> Path:
        return self.server_dir / ".env"

    @property
    def env_body(self) -> str:
        """Exact contents written to ``server/.env``."""
        return f"DB_URL={DB_URL}"

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            MEVN_PROJECT_DIR, MEVN_TEMPLATES_DIR, MEVN_PACKAGE_MANAGER,
            MEVN_ORM_PACKAGE, MEVN_INSTALL_TIMEOUT.

        Raises:
            SettingsInvalidError: If a variable holds an unusable value.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("MEVN_PROJECT_DIR"):
            kwargs["project_dir"] = Path(os.environ["MEVN_PROJECT_DIR"])
        if os.environ.get("MEVN_TEMPLATES_DIR"):
            kwargs["templates_dir"] = Path(os.environ["MEVN_TEMPLATES_DIR"])
        if os.environ.get("MEVN_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["MEVN_PACKAGE_MANAGER"]
        if os.environ.get("MEVN_ORM_PACKAGE"):
            kwargs["orm_package"] = os.environ["MEVN_ORM_PACKAGE"]
        if os.environ.get("MEVN_INSTALL_TIMEOUT"):
            kwargs["install_timeout"] = os.environ["MEVN_INSTALL_TIMEOUT"]

        try:
            return cls(**kwargs)
        except ValidationError as exc:
            first = exc.errors()[0]
            field = str(first["loc"][0]) if first["loc"] else "<root>"
            raise SettingsInvalidError(f"MEVN_{field.upper()}", first["msg"]) from exc
