"""Scaffold plan models.

A plan is the resolved decision of which template set and file operations
to apply.  Exactly one plan is produced per invocation; the executor
materialises it.  Template sources are names relative to the templates
directory and targets are relative to the project directory, so a plan is
a pure value independent of where the command runs.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class GenerationChoice(str, Enum):
    """What the user asked to generate."""
    CLIENT_COMPONENT = "component"
    SERVER_FILE = "crud"

    @property
    def label(self) -> str:
        """Menu label shown by the interactive prompt."""
        return CHOICE_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> "GenerationChoice":
        """Map a menu label back to its choice.

        Raises:
            ValueError: If *label* is not one of the menu labels.
        """
        for choice, choice_label in CHOICE_LABELS.items():
            if choice_label == label:
                return choice
        raise ValueError(f"Unknown generation choice: {label!r}")


CHOICE_LABELS: dict[GenerationChoice, str] = {
    GenerationChoice.CLIENT_COMPONENT: "Component (client)",
    GenerationChoice.SERVER_FILE: "CRUD Template (server)",
}


# ---------------------------------------------------------------------------
# Plans
# ---------------------------------------------------------------------------

class _Plan(BaseModel):
    model_config = ConfigDict(frozen=True)


class ClientComponent(_Plan):
    """Hand off to the component generator; no server files are touched."""
    kind: Literal["client_component"] = "client_component"


class ServerGraphQL(_Plan):
    """Copy the GraphQL schema and model templates into the server."""
    kind: Literal["server_graphql"] = "server_graphql"
    template_dirs: tuple[str, ...] = Field(default=("graphql", "models"))
    target_root: str = Field(default="server")


class ServerCRUD(_Plan):
    """Write REST routes, copy controllers and models, install the ORM."""
    kind: Literal["server_crud"] = "server_crud"
    template_dirs: tuple[str, ...] = Field(default=("controllers", "models"))
    routes_source: str = Field(default="routes/index.js")
    routes_target: str = Field(default="server/routes/api.js")
    target_root: str = Field(default="server")
    env_target: str = Field(default="server/.env")
    env_body: str = Field(default="DB_URL=mongodb://localhost:27017")
    orm_package: str = Field(default="mongoose")


ScaffoldPlan = Union[ClientComponent, ServerGraphQL, ServerCRUD]
