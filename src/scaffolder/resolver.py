"""Decide which scaffold plan a ``generate`` invocation should execute.

The decision depends on two filesystem probes and, only when both allow
server scaffolding, on the user's choice and the project's boilerplate
template::

    no ./server, or ./server/models present  -> ClientComponent (no prompt)
    user picks "Component (client)"          -> ClientComponent
    template == "graphql"                    -> ServerGraphQL
    anything else                            -> ServerCRUD

The ``./server/models`` probe runs before the prompt.  It is the only guard
against copying the CRUD/GraphQL templates over an already scaffolded
server.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from src.config import Config, ProjectConfig
from src.scaffolder.plans import (
    CHOICE_LABELS,
    ClientComponent,
    GenerationChoice,
    ScaffoldPlan,
    ServerCRUD,
    ServerGraphQL,
)

CHOICE_MESSAGE = "Choose the required file to be generated"

ChooseFn = Callable[[str, Sequence[str]], str]


@dataclass(frozen=True)
class FileSystemState:
    """Snapshot of the project directories the decision depends on."""

    server_dir_exists: bool
    models_dir_exists: bool

    @classmethod
    def probe(cls, project_dir: str | Path) -> "FileSystemState":
        """Query the filesystem under *project_dir* right now."""
        root = Path(project_dir)
        return cls(
            server_dir_exists=(root / "server").exists(),
            models_dir_exists=(root / "server" / "models").exists(),
        )

    @property
    def allows_server_scaffold(self) -> bool:
        return self.server_dir_exists and not self.models_dir_exists


class TemplateResolver:
    """Resolves a ``ScaffoldPlan`` from filesystem state and user input.

    Args:
        project: The project's ``mevn.json`` contents.
        choose: Prompt capability; called with a message and the menu labels,
            returns the selected label.
        config: Command settings used to fill in server plan payloads.
    """

    def __init__(
        self,
        project: ProjectConfig,
        choose: ChooseFn,
        config: Config | None = None,
    ) -> None:
        self.project = project
        self.choose = choose
        self.config = config or Config()

    def resolve(
        self,
        state: FileSystemState,
        choice: GenerationChoice | None = None,
    ) -> ScaffoldPlan:
        """Return the plan for *state*.

        A pre-selected *choice* replaces the prompt but never bypasses the
        filesystem guard.
        """
        if not state.allows_server_scaffold:
            return ClientComponent()

        if choice is None:
            choice = self.ask()

        if choice is GenerationChoice.CLIENT_COMPONENT:
            return ClientComponent()

        if self.project.is_graphql:
            return ServerGraphQL()

        return ServerCRUD(
            env_body=self.config.env_body,
            orm_package=self.config.orm_package,
        )

    def ask(self) -> GenerationChoice:
        """Prompt for the generation type."""
        label = self.choose(CHOICE_MESSAGE, list(CHOICE_LABELS.values()))
        return GenerationChoice.from_label(label)
