"""Materialise a resolved ``ScaffoldPlan`` on disk.

Steps run strictly in order and stop at the first failure.  Nothing is
rolled back: a failed copy leaves whatever was already written in place.
Re-running on an already scaffolded server overwrites the routing and
``.env`` files.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any

from src.config import Config, ProjectConfig
from src.messages import ensure_dependency_installed, ensure_template_supports_mvc
from src.scaffolder.installer import PackageInstaller
from src.scaffolder.plans import ClientComponent, ScaffoldPlan, ServerCRUD, ServerGraphQL
from src.scaffolder.templates import TemplateLibrary
from src.utils import copy_dir, print_success, read_file, write_file

GenerateComponentFn = Callable[[], Awaitable[Any]]


class ScaffoldExecutor:
    """Applies scaffold plans to a project directory.

    Args:
        config: Command settings (project directory, package manager, ...).
        project: The project's ``mevn.json`` contents.
        generate_component: Client-component capability, awaited with no
            arguments for ``ClientComponent`` plans.
        library: Template source; defaults to ``config.templates_dir``.
        installer: Package installer; defaults to one built from *config*.
    """

    def __init__(
        self,
        config: Config,
        project: ProjectConfig,
        generate_component: GenerateComponentFn,
        library: TemplateLibrary | None = None,
        installer: PackageInstaller | None = None,
    ) -> None:
        self.config = config
        self.project = project
        self.generate_component = generate_component
        self.library = library or TemplateLibrary(config.templates_dir)
        self.installer = installer or PackageInstaller(
            config.project_dir,
            package_manager=config.package_manager,
            timeout=config.install_timeout,
        )

    @property
    def project_dir(self) -> Path:
        return self.config.project_dir

    # -- Public API --------------------------------------------------------

    async def execute(self, plan: ScaffoldPlan) -> None:
        """Run *plan* to completion."""
        if isinstance(plan, ClientComponent):
            await self.generate_component()
        elif isinstance(plan, ServerGraphQL):
            await self._scaffold_graphql(plan)
        elif isinstance(plan, ServerCRUD):
            await self._scaffold_crud(plan)
        else:
            raise TypeError(f"Unsupported scaffold plan: {plan!r}")

    # -- Plans -------------------------------------------------------------

    async def _scaffold_graphql(self, plan: ServerGraphQL) -> None:
        """Copy the GraphQL schema directory, then the models directory."""
        await self._copy_template_dirs(plan.template_dirs, plan.target_root)

    async def _scaffold_crud(self, plan: ServerCRUD) -> None:
        """Routes, controllers, models, ORM install, then ``.env``."""
        ensure_template_supports_mvc(self.project)
        ensure_dependency_installed(
            self.config.package_manager, self.config.package_manager_url
        )

        routes = await asyncio.to_thread(read_file, self.library.path(plan.routes_source))
        routes_target = self.project_dir / plan.routes_target
        await asyncio.to_thread(write_file, routes_target, routes)
        print_success(f"Created {plan.routes_target}")

        await self._copy_template_dirs(plan.template_dirs, plan.target_root)

        await self.installer.install(
            plan.orm_package,
            f"Installing {plan.orm_package} ORM. Hold on",
        )

        await asyncio.to_thread(write_file, self.project_dir / plan.env_target, plan.env_body)
        print_success(f"Created {plan.env_target}")

    # -- Helpers -----------------------------------------------------------

    async def _copy_template_dirs(self, names: tuple[str, ...], target_root: str) -> None:
        target = self.project_dir / target_root
        for name in names:
            await asyncio.to_thread(copy_dir, self.library.path(name), target)
            print_success(f"Created {target_root}/{name}")
