"""Client component generation.

Renders a Vue single-file component from ``component/Component.vue.j2``
into the client's components directory.  Nuxt projects keep components at
``client/components``; every other boilerplate uses
``client/src/components``.
"""

from __future__ import annotations

import asyncio
import re
from collections.abc import Callable
from pathlib import Path

from src.config import ProjectConfig
from src.errors import ComponentExistsError, InvalidComponentNameError
from src.scaffolder.templates import TemplateLibrary
from src.utils import print_success, to_pascal_case, write_file

COMPONENT_TEMPLATE = "component/Component.vue.j2"
NAME_MESSAGE = "Name of the component"

_VALID_NAME = re.compile(r"^[A-Z][A-Za-z0-9]*$")

AskFn = Callable[[str], str]


class ComponentGenerator:
    """Creates a new Vue component in the client application.

    Args:
        project_dir: Root of the MEVN project.
        project: The project's ``mevn.json`` contents.
        ask: Prompt capability returning the component name.
        library: Template source; defaults to the bundled templates.
    """

    def __init__(
        self,
        project_dir: str | Path,
        project: ProjectConfig,
        ask: AskFn,
        library: TemplateLibrary | None = None,
    ) -> None:
        self.project_dir = Path(project_dir)
        self.project = project
        self.ask = ask
        self.library = library or TemplateLibrary()

    @property
    def components_dir(self) -> Path:
        if self.project.is_nuxt:
            return self.project_dir / "client" / "components"
        return self.project_dir / "client" / "src" / "components"

    async def generate(self) -> Path:
        """Prompt for a name and write the component file.

        Returns:
            Path of the new ``.vue`` file.

        Raises:
            InvalidComponentNameError: If the name has no usable characters.
            ComponentExistsError: If a component with that name exists.
        """
        raw_name = self.ask(NAME_MESSAGE)
        name = component_name(raw_name)

        target = self.components_dir / f"{name}.vue"
        if target.exists():
            raise ComponentExistsError(target)

        content = self.library.render(
            COMPONENT_TEMPLATE,
            {"component_name": name, "template": self.project.template},
        )
        await asyncio.to_thread(write_file, target, content)
        print_success(f"Created {target.relative_to(self.project_dir).as_posix()}")
        return target


def component_name(raw: str) -> str:
    """Normalise user input into a PascalCase component name."""
    name = to_pascal_case(raw)
    if not _VALID_NAME.match(name):
        raise InvalidComponentNameError(raw)
    return name
