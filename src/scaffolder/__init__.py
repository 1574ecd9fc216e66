"""MEVN scaffolder -- decides which boilerplate to generate and writes it.

The resolver turns filesystem state plus the user's choice into a
``ScaffoldPlan``; the executor copies the matching template directories
into the project.

Quick usage::

    from src.config import Config, load_project_config
    from src.scaffolder import FileSystemState, ScaffoldExecutor, TemplateResolver

    config = Config(project_dir=Path("my-app"))
    project = load_project_config(config.project_dir)
    plan = TemplateResolver(project, choose).resolve(
        FileSystemState.probe(config.project_dir)
    )
    await ScaffoldExecutor(config, project, generate_component).execute(plan)
"""

from src.scaffolder.component import ComponentGenerator
from src.scaffolder.executor import ScaffoldExecutor
from src.scaffolder.installer import PackageInstaller
from src.scaffolder.plans import (
    ClientComponent,
    GenerationChoice,
    ScaffoldPlan,
    ServerCRUD,
    ServerGraphQL,
)
from src.scaffolder.resolver import FileSystemState, TemplateResolver
from src.scaffolder.templates import TemplateLibrary

__all__ = [
    "ClientComponent",
    "ComponentGenerator",
    "FileSystemState",
    "GenerationChoice",
    "PackageInstaller",
    "ScaffoldExecutor",
    "ScaffoldPlan",
    "ServerCRUD",
    "ServerGraphQL",
    "TemplateLibrary",
    "TemplateResolver",
]
