"""``generate`` command -- scaffold a file into an existing MEVN project.

Flow: banner -> config gate -> read ``mevn.json`` once -> probe the server
directories -> resolve a plan (prompting if needed) -> execute it.

This module is the only place that ends the process.  Everything below it
raises ``ScaffoldError`` subclasses which ``main`` reports and converts into
an exit status.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from src.config import Config, load_project_config
from src.errors import ScaffoldError
from src.messages import ensure_config_present, report
from src.scaffolder.component import AskFn, ComponentGenerator
from src.scaffolder.executor import ScaffoldExecutor
from src.scaffolder.plans import GenerationChoice, ScaffoldPlan
from src.scaffolder.resolver import ChooseFn, FileSystemState, TemplateResolver
from src.scaffolder.templates import TemplateLibrary
from src.utils import print_banner, prompt_choice, prompt_text

BANNER_TITLE = "MEVN CLI"
BANNER_SUBTITLE = "Light speed setup for MEVN stack based apps."


async def generate_file(
    config: Config,
    choice: GenerationChoice | None = None,
    *,
    choose: ChooseFn = prompt_choice,
    ask: AskFn = prompt_text,
) -> ScaffoldPlan:
    """Run the generate command against ``config.project_dir``.

    Args:
        config: Command settings.
        choice: Optional pre-selected generation type; skips the menu.
        choose: Menu prompt capability.
        ask: Free-text prompt capability (component name).

    Returns:
        The plan that was executed.
    """
    if config.show_banner:
        print_banner(BANNER_TITLE, BANNER_SUBTITLE)

    ensure_config_present(config.project_dir)
    project = load_project_config(config.project_dir)

    library = TemplateLibrary(config.templates_dir)
    resolver = TemplateResolver(project, choose, config)
    plan = resolver.resolve(FileSystemState.probe(config.project_dir), choice)

    components = ComponentGenerator(config.project_dir, project, ask, library)
    executor = ScaffoldExecutor(config, project, components.generate, library)
    await executor.execute(plan)
    return plan


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``mevn-generate`` / ``python -m src.generate``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="mevn-generate",
        description="Generate components, CRUD templates or GraphQL schemas in a MEVN project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  mevn-generate\n"
            "  mevn-generate --type crud\n"
            "  mevn-generate --project-dir ./my-app --type component\n"
        ),
    )
    parser.add_argument(
        "--project-dir", "-d",
        default=None,
        help="MEVN project root containing mevn.json (default: current directory)",
    )
    parser.add_argument(
        "--type", "-t",
        dest="choice",
        choices=[c.value for c in GenerationChoice],
        default=None,
        help="Skip the menu and generate this type of file",
    )
    parser.add_argument(
        "--no-banner",
        action="store_true",
        help="Do not print the banner",
    )

    args = parser.parse_args(argv)
    choice = GenerationChoice(args.choice) if args.choice else None

    try:
        config = Config.from_env()
        if args.project_dir:
            config.project_dir = Path(args.project_dir)
        if args.no_banner:
            config.show_banner = False

        asyncio.run(generate_file(config, choice))
    except ScaffoldError as exc:
        report(exc)
        sys.exit(exc.exit_code)


if __name__ == "__main__":
    main()
