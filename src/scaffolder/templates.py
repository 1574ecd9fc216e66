"""Template library access for the generate command.

Holds the ``TemplateLibrary`` class, which locates the verbatim template
directories (``graphql``, ``models``, ``controllers``, ``routes``) and
renders the Jinja2 ``.j2`` templates (client components) shipped under
``src/scaffolder/templates/``.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateLibrary
# ---------------------------------------------------------------------------


class TemplateLibrary:
    """Resolves and renders scaffolding templates.

    Verbatim templates are plain directories copied as-is; rendered
    templates end in ``.j2`` and are processed by Jinja2 with a context
    dictionary (component name, project template, ...).
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["kebab_case"] = _kebab_case_filter

    # -- Verbatim templates --------------------------------------------------

    def path(self, name: str) -> Path:
        """Return the absolute path of the template *name* (dir or file)."""
        return self.template_dir / name

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return every file under *prefix*, relative to the template root."""
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*")
            if p.is_file()
        )

    # -- Rendered templates --------------------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single ``.j2`` template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"component/Component.vue.j2"``).
            context: Dictionary of variables available inside the template.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _kebab_case_filter(value: str) -> str:
    """Convert ``TodoList`` to ``todo-list``."""
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1-\2", value)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", s1)
    return re.sub(r"[_\s]+", "-", s2).lower()
