"""Template rendering for generated scripts and HTML views.

Two dialects are supported:

- Scripts (service worker, PWA bootstrap) use ``string.Template`` with
  ``$variable`` placeholders. Substitution is strict, so a placeholder
  without a value fails the build instead of leaking into the output.
- Views use Jinja2 with ``StrictUndefined``. The context can carry callable
  helpers that templates invoke while rendering.

Templates are read from disk on every call; nothing is cached.
"""

import logging
from pathlib import Path
from string import Template
from typing import Any

import jinja2

logger = logging.getLogger(__name__)


class TemplateError(Exception):
    """Raised when a template cannot be parsed or references an undefined value."""

    pass


def _read_template(template_path: Path) -> str:
    try:
        return template_path.read_text(encoding="utf-8")
    except OSError as e:
        raise TemplateError(f"Failed to read template {template_path}: {e}") from e


def render_script(template_path: Path, context: dict[str, Any]) -> str:
    """Render a ``string.Template`` file.

    Args:
        template_path: Path to the template file.
        context: Values for the ``$name`` placeholders.

    Returns:
        The rendered text.

    Raises:
        TemplateError: If the template is unreadable, malformed, or uses a
            placeholder missing from ``context``.
    """
    template = Template(_read_template(template_path))
    try:
        return template.substitute(context)
    except KeyError as e:
        raise TemplateError(f"Undefined placeholder {e} in {template_path}") from e
    except ValueError as e:
        raise TemplateError(f"Malformed template {template_path}: {e}") from e


def render_view(template_path: Path, context: dict[str, Any]) -> str:
    """Render a Jinja2 view template.

    Args:
        template_path: Path to the template. Other templates in the same
            directory can be extended or included by name.
        context: Template variables and helper callables.

    Returns:
        The rendered HTML.

    Raises:
        TemplateError: On syntax errors, missing templates, or access to an
            undefined variable. Exceptions raised by helpers propagate as-is.
    """
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(template_path.parent)),
        undefined=jinja2.StrictUndefined,
        autoescape=jinja2.select_autoescape(default=True),
        cache_size=0,
        keep_trailing_newline=True,
    )
    try:
        template = env.get_template(template_path.name)
        html = template.render(context)
    except jinja2.TemplateSyntaxError as e:
        raise TemplateError(f"Syntax error in {e.filename or template_path}, line {e.lineno}: {e.message}") from e
    except jinja2.TemplateError as e:
        raise TemplateError(f"Failed to render {template_path}: {e}") from e

    logger.debug("Rendered %s (%d chars)", template_path.name, len(html))
    return html
