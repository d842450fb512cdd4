"""Template rendering engine."""

from __future__ import annotations

import logging
from typing import Any

from jinja2 import Environment, StrictUndefined, TemplateError, TemplateSyntaxError

from ..core.errors import RenderError

logger = logging.getLogger(__name__)


def make_environment(autoescape: bool) -> Environment:
    """Create a loader-less Jinja2 environment for one-off rendering.

    Args:
        autoescape: Escape HTML special characters in substituted values

    Returns:
        Configured Jinja2 environment
    """
    return Environment(
        undefined=StrictUndefined,
        autoescape=autoescape,
        keep_trailing_newline=True,
        cache_size=0,
    )


def render(template: str, context: dict[str, Any], autoescape: bool) -> str:
    """Render template source text with the given context.

    Args:
        template: Template source text
        context: Template context data
        autoescape: Escape HTML special characters in substituted values

    Returns:
        Rendered text

    Raises:
        RenderError: On syntax errors, undefined variables or filters, and
            any other error reported by the engine
    """
    logger.debug(f"Rendering template ({len(template)} chars, autoescape={autoescape})")

    env = make_environment(autoescape)
    try:
        return env.from_string(template).render(context)
    except TemplateSyntaxError as e:
        raise RenderError(e.message or str(e), line=e.lineno, name=e.name) from e
    except TemplateError as e:
        raise RenderError(e.message or str(e)) from e
    except Exception as e:
        raise RenderError(f"{type(e).__name__}: {e}") from e
