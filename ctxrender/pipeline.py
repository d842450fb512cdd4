"""Single-shot render pipeline."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from .context import resolve_context
from .core.models import ResolvedConfig
from .rendering import engine
from .rendering.io import atomic_write_text, read_template

logger = logging.getLogger(__name__)


def run(config: ResolvedConfig, stdout: TextIO | None = None) -> str:
    """Resolve the context, read the template, render, and write the result.

    The context is always resolved before the template is read, so a context
    error is reported before anything is consumed from standard input.

    Args:
        config: Validated invocation configuration
        stdout: Stream receiving the output when config.output is unset

    Returns:
        Rendered text
    """
    context = resolve_context(config.context_source, config.root_key)
    template = read_template(config.template_source)
    rendered = engine.render(template, context, config.autoescape)

    if config.output is not None:
        atomic_write_text(config.output, rendered)
        logger.info(f"Rendered {config.template_source.kind} template → {config.output}")
    else:
        stream = stdout if stdout is not None else sys.stdout
        stream.write(rendered)
        stream.flush()

    return rendered
