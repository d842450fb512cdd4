"""Rendering context construction."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from ..core.models import ContextSource, EnvContext, FileContext, NoContext
from .parsing import read_context_file, require_mapping, resolve_context_path

logger = logging.getLogger(__name__)


def collect_env() -> dict[str, str]:
    """Snapshot process environment variables as a flat string mapping."""
    return dict(os.environ)


def build_context(
    value: Any, root_key: str | None, *, path: Path | None = None
) -> dict[str, Any]:
    """Turn a parsed value into a rendering context.

    Args:
        value: Parsed structured value, or None when there is no data
        root_key: Key to nest the whole value under; None merges the
            top-level mapping entries directly
        path: File the value came from, reported on errors

    Returns:
        Context dictionary for template rendering

    Raises:
        NotAMappingError: If root_key is None and value is not a mapping
    """
    if root_key is not None:
        return {root_key: {} if value is None else value}
    return dict(require_mapping(value, path=path))


def resolve_context(source: ContextSource, root_key: str | None) -> dict[str, Any]:
    """Build the rendering context for the configured source.

    Args:
        source: Context source variant
        root_key: Root key, or None to flatten

    Returns:
        Context dictionary for template rendering
    """
    if isinstance(source, FileContext):
        path = resolve_context_path(source.format, source.path)
        value = read_context_file(source.format, path)
        context = build_context(value, root_key, path=path)
    elif isinstance(source, EnvContext):
        env = collect_env()
        logger.debug(f"Collected {len(env)} environment variable(s)")
        context = build_context(env, root_key)
    elif isinstance(source, NoContext):
        context = {}
    else:
        raise ValueError(f"Unknown context source: {source!r}")

    logger.debug(f"Context keys: {sorted(context)}")
    return context
