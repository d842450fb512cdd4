"""Structured-data parsing for TOML, JSON and YAML context files."""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

import yaml

from ..core.errors import ContextParseError, NonStringKeyError, NotAMappingError
from ..core.models import Format
from ..rendering.io import read_text

logger = logging.getLogger(__name__)


def resolve_context_path(format: Format, path: str | Path) -> Path:
    """Resolve a context file argument.

    A literal ``"."`` selects the format's default file in the working
    directory; any other value is used verbatim.
    """
    if str(path) == ".":
        logger.debug(f"Using default {format.value} context path: {format.default_path}")
        return format.default_path
    return Path(path)


def _parse_toml(text: str) -> Any:
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ContextParseError(
            str(e),
            format="toml",
            line=getattr(e, "lineno", None),
            column=getattr(e, "colno", None),
        ) from e


def _parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ContextParseError(e.msg, format="json", line=e.lineno, column=e.colno) from e


def _parse_yaml(text: str) -> Any:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        raise ContextParseError(
            str(e),
            format="yaml",
            line=mark.line + 1 if mark is not None else None,
            column=mark.column + 1 if mark is not None else None,
        ) from e

    # An empty stream is an empty mapping; an explicit null is not
    if data is None and yaml.compose(text, Loader=yaml.SafeLoader) is None:
        return {}

    if isinstance(data, dict):
        for key in data:
            if not isinstance(key, str):
                raise NonStringKeyError(key)
    return data


_PARSERS = {
    Format.TOML: _parse_toml,
    Format.JSON: _parse_json,
    Format.YAML: _parse_yaml,
}


def parse(format: Format, text: str) -> Any:
    """Parse structured text into plain Python data.

    Args:
        format: Format of the text
        text: Full document text

    Returns:
        Parsed value (mapping, list or scalar)

    Raises:
        ContextParseError: If the text is malformed
        NonStringKeyError: If a YAML top-level mapping has a non-string key
    """
    return _PARSERS[format](text)


def load_context_file(format: Format, path: str | Path) -> Any:
    """Read and parse a context file.

    Args:
        format: Format of the file
        path: File path, or ``"."`` for the format's default path

    Returns:
        Parsed value
    """
    return read_context_file(format, resolve_context_path(format, path))


def read_context_file(format: Format, path: Path) -> Any:
    """Read and parse a context file at an already resolved path."""
    logger.debug(f"Loading {format.value} context from {path}")

    text = read_text(path)
    try:
        return parse(format, text)
    except ContextParseError as e:
        e.path = path
        raise


def require_mapping(value: Any, *, path: Path | None = None) -> dict[str, Any]:
    """Return value as a mapping, failing when it is anything else."""
    if not isinstance(value, dict):
        raise NotAMappingError(
            f"top-level value must be a mapping to merge into the context, "
            f"got {'null' if value is None else type(value).__name__}; use a root key instead",
            path=path,
        )
    return value
