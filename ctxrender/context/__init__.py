"""Context sources and context construction."""

from .builder import build_context, collect_env, resolve_context
from .parsing import load_context_file, parse, resolve_context_path

__all__ = [
    "build_context",
    "collect_env",
    "load_context_file",
    "parse",
    "resolve_context",
    "resolve_context_path",
]
