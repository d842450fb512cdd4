"""CLI option resolution and validation."""

from __future__ import annotations

from pathlib import Path

import typer

from ..core.models import (
    ContextSource,
    EnvContext,
    FileContext,
    FileTemplate,
    Format,
    InlineTemplate,
    NoContext,
    ResolvedConfig,
    StdinTemplate,
    TemplateSource,
)


def parse_template_source(
    file: Path | None, template: str | None, stdin: bool
) -> TemplateSource:
    """Pick the single template source given on the command line."""
    chosen: list[TemplateSource] = []
    if file is not None:
        chosen.append(FileTemplate(path=file))
    if template is not None:
        chosen.append(InlineTemplate(text=template))
    if stdin:
        chosen.append(StdinTemplate())

    if len(chosen) != 1:
        raise typer.BadParameter(
            f"Exactly one of --file, --template or --stdin is required, got {len(chosen)}"
        )
    return chosen[0]


def parse_context_source(
    toml: str | None, json: str | None, yaml: str | None, env: bool
) -> ContextSource:
    """Pick at most one context source given on the command line."""
    chosen: list[ContextSource] = [
        FileContext(format=fmt, path=Path(value))
        for fmt, value in ((Format.TOML, toml), (Format.JSON, json), (Format.YAML, yaml))
        if value is not None
    ]
    if env:
        chosen.append(EnvContext())

    if len(chosen) > 1:
        raise typer.BadParameter(
            "At most one of --toml, --json, --yaml or --env may be given"
        )
    return chosen[0] if chosen else NoContext()


def parse_root_key(root: str | None, flatten: bool) -> str | None:
    """Resolve the root key; None means flatten into the top level."""
    if flatten:
        if root is not None:
            raise typer.BadParameter("--root and --flatten are mutually exclusive")
        return None
    if root is None:
        return "c"
    if not root:
        raise typer.BadParameter("--root must not be empty; use --flatten instead")
    return root


def resolve_config(
    *,
    file: Path | None = None,
    template: str | None = None,
    stdin: bool = False,
    toml: str | None = None,
    json: str | None = None,
    yaml: str | None = None,
    env: bool = False,
    root: str | None = None,
    flatten: bool = False,
    escape: bool = False,
    out: Path | None = None,
) -> ResolvedConfig:
    """Build a validated configuration from raw option values.

    No file or stream is touched here.
    """
    return ResolvedConfig(
        template_source=parse_template_source(file, template, stdin),
        context_source=parse_context_source(toml, json, yaml, env),
        root_key=parse_root_key(root, flatten),
        autoescape=escape,
        output=out,
    )
