"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from .. import pipeline
from ..core.errors import CtxRenderError
from .parsers import resolve_config

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="ctxrender",
    help="Render a Jinja2 template with context from TOML, JSON, YAML or the environment.",
    add_completion=False,
)


@app.command()
def render(
    file: Annotated[
        Optional[Path],
        typer.Option("--file", "-f", help="Read the template from FILE.", metavar="FILE"),
    ] = None,
    template: Annotated[
        Optional[str],
        typer.Option("--template", "-t", help="Template source given inline.", metavar="TEXT"),
    ] = None,
    stdin: Annotated[
        bool,
        typer.Option("--stdin", help="Read the template from standard input."),
    ] = False,
    toml: Annotated[
        Optional[str],
        typer.Option("--toml", help='TOML context file ("." for .tera.toml).', metavar="PATH"),
    ] = None,
    json: Annotated[
        Optional[str],
        typer.Option("--json", help='JSON context file ("." for .tera.json).', metavar="PATH"),
    ] = None,
    yaml: Annotated[
        Optional[str],
        typer.Option("--yaml", help='YAML context file ("." for .tera.yml).', metavar="PATH"),
    ] = None,
    env: Annotated[
        bool,
        typer.Option("--env", "-e", help="Use environment variables as context."),
    ] = False,
    root: Annotated[
        Optional[str],
        typer.Option(
            "--root",
            "-r",
            help="Key the whole context is nested under (default: c).",
            metavar="KEY",
        ),
    ] = None,
    flatten: Annotated[
        bool,
        typer.Option("--flatten", help="Merge top-level entries directly into the context."),
    ] = False,
    escape: Annotated[
        bool,
        typer.Option("--escape", help="HTML-escape substituted values."),
    ] = False,
    out: Annotated[
        Optional[Path],
        typer.Option(
            "--out",
            "-o",
            help="Write the result to FILE atomically instead of standard output.",
            metavar="FILE",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging."),
    ] = False,
) -> None:
    """Render a single template to standard output."""
    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )

    config = resolve_config(
        file=file,
        template=template,
        stdin=stdin,
        toml=toml,
        json=json,
        yaml=yaml,
        env=env,
        root=root,
        flatten=flatten,
        escape=escape,
        out=out,
    )
    logger.debug(f"Config: {config!r}")

    try:
        pipeline.run(config)
    except CtxRenderError as e:
        typer.echo(f"error: {e.stage}: {e}", err=True)
        raise typer.Exit(code=1) from e


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
