"""Domain models for the resolved rendering configuration."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Annotated


class Format(str, Enum):
    """Structured-data formats accepted as a context source."""

    TOML = "toml"
    JSON = "json"
    YAML = "yaml"

    @property
    def default_path(self) -> Path:
        """Path used when the context file argument is ``"."``."""
        return Path(_DEFAULT_PATHS[self])


_DEFAULT_PATHS = {
    Format.TOML: ".tera.toml",
    Format.JSON: ".tera.json",
    Format.YAML: ".tera.yml",
}


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class FileTemplate(_Frozen):
    """Template text read from a file."""

    kind: Literal["file"] = "file"
    path: Path = Field(..., description="Template file path")


class InlineTemplate(_Frozen):
    """Template text given directly."""

    kind: Literal["inline"] = "inline"
    text: str = Field(..., description="Template source text")


class StdinTemplate(_Frozen):
    """Template text read from standard input."""

    kind: Literal["stdin"] = "stdin"


TemplateSource = Annotated[
    Union[FileTemplate, InlineTemplate, StdinTemplate], Field(discriminator="kind")
]


class FileContext(_Frozen):
    """Context parsed from a TOML, JSON or YAML file."""

    kind: Literal["file"] = "file"
    format: Format = Field(..., description="Structured-data format")
    path: Path = Field(..., description='Context file path, "." for the default')


class EnvContext(_Frozen):
    """Context collected from process environment variables."""

    kind: Literal["env"] = "env"


class NoContext(_Frozen):
    """Empty context."""

    kind: Literal["none"] = "none"


ContextSource = Annotated[
    Union[FileContext, EnvContext, NoContext], Field(discriminator="kind")
]


class ResolvedConfig(_Frozen):
    """Validated choices for a single invocation."""

    template_source: TemplateSource = Field(..., description="Where the template comes from")
    context_source: ContextSource = Field(
        default_factory=NoContext, description="Where the context comes from"
    )
    root_key: str | None = Field(
        default="c", min_length=1, description="Key nesting the whole context, None to flatten"
    )
    autoescape: bool = Field(default=False, description="Escape HTML in substituted values")
    output: Path | None = Field(
        default=None, description="Output file, None for standard output"
    )
