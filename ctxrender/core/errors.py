"""Error taxonomy for the rendering pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class CtxRenderError(Exception):
    """Base class for every error the pipeline reports to the user.

    Attributes:
        stage: Pipeline stage that failed ("input", "parse" or "render")
        path: Offending file, when the failure is tied to one
    """

    stage = "error"

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


class InputError(CtxRenderError):
    """Raised when a template or context source cannot be read."""

    stage = "input"


class SourceNotFoundError(InputError):
    """Raised when a template or context file does not exist."""


class InvalidEncodingError(InputError):
    """Raised when a file is not valid UTF-8 text."""


class StdinReadError(InputError):
    """Raised when standard input cannot be read to the end."""


class ContextParseError(CtxRenderError):
    """Raised when context data cannot be turned into a context."""

    stage = "parse"

    def __init__(
        self,
        message: str,
        *,
        format: str | None = None,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message, path=path)
        self.format = format
        self.line = line
        self.column = column

    def __str__(self) -> str:
        location = ""
        if self.line is not None:
            location = f" (line {self.line}"
            location += f", column {self.column})" if self.column is not None else ")"
        prefix = f"{self.path}: " if self.path is not None else ""
        kind = f"invalid {self.format.upper()}: " if self.format else ""
        return f"{prefix}{kind}{self.message}{location}"


class NotAMappingError(ContextParseError):
    """Raised when flattening is requested but the top level is not a mapping."""


class NonStringKeyError(ContextParseError):
    """Raised when a YAML mapping uses a key that is not a string."""

    def __init__(self, key: Any, *, path: Path | None = None) -> None:
        super().__init__(
            f"mapping keys must be strings, found {key!r} ({type(key).__name__})",
            format="yaml",
            path=path,
        )
        self.key = key


class RenderError(CtxRenderError):
    """Raised when the template engine fails to render."""

    stage = "render"

    def __init__(
        self, message: str, *, line: int | None = None, name: str | None = None
    ) -> None:
        super().__init__(message)
        self.line = line
        self.name = name

    def __str__(self) -> str:
        if self.line is not None:
            return f"{self.name or '<template>'}:{self.line}: {self.message}"
        return self.message
