"""File and stream I/O for rendering."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path
from typing import BinaryIO

from ..core.errors import (
    InputError,
    InvalidEncodingError,
    SourceNotFoundError,
    StdinReadError,
)
from ..core.models import FileTemplate, InlineTemplate, StdinTemplate, TemplateSource


def read_text(path: Path) -> str:
    """Read a whole UTF-8 text file.

    Raises:
        SourceNotFoundError: If the file does not exist
        InvalidEncodingError: If the file is not valid UTF-8
        InputError: For any other OS-level read failure
    """
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise SourceNotFoundError("file not found", path=path) from e
    except UnicodeDecodeError as e:
        raise InvalidEncodingError(f"not valid UTF-8: {e.reason}", path=path) from e
    except OSError as e:
        raise InputError(e.strerror or str(e), path=path) from e


def read_stdin(stream: BinaryIO | None = None) -> str:
    """Read standard input until end of stream as strict UTF-8, whatever the locale."""
    stream = stream if stream is not None else sys.stdin.buffer
    try:
        data = stream.read()
    except OSError as e:
        raise StdinReadError(f"failed to read standard input: {e}") from e
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise StdinReadError(f"standard input is not valid UTF-8: {e.reason}") from e


def read_template(source: TemplateSource) -> str:
    """Obtain raw template text from the configured source.

    Args:
        source: Template source variant

    Returns:
        Template source text
    """
    if isinstance(source, FileTemplate):
        return read_text(source.path)
    if isinstance(source, InlineTemplate):
        return source.text
    if isinstance(source, StdinTemplate):
        return read_stdin()
    raise ValueError(f"Unknown template source: {source!r}")


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path."""
    path.parent.mkdir(parents=True, exist_ok=True)


def atomic_write_text(path: Path, text: str, mode: int = 0o644) -> None:
    """Write text to a file atomically using a temporary file.

    Args:
        path: Destination file path
        text: Text content to write
        mode: File permissions (octal)
    """
    ensure_parent(path)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
        os.chmod(path, mode)
    finally:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)
