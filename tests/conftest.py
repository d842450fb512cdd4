from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

SAMPLES = {
    "toml": 'a = 1\nb = "x"\n\n[nested]\nlist = [1, 2, 3]\n',
    "json": '{"a": 1, "b": "x", "nested": {"list": [1, 2, 3]}}',
    "yaml": "a: 1\nb: x\nnested:\n  list: [1, 2, 3]\n",
}

SAMPLE_DATA = {"a": 1, "b": "x", "nested": {"list": [1, 2, 3]}}


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def write_file(tmp_path: Path):
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
