from __future__ import annotations

import pytest

from ctxrender.core.errors import RenderError
from ctxrender.rendering.engine import render


def test_render_nested_value() -> None:
    assert render("{{ c.a }}", {"c": {"a": 42}}, False) == "42"


def test_render_without_context() -> None:
    assert render("plain text", {}, False) == "plain text"


@pytest.mark.parametrize(
    ("autoescape", "expected"),
    [(True, "&lt;b&gt;"), (False, "<b>")],
)
def test_autoescape_toggle(autoescape: bool, expected: str) -> None:
    assert render("{{ c.v }}", {"c": {"v": "<b>"}}, autoescape) == expected


def test_trailing_newline_is_preserved() -> None:
    assert render("{{ x }}\n", {"x": 1}, False) == "1\n"
    assert render("{{ x }}", {"x": 1}, False) == "1"


def test_undefined_variable_is_an_error() -> None:
    with pytest.raises(RenderError, match="missing"):
        render("{{ missing }}", {}, False)


def test_undefined_attribute_is_an_error() -> None:
    with pytest.raises(RenderError):
        render("{{ c.nope }}", {"c": {}}, False)


def test_syntax_error_reports_line() -> None:
    with pytest.raises(RenderError) as excinfo:
        render("line one\n{% if %}\n", {}, False)

    assert excinfo.value.line == 2
    assert excinfo.value.stage == "render"
    assert ":2:" in str(excinfo.value)


def test_unknown_filter_is_an_error() -> None:
    with pytest.raises(RenderError, match="no_such_filter"):
        render("{{ 1 | no_such_filter }}", {}, False)


def test_type_error_in_expression() -> None:
    with pytest.raises(RenderError, match="TypeError"):
        render("{{ 1 + 'a' }}", {}, False)


class _Broken:
    @property
    def value(self) -> str:
        raise RuntimeError("backing store gone")


def test_arbitrary_exception_from_context_object() -> None:
    with pytest.raises(RenderError, match="backing store gone"):
        render("{{ obj.value }}", {"obj": _Broken()}, False)

