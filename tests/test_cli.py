from __future__ import annotations

from ctxrender.cli import app


def test_inline_template_with_json_root_key(runner, write_file) -> None:
    path = write_file("data.json", '{"a": 42}')

    result = runner.invoke(app, ["--template", "{{ c.a }}", "--json", str(path)])

    assert result.exit_code == 0, result.output
    assert result.output == "42"


def test_flatten_json(runner, write_file) -> None:
    path = write_file("data.json", '{"name": "x"}')

    result = runner.invoke(app, ["-t", "{{ name }}", "--json", str(path), "--flatten"])

    assert result.exit_code == 0, result.output
    assert result.output == "x"


def test_custom_root_key_with_yaml(runner, write_file) -> None:
    path = write_file("conf.yml", "server:\n  port: 8080\n")

    result = runner.invoke(app, ["-t", "{{ cfg.server.port }}", "--yaml", str(path), "-r", "cfg"])

    assert result.exit_code == 0, result.output
    assert result.output == "8080"


def test_template_file_and_default_toml(runner, tmp_path, monkeypatch) -> None:
    (tmp_path / ".tera.toml").write_text('title = "Home"\n', encoding="utf-8")
    (tmp_path / "page.j2").write_text("<h1>{{ c.title }}</h1>\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["--file", "page.j2", "--toml", "."])

    assert result.exit_code == 0, result.output
    assert result.output == "<h1>Home</h1>\n"


def test_template_from_stdin(runner, write_file) -> None:
    path = write_file("data.yml", "who: world\n")

    result = runner.invoke(app, ["--stdin", "--yaml", str(path)], input="hello {{ c.who }}")

    assert result.exit_code == 0, result.output
    assert result.output == "hello world"


def test_env_context(runner, monkeypatch) -> None:
    monkeypatch.setenv("FOO", "bar")

    result = runner.invoke(app, ["-t", "{{ c.FOO }}", "--env"])

    assert result.exit_code == 0, result.output
    assert result.output == "bar"


def test_no_context(runner) -> None:
    result = runner.invoke(app, ["-t", "{{ 1 + 2 }}"])

    assert result.exit_code == 0, result.output
    assert result.output == "3"


def test_escape_flag(runner, write_file) -> None:
    path = write_file("data.json", '{"v": "<b>"}')

    escaped = runner.invoke(app, ["-t", "{{ c.v }}", "--json", str(path), "--escape"])
    raw = runner.invoke(app, ["-t", "{{ c.v }}", "--json", str(path)])

    assert escaped.output == "&lt;b&gt;"
    assert raw.output == "<b>"


def test_output_file(runner, tmp_path) -> None:
    target = tmp_path / "out.txt"

    result = runner.invoke(app, ["-t", "done", "--out", str(target)])

    assert result.exit_code == 0, result.output
    assert result.output == ""
    assert target.read_text(encoding="utf-8") == "done"


def test_two_template_sources_rejected_before_io(runner, tmp_path) -> None:
    missing = tmp_path / "missing.j2"

    result = runner.invoke(app, ["--file", str(missing), "-t", "x", "--json", str(tmp_path / "no.json")])

    assert result.exit_code == 2
    assert "not found" not in result.output


def test_two_context_sources_rejected(runner, tmp_path) -> None:
    result = runner.invoke(
        app, ["-t", "x", "--json", str(tmp_path / "a.json"), "--yaml", str(tmp_path / "a.yml")]
    )

    assert result.exit_code == 2
    assert "not found" not in result.output


def test_missing_context_file_reports_stage_and_path(runner, tmp_path) -> None:
    missing = tmp_path / "missing.toml"

    result = runner.invoke(app, ["--stdin", "--toml", str(missing)], input="{{ c }}")

    assert result.exit_code == 1
    assert "input" in result.output
    assert str(missing) in result.output


def test_flatten_yaml_list_fails(runner, write_file) -> None:
    path = write_file("list.yml", "- a\n- b\n")

    result = runner.invoke(app, ["-t", "{{ a }}", "--yaml", str(path), "--flatten"])

    assert result.exit_code == 1
    assert "parse" in result.output
    assert "mapping" in result.output


def test_render_error_produces_no_output(runner) -> None:
    result = runner.invoke(app, ["-t", "before {{ missing }} after"])

    assert result.exit_code == 1
    assert "before" not in result.output
    assert "render" in result.output
    assert "missing" in result.output


def test_stdin_with_invalid_utf8_fails(runner) -> None:
    result = runner.invoke(app, ["--stdin"], input=b"x\xff{{ 1 }}")

    assert result.exit_code == 1
    assert "input" in result.output
    assert "UTF-8" in result.output


def test_flatten_json_null_fails(runner, write_file) -> None:
    path = write_file("null.json", "null")

    result = runner.invoke(app, ["-t", "static", "--json", str(path), "--flatten"])

    assert result.exit_code == 1
    assert "mapping" in result.output
    assert "static" not in result.output
