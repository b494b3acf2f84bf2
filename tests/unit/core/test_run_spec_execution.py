"""Unit tests for run-spec step execution."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import CodeHtmlRunSpecError
from core.run_spec import load_run_spec
from core.run_spec_execution import execute_run_spec, execute_run_spec_file
from core.types import RenderResult
from tests.fixture_paths import fixture_path


class _FakeClient:
    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, object]]] = []

    def render_demo(self, escape_includes: bool = False) -> str:
        self.calls.append(("demo", {"escape_includes": escape_includes}))
        return "<pre>demo</pre>"

    def render_file(
        self,
        input_path: str | None = None,
        output_path: str | None = None,
        escape_includes: bool = True,
        echo_output: bool | None = None,
    ) -> RenderResult:
        self.calls.append(
            (
                "render",
                {
                    "input_path": input_path,
                    "output_path": output_path,
                    "escape_includes": escape_includes,
                    "echo_output": echo_output,
                },
            )
        )
        return RenderResult(
            input_path=Path(input_path or "input.cpp"),
            output_path=Path(output_path or "output.html"),
            html="<pre>x</pre>",
            echoed_html="<pre>x</pre>" if echo_output is not False else None,
        )


def test_execute_run_spec_applies_defaults_to_steps() -> None:
    """Spec defaults should flow into each step unless overridden."""
    client = _FakeClient()
    spec = load_run_spec(str(fixture_path("run_spec/valid_batch.yaml")))

    output_lines = execute_run_spec(client, spec)

    assert output_lines == ("<pre>demo</pre>", "output_path=build/hello.html") and client.calls == [
        ("demo", {"escape_includes": True}),
        (
            "render",
            {
                "input_path": "tests/fixtures/source/hello.cpp",
                "output_path": "build/hello.html",
                "escape_includes": True,
                "echo_output": False,
            },
        ),
    ]


def test_execute_run_spec_leaves_echo_to_client_when_unset(tmp_path: Path) -> None:
    """Render steps without echo settings should defer to the client config."""
    spec_path = tmp_path / "spec.yaml"
    spec_path.write_text("version: 1\nsteps:\n  - command: render\n", encoding="utf-8")
    client = _FakeClient()

    output_lines = execute_run_spec_file(client, str(spec_path))

    assert output_lines == ("output_path=output.html", "<pre>x</pre>") and client.calls[0][1][
        "echo_output"
    ] is None


def test_execute_run_spec_rejects_unknown_step_field() -> None:
    """Steps with fields their command does not accept should fail."""
    with pytest.raises(CodeHtmlRunSpecError):
        execute_run_spec_file(_FakeClient(), str(fixture_path("run_spec/unknown_step_field.yaml")))
    assert True


def test_execute_run_spec_rejects_non_boolean_flag(tmp_path: Path) -> None:
    """Boolean step fields must be YAML booleans."""
    spec_path = tmp_path / "spec.yaml"
    spec_path.write_text(
        "version: 1\nsteps:\n  - command: demo\n    escape_includes: 'yes'\n",
        encoding="utf-8",
    )

    with pytest.raises(CodeHtmlRunSpecError):
        execute_run_spec_file(_FakeClient(), str(spec_path))
    assert True
