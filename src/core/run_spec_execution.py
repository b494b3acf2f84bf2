"""Shared run-spec execution engine for CLI and SDK workflows.

Steps are executed in file order against any object that offers the
client's ``render_demo`` / ``render_file`` pair.
"""

from __future__ import annotations

from typing import Protocol

from core.logging_config import get_logger
from core.run_spec import RunSpec, RunSpecDefaults, RunSpecStep, load_run_spec
from core.types import RenderResult

_LOGGER = get_logger(__name__)


class RunSpecClient(Protocol):
    """Client API contract required by run-spec execution."""

    def render_demo(self, escape_includes: bool = False) -> str: ...

    def render_file(
        self,
        input_path: str | None = None,
        output_path: str | None = None,
        escape_includes: bool = True,
        echo_output: bool | None = None,
    ) -> RenderResult: ...


def execute_run_spec_file(client: RunSpecClient, spec_file: str) -> tuple[str, ...]:
    """Load and execute a run-spec file, returning printable output lines."""
    return execute_run_spec(client, load_run_spec(spec_file))


def execute_run_spec(client: RunSpecClient, spec: RunSpec) -> tuple[str, ...]:
    """Execute a parsed run-spec and return output lines.

    Demo steps yield their HTML. Render steps yield ``output_path=...``
    followed by the echoed HTML when echo is enabled.
    """
    output_lines: list[str] = []
    for step in spec.steps:
        if step.command == "demo":
            output_lines.append(_run_demo(client, step, spec.defaults))
        else:
            output_lines.extend(_run_render(client, step, spec.defaults))
    _LOGGER.info("run_spec_completed", step_count=len(spec.steps))
    return tuple(output_lines)


def _run_demo(client: RunSpecClient, step: RunSpecStep, defaults: RunSpecDefaults) -> str:
    escape_includes = _first_set(step.escape_includes, defaults.escape_includes, False)
    return client.render_demo(escape_includes=escape_includes)


def _run_render(
    client: RunSpecClient,
    step: RunSpecStep,
    defaults: RunSpecDefaults,
) -> list[str]:
    result = client.render_file(
        input_path=step.input_path,
        output_path=step.output_path,
        escape_includes=_first_set(step.escape_includes, defaults.escape_includes, True),
        # None defers to the client's configured echo setting.
        echo_output=step.echo if step.echo is not None else defaults.echo,
    )
    lines = [f"output_path={result.output_path}"]
    if result.echoed_html is not None:
        lines.append(result.echoed_html)
    return lines


def _first_set(step_value: bool | None, default_value: bool | None, fallback: bool) -> bool:
    if step_value is not None:
        return step_value
    return fallback if default_value is None else default_value
