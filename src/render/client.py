"""Python SDK for highlighting operations.

This module exposes high-level APIs for rendering text, the embedded
demo snippet, source files and YAML run-specs with shared config.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from core.config import CodeHtmlConfig
from core.run_spec_execution import execute_run_spec_file
from core.types import RenderRequest, RenderResult
from render.file_render import render_demo, render_file
from render.pipeline import render_source


class CodeHtmlClient:
    """Primary SDK entry point for highlighting workflows."""

    def __init__(self, config: CodeHtmlConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or CodeHtmlConfig.from_env()

    @property
    def config(self) -> CodeHtmlConfig:
        """Runtime configuration used by file-based renders."""
        return self._config

    def render_text(self, text: str, escape_includes: bool = False) -> str:
        """Render in-memory source text as highlighted HTML.

        Args:
            text: Raw source text.
            escape_includes: Whether include directives are escaped.

        Returns:
            Highlighted HTML fragment.
        """
        return render_source(text, escape_includes)

    def render_demo(self, escape_includes: bool = False) -> str:
        """Render the embedded demo snippet."""
        return render_demo(escape_includes)

    def render_file(
        self,
        input_path: str | None = None,
        output_path: str | None = None,
        escape_includes: bool = True,
        echo_output: bool | None = None,
    ) -> RenderResult:
        """Render a source file into an HTML file.

        Args:
            input_path: Optional source path, defaults to config.
            output_path: Optional output path, defaults to config.
            escape_includes: Whether include directives are escaped.
            echo_output: Optional echo override, defaults to config.

        Returns:
            Render summary including echoed HTML when requested.

        Raises:
            CodeHtmlInputError: If the source file cannot be read.
            CodeHtmlOutputError: If the output file cannot be written.
        """
        request = RenderRequest(
            input_path=Path(input_path).expanduser() if input_path else self._config.input_path,
            output_path=(
                Path(output_path).expanduser() if output_path else self._config.output_path
            ),
            escape_includes=escape_includes,
            echo_output=self._config.echo_output if echo_output is None else echo_output,
        )
        return render_file(request)

    def with_paths(
        self,
        input_path: str | None = None,
        output_path: str | None = None,
    ) -> "CodeHtmlClient":
        """Clone the client with different default file paths.

        Args:
            input_path: Optional new default source path.
            output_path: Optional new default output path.

        Returns:
            New SDK client instance.
        """
        updated_config = self._config
        if input_path:
            updated_config = replace(updated_config, input_path=Path(input_path).expanduser())
        if output_path:
            updated_config = replace(updated_config, output_path=Path(output_path).expanduser())
        return CodeHtmlClient(updated_config)

    def run_spec(self, spec_file: str) -> tuple[str, ...]:
        """Execute a YAML run-spec through the shared execution engine.

        Args:
            spec_file: Path to YAML run-spec file.

        Returns:
            Ordered command output lines.
        """
        return execute_run_spec_file(self, spec_file)
