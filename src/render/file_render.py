"""Render workflows for embedded and file-based sources.

This module runs the highlighting pipeline for the two supported
variants: the embedded demo snippet, and a source file rendered to
an HTML file that is then read back for echoing.
"""

from __future__ import annotations

from core.constants import DEMO_SOURCE_TEXT
from core.logging_config import get_logger
from core.types import HighlightStage, RenderRequest, RenderResult
from render.pipeline import apply_pipeline, build_pipeline, pipeline_stage_names
from render.source_io import read_back_output, read_source_text, write_html_output

_LOGGER = get_logger(__name__)


def render_demo(escape_includes: bool = False) -> str:
    """Render the embedded demo snippet.

    Args:
        escape_includes: Whether include directives are escaped.

    Returns:
        Highlighted HTML for the demo snippet.
    """
    return apply_pipeline(build_pipeline(escape_includes), DEMO_SOURCE_TEXT)


def render_file(request: RenderRequest) -> RenderResult:
    """Render a source file into an HTML file.

    The input is read before the output is opened, so a missing
    input never leaves an output file behind.

    Args:
        request: Paths and options for this render.

    Returns:
        Rendered HTML and, when requested, the text read back from disk.

    Raises:
        CodeHtmlInputError: If the source file cannot be read.
        CodeHtmlOutputError: If the output file cannot be written or re-read.
    """
    source_text = read_source_text(request.input_path)
    _LOGGER.debug(
        "source_read",
        input_path=str(request.input_path),
        character_count=len(source_text),
    )
    stages = build_pipeline(request.escape_includes)
    html = apply_pipeline(stages, source_text)
    write_html_output(request.output_path, html)
    _LOGGER.debug("html_written", output_path=str(request.output_path))
    echoed_html = read_back_output(request.output_path) if request.echo_output else None
    _log_render_completion(request, stages, html)
    return RenderResult(
        input_path=request.input_path,
        output_path=request.output_path,
        html=html,
        echoed_html=echoed_html,
    )


def _log_render_completion(
    request: RenderRequest,
    stages: tuple[HighlightStage, ...],
    html: str,
) -> None:
    """Log render completion with contextual metadata."""
    _LOGGER.info(
        "render_completed",
        input_path=str(request.input_path),
        output_path=str(request.output_path),
        stages=list(pipeline_stage_names(stages)),
        output_length=len(html),
        echo_output=request.echo_output,
    )
