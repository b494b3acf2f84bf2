"""Shared typed models.

This module defines immutable models used by the transform stages,
the render workflows and the SDK to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

TextTransform = Callable[[str], str]


@dataclass(frozen=True)
class HighlightStage:
    """One pure text-to-text step of the highlighting pipeline.

    Attributes:
        name: Stable stage identifier used in logs.
        transform: Pure function applied to the whole text.
    """

    name: str
    transform: TextTransform

    def __call__(self, text: str) -> str:
        return self.transform(text)


@dataclass(frozen=True)
class RenderRequest:
    """File-based render request.

    Attributes:
        input_path: Source code file to read.
        output_path: HTML file to write.
        escape_includes: Whether include directives are escaped.
        echo_output: Whether the written file is re-read for echoing.
    """

    input_path: Path
    output_path: Path
    escape_includes: bool = True
    echo_output: bool = True


@dataclass(frozen=True)
class RenderResult:
    """Summary of a completed file-based render.

    Attributes:
        input_path: Source code file that was read.
        output_path: HTML file that was written.
        html: Rendered HTML as produced by the pipeline.
        echoed_html: Output file contents read back, when echo was requested.
    """

    input_path: Path
    output_path: Path
    html: str
    echoed_html: str | None = None
