"""Public SDK surface for codehtml.

This module provides a stable import path for library users.
It re-exports the client, the pipeline helpers and typed models.
"""

from __future__ import annotations

from core.config import CodeHtmlConfig
from core.types import HighlightStage, RenderRequest, RenderResult
from render.client import CodeHtmlClient
from render.file_render import render_demo, render_file
from render.pipeline import apply_pipeline, build_pipeline, render_source

__all__ = [
    "CodeHtmlClient",
    "CodeHtmlConfig",
    "HighlightStage",
    "RenderRequest",
    "RenderResult",
    "apply_pipeline",
    "build_pipeline",
    "render_demo",
    "render_file",
    "render_source",
]
