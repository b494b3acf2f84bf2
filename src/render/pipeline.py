"""Highlighting pipeline assembly and application.

This module builds the fixed, ordered tuple of highlighting stages
and folds source text through it. Stage order decides how
overlapping matches nest, so it must not be rearranged.
"""

from __future__ import annotations

from functools import reduce
from typing import Sequence

from core.types import HighlightStage
from transforms.base_wrap import wrap_preformatted
from transforms.comment_highlight import highlight_comments
from transforms.include_escape import escape_include_directives
from transforms.keyword_highlight import highlight_keywords
from transforms.string_highlight import highlight_string_literals

_CORE_STAGES: tuple[HighlightStage, ...] = (
    HighlightStage(name="base_wrap", transform=wrap_preformatted),
    HighlightStage(name="keyword_highlight", transform=highlight_keywords),
    HighlightStage(name="comment_highlight", transform=highlight_comments),
    HighlightStage(name="string_highlight", transform=highlight_string_literals),
)
_INCLUDE_ESCAPE_STAGE = HighlightStage(
    name="include_escape",
    transform=escape_include_directives,
)


def build_pipeline(escape_includes: bool = False) -> tuple[HighlightStage, ...]:
    """Build the ordered highlighting pipeline.

    Args:
        escape_includes: Append the include directive escape stage.

    Returns:
        Stages in execution order.
    """
    if escape_includes:
        return _CORE_STAGES + (_INCLUDE_ESCAPE_STAGE,)
    return _CORE_STAGES


def apply_pipeline(stages: Sequence[HighlightStage], text: str) -> str:
    """Feed text through each stage in order.

    Args:
        stages: Stages in execution order.
        text: Raw source text.

    Returns:
        Output of the last stage.
    """
    return reduce(lambda current_text, stage: stage(current_text), stages, text)


def render_source(text: str, escape_includes: bool = False) -> str:
    """Render raw source text as highlighted HTML.

    The result is meant to be produced once per raw input; feeding
    rendered HTML back in highlights the injected markup again.

    Args:
        text: Raw source text.
        escape_includes: Whether include directives are escaped.

    Returns:
        HTML fragment enclosed in a preformatted block.
    """
    return apply_pipeline(build_pipeline(escape_includes), text)


def pipeline_stage_names(stages: Sequence[HighlightStage]) -> tuple[str, ...]:
    """Return stage names in execution order."""
    return tuple(stage.name for stage in stages)
