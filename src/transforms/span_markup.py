"""Inline span markup shared by the highlighting stages.

This module owns the styled span template and the single
"replace every match with a colored span" pass each stage runs.
"""

from __future__ import annotations

import re
from typing import Callable


def styled_span(fragment: str, color: str) -> str:
    """Wrap a text fragment in an inline-styled span.

    Attributes use single quotes so later stages matching
    double-quoted literals never see injected markup.

    Args:
        fragment: Matched source text.
        color: CSS color name.

    Returns:
        Span markup around the unchanged fragment.
    """
    return f"<span style='color: {color};'>{fragment}</span>"


def highlight_matches(pattern: re.Pattern[str], text: str, color: str) -> str:
    """Wrap every non-overlapping pattern match in a colored span.

    Args:
        pattern: Compiled pattern for one token class.
        text: Text produced by the previous stage.
        color: CSS color name for the token class.

    Returns:
        New text with each match wrapped; unmatched text is unchanged.
    """
    return pattern.sub(_span_replacer(color), text)


def _span_replacer(color: str) -> Callable[[re.Match[str]], str]:
    def _replace(match: re.Match[str]) -> str:
        return styled_span(match.group(0), color)

    return _replace
