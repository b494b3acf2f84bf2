"""Keyword highlighting transform.

This module marks a fixed set of C-family keywords in blue.
Matching is whole-word only, so ``printf`` or ``integer`` stay plain.
"""

from __future__ import annotations

import re

from core.constants import HIGHLIGHTED_KEYWORDS, KEYWORD_COLOR
from transforms.span_markup import highlight_matches

_KEYWORD_PATTERN = re.compile(r"\b(?:" + "|".join(HIGHLIGHTED_KEYWORDS) + r")\b")


def highlight_keywords(text: str) -> str:
    """Wrap each whole-word keyword in a blue span.

    Args:
        text: Text produced by the base wrap stage.

    Returns:
        Text with keyword spans inserted.
    """
    return highlight_matches(_KEYWORD_PATTERN, text, KEYWORD_COLOR)
