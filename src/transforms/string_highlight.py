"""String literal highlighting transform."""

from __future__ import annotations

import re

from core.constants import STRING_LITERAL_COLOR
from transforms.span_markup import highlight_matches

# No escape handling: a backslash-quote ends the literal.
_STRING_LITERAL_PATTERN = re.compile(r'".*?"')


def highlight_string_literals(text: str) -> str:
    """Wrap each double-quoted literal on a single line in a red span.

    Args:
        text: Text produced by the comment stage.

    Returns:
        Text with string literal spans inserted.
    """
    return highlight_matches(_STRING_LITERAL_PATTERN, text, STRING_LITERAL_COLOR)
