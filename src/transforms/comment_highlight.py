"""Comment highlighting transform.

This module marks ``//`` line comments and ``/* */`` block comments in
green. It runs after keyword highlighting, so keyword spans inside a
comment end up nested in the comment span.

Both comment forms are matched in one left-to-right pass, so whichever
opens first owns the text: ``/* see http://x */`` stays one block
comment, and ``// a /* b`` stays one line comment.
"""

from __future__ import annotations

import re

from core.constants import COMMENT_COLOR, PRE_CLOSE_TAG
from transforms.span_markup import highlight_matches

# A line comment stops before CRLF line endings and before the closing
# tag when it sits on the last line.
_COMMENT_PATTERN = re.compile(
    r"(?s:/\*.*?\*/)"
    r"|//.*?(?=\r?$|" + re.escape(PRE_CLOSE_TAG) + r"\Z)",
    re.MULTILINE,
)


def highlight_comments(text: str) -> str:
    """Wrap block and line comments in green spans.

    Unterminated block comments are left untouched.

    Args:
        text: Text produced by the keyword stage.

    Returns:
        Text with comment spans inserted.
    """
    return highlight_matches(_COMMENT_PATTERN, text, COMMENT_COLOR)
