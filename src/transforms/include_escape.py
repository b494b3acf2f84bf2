"""Include directive escaping transform.

This optional last stage rewrites ``#include <header>`` so the
directive keyword is broken up and the angle brackets become
HTML entities instead of being parsed as a tag by the browser.

The stage runs after keyword highlighting, so a header named after a
keyword (``<float.h>``) already contains a span and is left unescaped.
"""

from __future__ import annotations

import re

from core.constants import ESCAPED_INCLUDE_DIRECTIVE, INCLUDE_DIRECTIVE

_INCLUDE_PATTERN = re.compile(
    re.escape(INCLUDE_DIRECTIVE) + r"(?P<spacing>[ \t]*)<(?P<header>[^<>\n]+)>"
)


def escape_include_directives(text: str) -> str:
    """Rewrite angle-bracket include directives.

    Args:
        text: Text produced by the string literal stage.

    Returns:
        Text with ``#include <x>`` rendered as ``#in-clude &lt;x&gt;``.
    """
    return _INCLUDE_PATTERN.sub(_escape_directive, text)


def _escape_directive(match: re.Match[str]) -> str:
    return (
        f"{ESCAPED_INCLUDE_DIRECTIVE}{match.group('spacing')}"
        f"&lt;{match.group('header')}&gt;"
    )
