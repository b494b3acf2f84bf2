"""Base wrap transform.

This is the first stage of the highlighting pipeline. It encloses
the raw source in a preformatted block without touching its content.
"""

from __future__ import annotations

from core.constants import PRE_CLOSE_TAG, PRE_OPEN_TAG


def wrap_preformatted(text: str) -> str:
    """Surround text with the preformatted block tag pair.

    Args:
        text: Raw source text.

    Returns:
        Text enclosed in ``<pre>`` and ``</pre>``.
    """
    return f"{PRE_OPEN_TAG}{text}{PRE_CLOSE_TAG}"
