"""codehtml exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Highlighting stages never raise; only the I/O and config layers do.
"""

from __future__ import annotations


class CodeHtmlError(Exception):
    """Base exception for all codehtml failures."""


class CodeHtmlConfigError(CodeHtmlError):
    """Raised for invalid runtime configuration."""


class CodeHtmlInputError(CodeHtmlError):
    """Raised when the source file cannot be opened or decoded."""


class CodeHtmlOutputError(CodeHtmlError):
    """Raised when the HTML output file cannot be written or re-read."""


class CodeHtmlRunSpecError(CodeHtmlError):
    """Raised for invalid or unsupported run-spec configuration."""
