"""File I/O for the file-based render workflow.

This module reads source files and writes rendered HTML. Files are
opened with newline translation off so CRLF sources round-trip byte for
byte. Every filesystem failure becomes a typed codehtml error.
"""

from __future__ import annotations

from pathlib import Path

from core.constants import TEXT_ENCODING
from core.errors import CodeHtmlInputError, CodeHtmlOutputError


def read_source_text(source_path: Path) -> str:
    """Read a whole source file as text.

    Args:
        source_path: Source file to read.

    Returns:
        File contents.

    Raises:
        CodeHtmlInputError: If the file is missing, unreadable or not UTF-8.
    """
    if not source_path.exists():
        raise CodeHtmlInputError(
            f"Failed to open input file {source_path}: file does not exist. "
            "Provide an existing source file."
        )
    try:
        with source_path.open(encoding=TEXT_ENCODING, newline="") as source_file:
            return source_file.read()
    except OSError as error:
        raise CodeHtmlInputError(
            f"Failed to open input file {source_path}: {error.strerror or error}. "
            "Check file permissions and retry."
        ) from error
    except UnicodeDecodeError as error:
        raise CodeHtmlInputError(
            f"Failed to decode input file {source_path} as {TEXT_ENCODING}: {error.reason}. "
            "Convert the file to UTF-8 and retry."
        ) from error


def write_html_output(output_path: Path, html: str) -> None:
    """Write rendered HTML, replacing any existing file.

    Args:
        output_path: Destination file. Its directory must exist.
        html: Rendered HTML text.

    Raises:
        CodeHtmlOutputError: If the file cannot be created or written.
    """
    try:
        with output_path.open("w", encoding=TEXT_ENCODING, newline="") as output_file:
            output_file.write(html)
    except OSError as error:
        raise CodeHtmlOutputError(
            f"Failed to open output file {output_path}: {error.strerror or error}. "
            "Check that the directory exists and is writable."
        ) from error


def read_back_output(output_path: Path) -> str:
    """Re-read a written HTML file.

    Args:
        output_path: File previously written by ``write_html_output``.

    Returns:
        File contents.

    Raises:
        CodeHtmlOutputError: If the file cannot be read back.
    """
    try:
        with output_path.open(encoding=TEXT_ENCODING, newline="") as output_file:
            return output_file.read()
    except OSError as error:
        raise CodeHtmlOutputError(
            f"Failed to re-open output file {output_path}: {error.strerror or error}."
        ) from error
