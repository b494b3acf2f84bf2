"""Core constants used across codehtml modules.

This module centralizes markup, pattern and path defaults.
Keeping values here avoids magic literals in transform logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_INPUT_PATH = Path("input.cpp")
DEFAULT_OUTPUT_PATH = Path("output.html")
DEFAULT_ECHO_OUTPUT = True
TEXT_ENCODING = "utf-8"
PRE_OPEN_TAG = "<pre>"
PRE_CLOSE_TAG = "</pre>"
KEYWORD_COLOR = "blue"
COMMENT_COLOR = "green"
STRING_LITERAL_COLOR = "red"
HIGHLIGHTED_KEYWORDS = (
    "int",
    "float",
    "double",
    "if",
    "else",
    "for",
    "while",
    "return",
    "class",
    "public",
    "private",
    "protected",
    "void",
    "const",
)
INCLUDE_DIRECTIVE = "#include"
ESCAPED_INCLUDE_DIRECTIVE = "#in-clude"
TRUE_FLAG_VALUES = ("1", "true", "yes", "on")
FALSE_FLAG_VALUES = ("0", "false", "no", "off")
DEMO_SOURCE_TEXT = """// This is a comment
int main() {
    // Another comment
    std::cout << "Hello, World!" << std::endl;
    return 0;
}"""
