"""Runtime configuration model for codehtml.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_ECHO_OUTPUT,
    DEFAULT_INPUT_PATH,
    DEFAULT_OUTPUT_PATH,
    FALSE_FLAG_VALUES,
    TRUE_FLAG_VALUES,
)
from core.errors import CodeHtmlConfigError


@dataclass(frozen=True)
class CodeHtmlConfig:
    """Validated runtime configuration.

    Attributes:
        input_path: Source file read by the file-based render workflow.
        output_path: HTML file written by the file-based render workflow.
        echo_output: Whether the written HTML is re-read and echoed.
    """

    input_path: Path
    output_path: Path
    echo_output: bool

    @classmethod
    def from_env(cls) -> "CodeHtmlConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            CodeHtmlConfigError: If environment values are invalid.
        """
        input_path_value = os.getenv("CODEHTML_INPUT_PATH", str(DEFAULT_INPUT_PATH))
        output_path_value = os.getenv("CODEHTML_OUTPUT_PATH", str(DEFAULT_OUTPUT_PATH))
        echo_output_value = os.getenv("CODEHTML_ECHO_OUTPUT")
        echo_output = (
            DEFAULT_ECHO_OUTPUT
            if echo_output_value is None
            else _parse_flag("CODEHTML_ECHO_OUTPUT", echo_output_value)
        )
        return cls(
            input_path=Path(input_path_value).expanduser(),
            output_path=Path(output_path_value).expanduser(),
            echo_output=echo_output,
        )


def _parse_flag(variable_name: str, raw_value: str) -> bool:
    """Parse a boolean environment value.

    Args:
        variable_name: Environment variable name, used in error messages.
        raw_value: Raw string from environment.

    Returns:
        Parsed boolean flag.

    Raises:
        CodeHtmlConfigError: If value is not a recognized flag spelling.
    """
    normalized_value = raw_value.strip().lower()
    if normalized_value in TRUE_FLAG_VALUES:
        return True
    if normalized_value in FALSE_FLAG_VALUES:
        return False
    raise CodeHtmlConfigError(
        f"Invalid {variable_name} value: "
        f"expected a boolean flag, got '{raw_value}'. "
        f"Set {variable_name} to one of: {', '.join(TRUE_FLAG_VALUES + FALSE_FLAG_VALUES)}."
    )
