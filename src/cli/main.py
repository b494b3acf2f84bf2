"""codehtml CLI entry points.

This module exposes the demo, file render and run-spec commands.
It maps argparse commands onto SDK calls and turns file errors
into a stderr message with exit status 1.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Sequence

from core.config import CodeHtmlConfig
from core.errors import CodeHtmlInputError, CodeHtmlOutputError
from core.logging_config import get_logger
from render.client import CodeHtmlClient

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="codehtml",
        description="Render source code as syntax-highlighted HTML",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_demo_command(subparsers)
    _add_render_command(subparsers)
    _add_run_spec_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the codehtml CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    client = CodeHtmlClient(CodeHtmlConfig.from_env())
    try:
        if args.command == "demo":
            return _run_demo_command(client)
        if args.command == "render":
            return _run_render_command(client, args)
        if args.command == "run-spec":
            return _run_run_spec_command(client, args)
    except (CodeHtmlInputError, CodeHtmlOutputError) as error:
        _LOGGER.error("render_failed", command=args.command, error=str(error))
        print(f"error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _run_demo_command(client: CodeHtmlClient) -> int:
    """Handle demo command.

    Args:
        client: SDK client.

    Returns:
        Exit code.
    """
    print(client.render_demo())
    return 0


def _run_render_command(client: CodeHtmlClient, args: argparse.Namespace) -> int:
    """Handle render command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    result = client.render_file(
        input_path=args.input,
        output_path=args.output,
        escape_includes=not args.keep_includes,
    )
    if result.echoed_html is not None:
        print(result.echoed_html)
    return 0


def _run_run_spec_command(client: CodeHtmlClient, args: argparse.Namespace) -> int:
    """Handle run-spec command by printing each step's output lines."""
    for line in client.run_spec(args.spec_file):
        print(line)
    return 0


def _add_demo_command(subparsers: Any) -> None:
    """Register demo subcommand."""
    subparsers.add_parser("demo", help="Print the highlighted built-in sample")


def _add_render_command(subparsers: Any) -> None:
    """Register render subcommand."""
    parser = subparsers.add_parser(
        "render",
        help="Render a source file into an HTML file and echo the result",
    )
    parser.add_argument("--input", help="Override CODEHTML_INPUT_PATH for this command")
    parser.add_argument("--output", help="Override CODEHTML_OUTPUT_PATH for this command")
    parser.add_argument(
        "--keep-includes",
        action="store_true",
        help="Leave #include directives unescaped",
    )


def _add_run_spec_command(subparsers: Any) -> None:
    """Register run-spec subcommand."""
    parser = subparsers.add_parser("run-spec", help="Run a YAML batch of demo and render steps")
    parser.add_argument("spec_file", help="Path to YAML run-spec file")
