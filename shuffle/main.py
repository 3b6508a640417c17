"""Command-line entry point for Shuffle.

Reads entry text from a file or stdin, transforms it, and writes the result
to stdout or a file (the export sink).
"""

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional, Tuple
from uuid import uuid4

from dotenv import load_dotenv

from shuffle.config.environment import EnvironmentConfig
from shuffle.config.exceptions import ConfigurationError
from shuffle.config.loader import load_config, validate_config_file
from shuffle.config.models import AppConfig
from shuffle.logging import get_logger
from shuffle.logging.config import configure_logging
from shuffle.logging.context import log_context
from shuffle.reflow import build_measurer
from shuffle.serialization import FormatKind
from shuffle.transform import TextTransformer, TransformRequest

logger = get_logger(__name__, component="cli")


def load_runtime_config(
    config_path: Optional[Path],
    log_level_override: Optional[str],
    format_override: Optional[str] = None,
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and apply override priorities.

    Priority for log level and output format: CLI > environment > config file.

    Args:
        config_path: Path to configuration file (None uses default lookup)
        log_level_override: Log level from CLI
        format_override: Output format from CLI

    Returns:
        Tuple of (AppConfig, EnvironmentConfig)

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if log_level_override:
        env_config.log_level = log_level_override
    elif not env_config.log_level:
        env_config.log_level = app_config.logging.level

    if not env_config.log_format:
        env_config.log_format = app_config.logging.format

    if format_override:
        app_config.transform.format = format_override
    elif env_config.default_format:
        app_config.transform.format = env_config.default_format

    return app_config, env_config


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="shuffle",
        description="Shuffle - transform journal text into Markdown, LaTeX, JSON or HTML",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        default=None,
        help="Input text file (default: read stdin; '-' also reads stdin)",
    )
    parser.add_argument(
        "--format",
        "-f",
        default=None,
        choices=[kind.value for kind in FormatKind],
        help="Output format (overrides SHUFFLE_FORMAT and config)",
    )
    parser.add_argument(
        "--no-preserve-margins",
        dest="preserve_margins",
        action="store_false",
        default=None,
        help="Do not reproduce on-screen line wrapping",
    )
    parser.add_argument("--width", type=float, default=None, help="Editor width in pixels")
    parser.add_argument("--font-size", type=float, default=None, help="Font size in pixels")
    parser.add_argument(
        "--padding", type=float, default=None, help="Total horizontal padding in pixels"
    )
    parser.add_argument(
        "--measure",
        default=None,
        choices=["proportional", "monospace"],
        help="Text measurement strategy",
    )
    compact_group = parser.add_mutually_exclusive_group()
    compact_group.add_argument(
        "--compact", dest="compact", action="store_const", const=True, default=None,
        help="Single-line JSON output",
    )
    compact_group.add_argument(
        "--pretty", dest="compact", action="store_const", const=False,
        help="Indented JSON output",
    )
    parser.add_argument(
        "--output", "-o", type=Path, default=None, help="Write output to this file instead of stdout"
    )
    parser.add_argument(
        "--config", type=Path, default=None, help="Path to configuration file (default: config.yaml)"
    )
    parser.add_argument(
        "--check-config",
        action="store_true",
        help="Validate the configuration file and exit",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )
    return parser


def build_request(args: argparse.Namespace, app_config: AppConfig, text: str) -> TransformRequest:
    """Combine CLI flags and configuration into a TransformRequest."""
    measurement_config = app_config.measurement
    if args.measure:
        measurement_config = measurement_config.model_copy(update={"strategy": args.measure})

    render = app_config.render
    preserve_margins = (
        app_config.transform.preserve_margins if args.preserve_margins is None else args.preserve_margins
    )
    compact = app_config.transform.compact if args.compact is None else args.compact

    return TransformRequest(
        text=text,
        format=app_config.transform.format,
        preserve_margins=preserve_margins,
        render_width=args.width if args.width is not None else render.width,
        font_size=args.font_size if args.font_size is not None else render.font_size,
        measurer=build_measurer(measurement_config),
        horizontal_padding=args.padding if args.padding is not None else render.horizontal_padding,
        compact=compact,
    )


def read_input(path: Optional[Path]) -> str:
    """Read input text from path, or stdin when path is None or '-'."""
    if path is None or str(path) == "-":
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def write_output(output: str, path: Optional[Path]) -> None:
    """Write output to path, or stdout when path is None.

    Both sinks receive the exact transformed string; no newline is appended.
    """
    if path is None:
        sys.stdout.write(output)
        sys.stdout.flush()
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(output, encoding="utf-8")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the Shuffle CLI.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    start_time = time.time()
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.check_config:
        if args.config is None:
            print("--check-config requires --config", file=sys.stderr)
            return 2
        return 0 if validate_config_file(args.config) else 1

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level, args.format)

        configure_logging(
            level=env_config.log_level,
            format_type=env_config.log_format,
            environment=env_config.environment,
        )

        with log_context(run_id=uuid4().hex, output_format=app_config.transform.format):
            text = read_input(args.input)
            request = build_request(args, app_config, text)
            output = TextTransformer().run(request)
            write_output(output, args.output)

            display_name = FormatKind(app_config.transform.format).display_name
            logger.info(
                f"Exported {display_name} output",
                extra={
                    "event": "cli.export.completed",
                    "destination": str(args.output) if args.output else "stdout",
                    "output_length": len(output),
                    "duration_seconds": round(time.time() - start_time, 3),
                },
            )
        return 0

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"I/O error: {e}", file=sys.stderr)
        logger.error(
            f"I/O error: {e}",
            extra={"event": "cli.io.failed", "error_type": type(e).__name__},
        )
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
