#!/usr/bin/env python3
"""Sample transform harness for end-to-end validation.

Renders one entry in every output format so reflow and serialization can be
checked by eye without running pytest. Rendering settings come from the
configuration file; flags override them.

Usage:
    # Sample entry from the test fixtures, default configuration
    python scripts/run_sample_transform.py

    # Your own entry and configuration
    python scripts/run_sample_transform.py --input entry.txt --config config.yaml

    # Narrow monospace editor without preserved margins
    python scripts/run_sample_transform.py --width 400 --measure monospace --no-preserve-margins
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from shuffle.config import ConfigurationError, load_config
from shuffle.logging.config import configure_logging
from shuffle.reflow import build_measurer
from shuffle.serialization import FormatKind
from shuffle.transform import TextTransformer, TransformRequest

DEFAULT_SAMPLE = Path(__file__).parent.parent / "tests" / "fixtures" / "sample_entry.txt"


def print_header(title: str):
    """Print a formatted section header."""
    width = 80
    print("\n" + "=" * width)
    print(f" {title}")
    print("=" * width + "\n")


def print_summary_table(rows):
    """Print a table of (format, reflowed, output length) rows."""
    print_header("Transform Summary")

    max_label_width = max(len(label) for label, _, _ in rows)

    print("┌" + "─" * (max_label_width + 2) + "┬" + "─" * 10 + "┬" + "─" * 10 + "┐")
    print(f"│ {'Format':<{max_label_width}} │ {'Reflowed':<8} │ {'Length':<8} │")
    print("├" + "─" * (max_label_width + 2) + "┼" + "─" * 10 + "┼" + "─" * 10 + "┤")

    for label, reflowed, length in rows:
        print(f"│ {label:<{max_label_width}} │ {'yes' if reflowed else 'no':<8} │ {length:<8} │")

    print("└" + "─" * (max_label_width + 2) + "┴" + "─" * 10 + "┴" + "─" * 10 + "┘")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for sample transform harness."""
    parser = argparse.ArgumentParser(
        description="Render a sample entry in every output format",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=DEFAULT_SAMPLE,
        help="Entry text file (default: tests/fixtures/sample_entry.txt)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: config.yaml if present)",
    )
    parser.add_argument("--width", type=float, default=None, help="Editor width in pixels")
    parser.add_argument("--font-size", type=float, default=None, help="Font size in pixels")
    parser.add_argument(
        "--measure",
        default=None,
        choices=["proportional", "monospace"],
        help="Text measurement strategy",
    )
    parser.add_argument(
        "--no-preserve-margins",
        dest="preserve_margins",
        action="store_false",
        help="Do not reproduce on-screen line wrapping",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: WARNING)",
    )

    args = parser.parse_args(argv)

    load_dotenv()

    print_header("Shuffle - Sample Transform Harness")
    print(f"Input file: {args.input}")
    print(f"Configuration file: {args.config or 'default lookup'}")

    if not args.input.exists():
        print(f"\n❌ Error: Input file not found: {args.input}")
        return 1

    try:
        app_config, env_config = load_config(args.config)
    except ConfigurationError as e:
        print(f"\n❌ Configuration error:\n{e}")
        return 1

    configure_logging(
        level=args.log_level,
        format_type=app_config.logging.format,
        environment="validation",
    )

    measurement_config = app_config.measurement
    if args.measure:
        measurement_config = measurement_config.model_copy(update={"strategy": args.measure})

    width = args.width if args.width is not None else app_config.render.width
    font_size = args.font_size if args.font_size is not None else app_config.render.font_size
    measurer = build_measurer(measurement_config)
    text = args.input.read_text(encoding="utf-8")

    print(f"Width: {width}px, font size: {font_size}px, measurer: {type(measurer).__name__}")
    print(f"Preserve margins: {'yes' if args.preserve_margins else 'no'}")

    transformer = TextTransformer()
    rows = []

    for kind in FormatKind:
        request = TransformRequest(
            text=text,
            format=kind,
            preserve_margins=args.preserve_margins,
            render_width=width,
            font_size=font_size,
            measurer=measurer,
            horizontal_padding=app_config.render.horizontal_padding,
            compact=app_config.transform.compact,
        )
        result = transformer.run_with_details(request)

        print_header(kind.display_name)
        print(result.output)

        rows.append((kind.display_name, result.reflowed, len(result.output)))

    print_summary_table(rows)
    return 0


if __name__ == "__main__":
    sys.exit(main())
