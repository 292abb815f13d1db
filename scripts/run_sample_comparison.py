#!/usr/bin/env python3
"""Sample comparison harness for end-to-end validation.

Runs the reclassifier, content filter and diff engine over two raw-text
fixtures (text as a PDF extractor would return it), so the reconstruction
can be checked by eye without downloading or parsing any PDFs.

Usage:
    # Compare the bundled fixtures in both reclassifier modes
    python scripts/run_sample_comparison.py

    # Compare your own extracted text in structural mode, without filtering
    python scripts/run_sample_comparison.py --left a.txt --right b.txt --mode structural --no-filter
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from billtext.config.models import ReclassifierMode
from billtext.diffing import diff_lines, format_combined
from billtext.filtering import ContentFilter
from billtext.logging.config import configure_logging
from billtext.reclassifier import ReclassifierPipeline

FIXTURES = Path(__file__).parent.parent / "tests" / "fixtures"


def print_header(title: str):
    """Print a formatted section header."""
    width = 80
    print("\n" + "=" * width)
    print(f" {title}")
    print("=" * width + "\n")


def print_summary_table(rows):
    """Print a two-column summary table."""
    max_label_width = max(len(label) for label, _ in rows)

    print("┌" + "─" * (max_label_width + 2) + "┬" + "─" * 22 + "┐")
    print(f"│ {'Metric':<{max_label_width}} │ {'Value':<20} │")
    print("├" + "─" * (max_label_width + 2) + "┼" + "─" * 22 + "┤")

    for label, value in rows:
        print(f"│ {label:<{max_label_width}} │ {str(value):<20} │")

    print("└" + "─" * (max_label_width + 2) + "┴" + "─" * 22 + "┘")


def run_mode(mode: ReclassifierMode, left_raw: str, right_raw: str, use_filter: bool) -> None:
    pipeline = ReclassifierPipeline(mode=mode)
    content_filter = ContentFilter()

    left = pipeline.run(left_raw)
    right = pipeline.run(right_raw)
    if use_filter:
        left = content_filter.apply(left)
        right = content_filter.apply(right)

    print_header(f"Reconstructed left document ({mode.value})")
    print(left)

    result = diff_lines(left, right)

    print_header(f"Combined diff ({mode.value})")
    print(format_combined(result))

    stats = result.stats
    print()
    print_summary_table([
        ("Passes applied", len(pipeline.pass_names)),
        ("Left lines", len(left.splitlines())),
        ("Right lines", len(right.splitlines())),
        ("Lines added", stats["added"]),
        ("Lines removed", stats["removed"]),
        ("Lines unchanged", stats["unchanged"]),
    ])


def main():
    """Main entry point for the sample comparison harness."""
    parser = argparse.ArgumentParser(
        description="Run a sample comparison over raw-text fixtures",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--left",
        type=Path,
        default=FIXTURES / "raw_bill_original.txt",
        help="Raw text of the original document",
    )
    parser.add_argument(
        "--right",
        type=Path,
        default=FIXTURES / "raw_bill_amended.txt",
        help="Raw text of the revised document",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ReclassifierMode],
        default=None,
        help="Run a single reclassifier mode (default: both)",
    )
    parser.add_argument("--no-filter", action="store_true", help="Skip the content filter")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: WARNING)",
    )

    args = parser.parse_args()
    configure_logging(level=args.log_level, environment="validation")

    for path in (args.left, args.right):
        if not path.exists():
            print(f"\n❌ Error: Fixture file not found: {path}")
            return 1

    left_raw = args.left.read_text(encoding="utf-8")
    right_raw = args.right.read_text(encoding="utf-8")

    modes = [ReclassifierMode(args.mode)] if args.mode else list(ReclassifierMode)
    for mode in modes:
        run_mode(mode, left_raw, right_raw, use_filter=not args.no_filter)

    return 0


if __name__ == "__main__":
    sys.exit(main())
