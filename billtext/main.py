"""Command-line entry point for billtext."""

from dotenv import load_dotenv
load_dotenv()

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional, Tuple

from billtext.acquisition import AcquisitionError
from billtext.comparison import ComparisonResult, DocumentComparison
from billtext.config.environment import EnvironmentConfig
from billtext.config.exceptions import ConfigurationError
from billtext.config.loader import load_config
from billtext.config.models import AppConfig, ReclassifierMode
from billtext.diffing import DiffHtmlRenderer, DiffRenderError, format_combined, format_side_by_side
from billtext.logging import get_logger
from billtext.logging.config import configure_logging

logger = get_logger(__name__, component="cli")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str]
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and resolve the effective log level.

    Args:
        config_path: Path to configuration file, or None to search defaults
        log_level_override: Log level from CLI (takes precedence)

    Returns:
        Tuple of (AppConfig, EnvironmentConfig) with env_config.log_level set

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    # Log level priority: CLI > Environment > Config
    if log_level_override:
        env_config.log_level = log_level_override
    elif env_config.log_level:
        pass
    elif app_config.logging and app_config.logging.level:
        env_config.log_level = app_config.logging.level
    else:
        env_config.log_level = "INFO"

    return app_config, env_config


def apply_overrides(app_config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Apply per-command CLI flags on top of the loaded configuration."""
    if getattr(args, "mode", None):
        app_config.reclassifier.mode = ReclassifierMode(args.mode)
    if getattr(args, "no_filter", False):
        app_config.filtering.enabled = False
    return app_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="billtext",
        description="Reconstruct readable text from bill and amendment PDFs and compare versions",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: config.yaml or config/config.yaml if present)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    pipeline_options = argparse.ArgumentParser(add_help=False)
    pipeline_options.add_argument(
        "--mode",
        choices=[mode.value for mode in ReclassifierMode],
        default=None,
        help="Reclassifier mode (overrides config)",
    )
    pipeline_options.add_argument(
        "--no-filter",
        action="store_true",
        help="Keep front matter and boilerplate lines",
    )

    extract = subparsers.add_parser(
        "extract",
        parents=[pipeline_options],
        help="Print the reconstructed text of one PDF",
    )
    extract.add_argument("source", help="URL or path of the PDF")
    extract.add_argument(
        "--raw",
        action="store_true",
        help="Print the text exactly as extracted, without reconstruction",
    )

    compare = subparsers.add_parser(
        "compare",
        parents=[pipeline_options],
        help="Diff the reconstructed text of two PDFs",
    )
    compare.add_argument("left", help="URL or path of the original document")
    compare.add_argument("right", help="URL or path of the revised document")
    compare.add_argument(
        "--view",
        choices=["combined", "side-by-side", "html"],
        default="combined",
        help="Output format (default: combined)",
    )
    compare.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the output to this file instead of stdout",
    )

    return parser


def _write_output(content: str, output: Optional[Path]) -> None:
    if output is None:
        sys.stdout.write(content)
        if not content.endswith("\n"):
            sys.stdout.write("\n")
        return

    output.write_text(content, encoding="utf-8")
    logger.info(
        f"Wrote output to {output}",
        extra={"event": "cli.output.written", "path": str(output), "size": len(content)},
    )


def run_extract(args: argparse.Namespace, comparison: DocumentComparison) -> int:
    extraction = comparison.extract(args.source)
    _write_output(extraction.raw_text if args.raw else extraction.text, None)

    logger.info(
        f"Extracted {extraction.page_count} pages from {args.source}",
        extra={
            "event": "cli.extract.completed",
            "source": args.source,
            "page_count": extraction.page_count,
            "filtered": extraction.filtered,
        },
    )
    return EXIT_OK


def render_comparison(result: ComparisonResult, view: str) -> str:
    """Render a comparison that produced a diff in the requested view."""
    if view == "html":
        return DiffHtmlRenderer().render_side_by_side(
            result.diff,
            left_label=result.left.label,
            right_label=result.right.label,
        )
    if view == "side-by-side":
        return format_side_by_side(result.diff)
    return format_combined(result.diff)


def render_available_side(result: ComparisonResult, view: str) -> str:
    """Render the one side that has text when no diff could be computed."""
    side = result.available_side
    if view == "html":
        notices = [s.error for s in (result.left, result.right) if s.error]
        return DiffHtmlRenderer().render_document(
            side.text,
            label=side.label,
            notices=notices + [result.message],
        )
    return side.text


def run_compare(args: argparse.Namespace, comparison: DocumentComparison) -> int:
    result = comparison.compare(
        args.left,
        args.right,
        left_label=Path(args.left).name or args.left,
        right_label=Path(args.right).name or args.right,
    )

    for side in (result.left, result.right):
        if side.error:
            print(side.error, file=sys.stderr)

    if result.diff is None:
        print(result.message, file=sys.stderr)
        if result.available_side is not None:
            _write_output(render_available_side(result, args.view), args.output)
        return EXIT_FAILURE

    _write_output(render_comparison(result, args.view), args.output)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the billtext command line.

    Returns:
        Exit code (0 success, 1 failure, 2 configuration error, 130 interrupted)
    """
    start_time = time.time()
    args = build_parser().parse_args(argv)

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level)
        apply_overrides(app_config, args)

        log_format = app_config.logging.format if app_config.logging else "key-value"
        configure_logging(
            level=env_config.log_level,
            format_type=log_format,
            environment=env_config.environment,
        )

        logger.debug(
            "Configuration loaded",
            extra={
                "event": "config.loaded",
                "command": args.command,
                "config_path": str(args.config) if args.config else None,
                "mode": ReclassifierMode(app_config.reclassifier.mode).value,
                "filtering": app_config.filtering.enabled,
            },
        )

        comparison = DocumentComparison.from_config(app_config)
        try:
            if args.command == "extract":
                exit_code = run_extract(args, comparison)
            else:
                exit_code = run_compare(args, comparison)
        finally:
            comparison.acquirer.close()

        logger.debug(
            f"Command {args.command} finished",
            extra={
                "event": "cli.command.completed",
                "command": args.command,
                "exit_code": exit_code,
                "duration_seconds": round(time.time() - start_time, 3),
            },
        )
        return exit_code

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except AcquisitionError as e:
        print(f"Failed to extract text from {getattr(args, 'source', 'document')}: {e}", file=sys.stderr)
        logger.error(
            f"Extraction failed: {e}",
            extra={"event": "cli.extract.failed", "error_type": type(e).__name__},
        )
        return EXIT_FAILURE
    except DiffRenderError as e:
        print(f"Failed to render comparison: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        logger.critical(
            "Fatal error",
            extra={
                "event": "cli.failed",
                "error_type": type(e).__name__,
                "error": str(e),
            },
            exc_info=True,
        )
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
