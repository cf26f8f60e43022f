"""Command line entry point."""

import argparse
import asyncio
import sys

from loguru import logger

from application.log_config import configure_logging
from application.orchestrator import run_report
from application.settings import DEFAULT_LOG_LEVEL, Settings
from domain.exceptions import ReportError
from infrastructure.progress import NullProgress, TqdmProgress


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="leetcode-tag-report",
        description="Write a markdown report of accepted LeetCode problems grouped by tag.",
    )
    parser.add_argument("--output", "-o", default=None, help="Report path (env OUTPUT_FILE)")
    parser.add_argument(
        "--solutions-dir",
        default=None,
        help="Folder holding one directory per solved problem (env SOLUTIONS_DIR)",
    )
    parser.add_argument(
        "--enable-solution-links",
        action="store_true",
        default=None,
        help="Add a Solution column linking local directories (env ENABLE_SOLUTION_LINKS)",
    )
    parser.add_argument("--log-level", default=None, help="Log level (env LOG_LEVEL)")
    parser.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    show_progress = not args.no_progress and sys.stderr.isatty()

    # The requested level is only trusted once Settings has validated it
    configure_logging(DEFAULT_LOG_LEVEL, progress_aware=show_progress)

    try:
        settings = Settings.from_env(
            output_file=args.output,
            solutions_dir=args.solutions_dir,
            enable_solution_links=args.enable_solution_links,
            log_level=args.log_level,
        )
    except ReportError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    configure_logging(settings.log_level, progress_aware=show_progress)

    progress = TqdmProgress() if show_progress else NullProgress()

    try:
        asyncio.run(run_report(settings, progress=progress))
    except ReportError as e:
        logger.error(f"Report generation failed: {e}")
        return 1

    return 0
