"""Naifuru CLI entry point.

This module validates command-line arguments, loads the analysis config,
runs extraction, and maps failures onto process exit codes.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from cli.args_validation import collect_args_errors
from core.analysis_config import load_analysis_config
from core.config import NaifuruConfig
from core.constants import DEFAULT_LOG_LEVEL, SUPPORTED_LOG_LEVELS
from core.errors import NaifuruError
from core.logging_config import configure_logging, get_logger
from extract.pipeline import ExtractionReport, run_extraction

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="naifuru",
        description="Extract seismic recordings listed in an analysis config",
    )
    parser.add_argument(
        "-i",
        "--input-file-path",
        required=True,
        type=Path,
        help="Path of the TOML analysis config describing the files to convert",
    )
    parser.add_argument(
        "-o",
        "--output-dir-path",
        required=True,
        type=Path,
        help="Path of the output directory of the converted files",
    )
    parser.add_argument(
        "-l",
        "--log-level",
        choices=SUPPORTED_LOG_LEVELS,
        help="Logging level (default: NAIFURU_LOG_LEVEL or info)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the naifuru CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    args = build_parser().parse_args(argv)
    try:
        runtime_config = NaifuruConfig.from_env()
    except NaifuruError as error:
        configure_logging(args.log_level or DEFAULT_LOG_LEVEL)
        return _report_errors([error])
    configure_logging(args.log_level or runtime_config.log_level)
    _LOGGER.debug("logging_configured", level=args.log_level or runtime_config.log_level)

    args_errors = collect_args_errors(args.input_file_path, args.output_dir_path)
    if args_errors:
        return _report_errors(args_errors)
    _LOGGER.debug("cli_args_validated")

    try:
        config = load_analysis_config(args.input_file_path)
        _LOGGER.debug("analysis_config_loaded", path=str(args.input_file_path))
        report = run_extraction(config, runtime_config)
    except NaifuruError as error:
        return _report_errors([error])
    _print_report(report)
    return report.exit_code


def _report_errors(errors: Sequence[NaifuruError]) -> int:
    for error in errors:
        _LOGGER.error("naifuru_failed", error=str(error), exit_code=error.exit_code)
    return errors[0].exit_code


def _print_report(report: ExtractionReport) -> None:
    for record in report.records:
        print(
            f"{record.conversion_name}\t"
            f"{record.group_index + 1}\t"
            f"{record.ir.num_of_elements}\t"
            f"{record.ir.timestamp or '-'}"
        )
