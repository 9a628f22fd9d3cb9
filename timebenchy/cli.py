"""Command-line entrypoint for timebenchy."""

from __future__ import annotations

import argparse
import logging
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from .config import Settings, load_settings
from .formatting import format_number, is_numeric
from .ledger import MarkLedger
from .render import FORMATS

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s :: %(message)s"


def load_environment() -> None:
    """Load environment variables from common .env locations."""

    candidates = [
        Path.cwd() / ".env",
        Path(__file__).resolve().parent.parent / ".env",
    ]
    for candidate in candidates:
        if candidate.is_file():
            load_dotenv(candidate, override=False, encoding="utf-8-sig")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments."""

    parser = argparse.ArgumentParser(description="Mark points in time and report the elapsed times.")
    parser.add_argument("--verbose", action="store_true", help="Log diagnostics to stderr.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser(
        "run",
        help="Run shell commands in order, marking each one as it finishes.",
    )
    run_parser.add_argument("commands", nargs="+", metavar="COMMAND", help="Shell command to time.")
    run_parser.add_argument(
        "--decimals",
        type=int,
        default=None,
        help="Maximum decimal places for elapsed times (default: TIMEBENCHY_DECIMALS or 4).",
    )
    run_parser.add_argument(
        "--format",
        dest="output_format",
        choices=FORMATS,
        default=None,
        help="Report format (default: TIMEBENCHY_OUTPUT_FORMAT or text).",
    )
    run_parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Continue with the remaining commands after a failure.",
    )

    format_parser = subparsers.add_parser("format", help="Format a number the way reports do.")
    format_parser.add_argument("value", help="Number to format.")
    format_parser.add_argument("--decimals", type=int, default=2, help="Maximum decimal places.")
    format_parser.add_argument(
        "--zero-is-null",
        action="store_true",
        help="Print an empty line for zero.",
    )
    return parser.parse_args(argv)


def configure_logging(verbose: bool, output_format: Optional[str] = None) -> None:
    level = logging.INFO if verbose or output_format == "log" else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)


def run_commands(
    commands: List[str],
    ledger: MarkLedger,
    *,
    keep_going: bool = False,
) -> int:
    """Run ``commands`` through the shell, marking ``[n] command`` after each.

    Returns the first non-zero exit status, or 2 when a command could not be
    started.
    """

    logger = logging.getLogger("timebenchy")
    ledger.mark("Start")
    exit_code = 0
    for index, command in enumerate(commands, start=1):
        logger.info("Running [%d] %s", index, command)
        try:
            completed = subprocess.run(command, shell=True, check=False)
        except OSError as exc:
            sys.stderr.write(f"Could not start {command!r}: {exc}\n")
            return exit_code or 2
        ledger.mark(f"[{index}] {command}")
        if completed.returncode != 0:
            sys.stderr.write(f"Command {command!r} exited with status {completed.returncode}\n")
            exit_code = exit_code or completed.returncode
            if not keep_going:
                break
    return exit_code


def _run(args: argparse.Namespace, settings: Settings) -> int:
    decimals = settings.decimals if args.decimals is None else args.decimals
    output_format = args.output_format or settings.output_format
    configure_logging(args.verbose, output_format)

    ledger = MarkLedger(clock=settings.clock_function())
    exit_code = run_commands(args.commands, ledger, keep_going=args.keep_going)
    ledger.print_stats(decimals, fmt=output_format)
    return exit_code


def _format(args: argparse.Namespace) -> int:
    if not is_numeric(args.value):
        sys.stderr.write(f"Not a number: {args.value!r}\n")
        return 1
    print(format_number(args.value, args.decimals, args.zero_is_null))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""

    load_environment()
    args = parse_args(argv)

    try:
        if args.command == "format":
            configure_logging(args.verbose)
            return _format(args)
        return _run(args, load_settings())
    except ValidationError as exc:
        sys.stderr.write(f"Invalid configuration: {exc}\n")
        return 1
    except Exception as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
