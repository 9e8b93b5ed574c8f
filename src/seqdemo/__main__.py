"""CLI entry-point for seqdemo.

Usage:
    python -m seqdemo
    python -m seqdemo --section mutating --section copy
    python -m seqdemo --width 60
    python -m seqdemo --json > report.json
    python -m seqdemo validate report.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import jsonschema

from seqdemo import __version__
from seqdemo.contracts.load import REPORT_SCHEMA, validate_file
from seqdemo.core.config import ALL_SECTIONS, DemoConfig
from seqdemo.core.runner import run_demos
from seqdemo.utils.exit_codes import ExitCode
from seqdemo.utils.json_norm import stable_json_dump

logger = logging.getLogger("seqdemo")


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="seqdemo",
        description="Show which sequence operations mutate their input.",
    )
    sub = p.add_subparsers(dest="command")

    # ── default (demo run) mode ─────────────────────────────────────
    p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the demo report as JSON instead of the text walkthrough.",
    )
    p.add_argument(
        "--section",
        dest="sections",
        action="append",
        choices=ALL_SECTIONS,
        default=None,
        help="Run only this section (repeatable). Default: all sections.",
    )
    p.add_argument(
        "--width",
        type=_positive_int,
        default=80,
        help="Width of the section rule lines (default: 80).",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Debug logging to stderr.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # ── validate subcommand ─────────────────────────────────────────
    val_p = sub.add_parser(
        "validate",
        help="Validate a saved --json report against the bundled schema.",
    )
    val_p.add_argument("report", type=Path, help="Path to the JSON report.")

    return p


def _handle_validate(args: argparse.Namespace) -> int:
    # Exit code contract:
    #   1 = schema violation
    #   2 = unreadable file / invalid JSON
    try:
        validate_file(args.report, REPORT_SCHEMA)
    except jsonschema.ValidationError as e:
        print(f"FAIL: {e.message}", file=sys.stderr)
        return ExitCode.VIOLATION
    except (OSError, json.JSONDecodeError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return ExitCode.ERROR
    print("OK")
    return ExitCode.SUCCESS


def _config_from_args(args: argparse.Namespace) -> DemoConfig:
    sections = ALL_SECTIONS
    if args.sections:
        # Canonical order, whatever order the flags came in.
        sections = tuple(s for s in ALL_SECTIONS if s in args.sections)
    return DemoConfig(width=args.width, sections=sections, json_out=args.json_out)


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code; demo faults propagate uncaught."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    # ── validate subcommand ─────────────────────────────────────────
    if args.command == "validate":
        return _handle_validate(args)

    # ── demo run ────────────────────────────────────────────────────
    config = _config_from_args(args)
    logger.debug("running sections: %s", ", ".join(config.sections))
    report = run_demos(config)
    if config.json_out:
        stable_json_dump(report.to_dict(), sys.stdout)
    return ExitCode.SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
