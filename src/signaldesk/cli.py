#!/usr/bin/env python3
"""
SignalDesk CLI

Normalize and rank production decisions from a row snapshot file.

Usage:
    signaldesk rank --rows snapshot.yaml
    signaldesk rank --rows rows.json --explain
    signaldesk show --rows snapshot.yaml --signal sig-001
    signaldesk validate --rows snapshot.yaml

Exit Codes:
    0   OK
    10  INPUT_INVALID   - Unreadable or invalid rows file
    11  SOURCE_ERROR    - Neither decision view could be queried
    20  INTERNAL_ERROR  - Unexpected internal error
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

import yaml

from .engine import normalize_decisions
from .exceptions import (
    RowFileLoadError,
    RowFileValidationError,
    RowFileVersionMismatch,
    RowSourceError,
)
from .logging_setup import configure_logging
from .sources import FileRowSource, load_decision_detail, load_decisions, read_document

logger = logging.getLogger(__name__)


# ============================================================================
# EXIT CODES
# ============================================================================

class ExitCode:
    """Deterministic exit codes for pipeline integration."""
    OK = 0
    INPUT_INVALID = 10
    SOURCE_ERROR = 11
    INTERNAL_ERROR = 20


def json_dumps(obj: Any, indent: int = 2) -> str:
    """Serialize object to JSON string."""
    return json.dumps(obj, indent=indent, sort_keys=True, default=str)


def _print_error(payload: dict) -> None:
    print(json_dumps({"error": payload}), file=sys.stderr)


def _demo_flag(args) -> Optional[bool]:
    # --demo forces the fallback on; otherwise the environment decides.
    return True if args.demo else None


# ============================================================================
# COMMANDS
# ============================================================================

def cmd_rank(args) -> int:
    path = Path(args.rows)

    if args.explain is not None:
        # Flat list of rows, mode forced by the caller.
        try:
            rows = read_document(path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            _print_error({"code": "SD_ROW_FILE_LOAD_ERROR", "message": str(e)})
            return ExitCode.INPUT_INVALID
        if not isinstance(rows, list):
            _print_error({"code": "SD_ROW_FILE_VALIDATION_ERROR", "message": "Expected a list of rows"})
            return ExitCode.INPUT_INVALID
        batch = normalize_decisions(rows, explain=args.explain, source_name=path.name)
    else:
        source = FileRowSource(path)
        batch = load_decisions(source, demo_fallback=_demo_flag(args))

    print(json_dumps(batch.to_dict()))
    return ExitCode.OK


def cmd_show(args) -> int:
    source = FileRowSource(args.rows)
    detail = load_decision_detail(source, args.signal, demo_fallback=_demo_flag(args))
    print(json_dumps(detail.to_dict()))
    return ExitCode.OK


def cmd_validate(args) -> int:
    source = FileRowSource(args.rows)
    print(json_dumps({
        "valid": True,
        "name": source.name,
        "schema_version": source.schema.schema_version,
        "views": {name: len(rows) for name, rows in source.schema.views.items()},
        "blocked": sorted(source.schema.blocked),
    }))
    return ExitCode.OK


# ============================================================================
# MAIN
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="signaldesk",
        description="SignalDesk - production decision normalization and ranking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit Codes:
  0   OK
  10  INPUT_INVALID   Unreadable or invalid rows file
  11  SOURCE_ERROR    Neither decision view could be queried
  20  INTERNAL_ERROR  Unexpected internal error

Examples:
  signaldesk rank --rows snapshot.yaml
  signaldesk rank --rows rows.json --base
  signaldesk show --rows snapshot.yaml --signal sig-001 --demo
        """
    )
    parser.add_argument("--log-level", default=None, help="Log level (default SIGNALDESK_LOG_LEVEL)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # rank
    rank_parser = subparsers.add_parser("rank", help="Print the ranked decision worklist")
    rank_parser.add_argument("--rows", "-r", required=True, help="Row snapshot file (YAML/JSON)")
    mode = rank_parser.add_mutually_exclusive_group()
    mode.add_argument("--explain", dest="explain", action="store_const", const=True, default=None,
                      help="Treat the file as a flat row list in explain mode")
    mode.add_argument("--base", dest="explain", action="store_const", const=False,
                      help="Treat the file as a flat row list in base mode")
    rank_parser.add_argument("--demo", action="store_true", help="Substitute demo rows when none are accessible")
    rank_parser.set_defaults(func=cmd_rank)

    # show
    show_parser = subparsers.add_parser("show", help="Print the drill-down for one signal")
    show_parser.add_argument("--rows", "-r", required=True, help="Row snapshot file (YAML/JSON)")
    show_parser.add_argument("--signal", "-s", required=True, help="Signal id")
    show_parser.add_argument("--demo", action="store_true", help="Substitute demo content when nothing is accessible")
    show_parser.set_defaults(func=cmd_show)

    # validate
    validate_parser = subparsers.add_parser("validate", help="Validate a row snapshot file")
    validate_parser.add_argument("--rows", "-r", required=True, help="Row snapshot file (YAML/JSON)")
    validate_parser.set_defaults(func=cmd_validate)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not getattr(args, "func", None):
        parser.print_help()
        return ExitCode.INPUT_INVALID

    configure_logging(args.log_level)

    try:
        return args.func(args)
    except (RowFileLoadError, RowFileValidationError, RowFileVersionMismatch) as e:
        _print_error(e.to_dict())
        return ExitCode.INPUT_INVALID
    except RowSourceError as e:
        _print_error(e.to_dict())
        return ExitCode.SOURCE_ERROR
    except Exception as e:
        logger.exception("Unexpected error")
        _print_error({"code": "SD_INTERNAL_ERROR", "message": str(e)})
        return ExitCode.INTERNAL_ERROR


if __name__ == "__main__":
    sys.exit(main())
