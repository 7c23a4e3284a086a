from __future__ import annotations

import argparse
import logging
import os
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from simas_import.app import ImportIsolation, import_vacancy_rows, seed_references
from simas_import.config import LOG_LEVEL_NAMES, configure_logging
from simas_import.domain.importer import CommitResult
from simas_import.domain.model import ReferenceDomain

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Import SIMAS records")
    parser.add_argument(
        "--log-level",
        type=str.lower,
        choices=LOG_LEVEL_NAMES,
        default=os.getenv("SIMAS_LOG_LEVEL", "info"),
        help="Lowest level written to stderr (default: $SIMAS_LOG_LEVEL or info)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    vacancy = subparsers.add_parser("vacancy", help="Import one vacancy row")
    vacancy.add_argument("--position", type=str, help="Position name as typed")
    vacancy.add_argument("--department", type=str, help="Department name as typed")
    vacancy.add_argument("--notice", type=str, help="Public notice name as typed")
    vacancy.add_argument(
        "--locked",
        type=str,
        help='Lock flag; only "true" or "1" lock the vacancy',
    )
    vacancy.add_argument(
        "--actor",
        type=str,
        required=True,
        help="User recorded in the audit trail",
    )
    vacancy.add_argument(
        "--preview",
        action="store_true",
        help="Resolve and show the record without writing anything",
    )

    seed = subparsers.add_parser("seed", help="Add canonical reference entries")
    seed.add_argument("--position", action="append", default=[], help="Position name")
    seed.add_argument("--department", action="append", default=[], help="Department name")
    seed.add_argument("--notice", action="append", default=[], help="Public notice name")

    return parser.parse_args(list(argv))


def _run_vacancy(args: argparse.Namespace) -> int:
    row = {
        "position_name": args.position,
        "department_name": args.department,
        "notice_name": args.notice,
        "locked": args.locked,
    }
    report = import_vacancy_rows(
        [row],
        actor=args.actor,
        preview=args.preview,
        isolation=ImportIsolation.ROW,
    )
    for failure in report.failures:
        log.error("Row %s rejected: %s", failure.index + 1, failure.error)
    for result in report.results:
        if isinstance(result, CommitResult):
            log.info(result.message)
        else:
            log.info("Preview %s: %s", result.id, result.record.snapshot())
    return 0 if report.ok else 2


def _run_seed(args: argparse.Namespace) -> int:
    names = {
        ReferenceDomain.POSITION: args.position,
        ReferenceDomain.DEPARTMENT: args.department,
        ReferenceDomain.NOTICE: args.notice,
    }
    if not any(names.values()):
        raise ValueError("Nothing to seed: pass --position, --department or --notice")
    for entity in seed_references(names):
        log.info("Seeded %s %s: %s", entity.domain, entity.id, entity.display_name)
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        configure_logging(parsed_args.log_level)
        if parsed_args.command == "vacancy":
            exit_code = _run_vacancy(parsed_args)
        elif parsed_args.command == "seed":
            exit_code = _run_seed(parsed_args)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during import")
        sys.exit(1)

    if exit_code:
        sys.exit(exit_code)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
