"""
Batch generator: fetch every puzzle once and write one JSON file per puzzle type.

Date-keyed puzzles (Wordle, Strands, Connections) use the given date (default
today); Spelling Bee, Letter Boxed and Sudoku always fetch today's page. A
failing puzzle is logged and recorded, and the run continues with the next one.

Run:
  python -m publish.generate [--date YYYY-MM-DD] [--output-dir static] [--only wordle sudoku]
"""

import argparse
import logging
from dataclasses import dataclass, field
from datetime import date as date_cls
from datetime import datetime
from pathlib import Path

from core import config
from publish.sink import BaseSink, FileSink
from puzzles_factory import build_answer, get_adapter, registered_types

logger = logging.getLogger(__name__)


@dataclass
class GenerationSummary:
    date: str
    succeeded: list[str] = field(default_factory=list)
    failed: list[tuple[str, str]] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            "date": self.date,
            "success": list(self.succeeded),
            "failed": [{"name": name, "error": error} for name, error in self.failed],
        }


def today_iso() -> str:
    """Today's local date as YYYY-MM-DD."""
    return date_cls.today().isoformat()


def generate_all(
    sink: BaseSink,
    date: str | None = None,
    puzzle_types: list[str] | None = None,
) -> GenerationSummary:
    """
    Build and publish every requested puzzle, sequentially.

    Args:
        sink: Where answers go (FileSink for static files).
        date: YYYY-MM-DD for date-keyed puzzles; defaults to today.
        puzzle_types: Subset of registered types; defaults to all, in registration order.

    Returns:
        GenerationSummary with succeeded and failed puzzle names.
    """
    date = date or today_iso()
    summary = GenerationSummary(date=date)
    logger.info("generating puzzles date=%s", date)

    for puzzle_type in puzzle_types or registered_types():
        try:
            adapter = get_adapter(puzzle_type)
            # Undated puzzles fetch the upstream's "today" page
            answer = build_answer(puzzle_type, date if adapter.date_required else None)
            sink.publish(puzzle_type, answer)
        except Exception as e:
            logger.warning("failed to generate puzzle=%s error=%s", puzzle_type, e)
            summary.failed.append((puzzle_type, str(e)))
            continue
        summary.succeeded.append(puzzle_type)

    logger.info(
        "generation summary date=%s success=%s failed=%s",
        date,
        len(summary.succeeded),
        len(summary.failed),
    )
    for name, error in summary.failed:
        logger.warning("failed puzzle %s: %s", name, error)
    return summary


def _iso_date(value: str) -> str:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date().isoformat()
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m publish.generate",
        description="Pre-generate one JSON answer file per puzzle type.",
    )
    parser.add_argument("--date", type=_iso_date, default=None, help="date for date-keyed puzzles (default: today)")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="output directory (default: STATIC_DIR or ./static)",
    )
    parser.add_argument(
        "--only",
        nargs="+",
        choices=registered_types(),
        default=None,
        metavar="PUZZLE",
        help=f"generate only these puzzles ({', '.join(registered_types())})",
    )
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    output_dir = args.output_dir or config.get_static_dir()
    generate_all(FileSink(output_dir), date=args.date, puzzle_types=args.only)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
