"""
Command line inspection of Curtois 2014 instance files.

Usage via cli:
    curtois-inspect path/to/Instance1.txt
    curtois-inspect path/to/Instance1.txt --csv-dir out/
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from curtois.errors import InstanceError
from curtois.frames import write_csv_tables
from curtois.parser import parse_curtois2014
from curtois.summary import print_instance_summary


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="curtois-inspect",
        description="Read a Curtois 2014 rostering instance and summarise it.",
    )
    parser.add_argument("path", type=Path, help="instance file to read")
    parser.add_argument(
        "--csv-dir",
        type=Path,
        default=None,
        help="also write shifts/staff/days_off/requests/cover CSV files here",
    )
    parser.add_argument(
        "--quiet", action="store_true", help="do not print the summary"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point. Returns 0 on success and 1 for an invalid instance."""
    args = _build_arg_parser().parse_args(argv)
    try:
        instance = parse_curtois2014(args.path)
    except InstanceError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 1

    if not args.quiet:
        print_instance_summary(instance, title=args.path.name)
    if args.csv_dir is not None:
        for path in write_csv_tables(instance, args.csv_dir):
            print(f"wrote {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
