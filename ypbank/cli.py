"""Command-line interface for converting and comparing transaction files.

Usage:
    ypbank convert --input records.bin --output-format csv
    ypbank compare --file1 records.bin --file2 records.csv
    ypbank generate --count 100 --seed 42 --output-dir samples
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ypbank.compare import compare_files, format_report
from ypbank.config import YPBankConfig
from ypbank.convert import convert_file
from ypbank.exceptions import YPBankError
from ypbank.generators import RecordGenerator, write_sample_files
from ypbank.logging import setup_logging
from ypbank.models import Format

logger = logging.getLogger(__name__)

FORMAT_CHOICES = [fmt.value for fmt in Format]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all sub-commands."""
    parser = argparse.ArgumentParser(
        prog="ypbank",
        description="Convert and compare YPBank transaction records between formats",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default=None,
        help="Log format (default: LOG_FORMAT or standard)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser("convert", help="Convert a file into another format")
    convert.add_argument("--input", type=Path, required=True, help="Input file path")
    convert.add_argument(
        "--output-format",
        choices=FORMAT_CHOICES,
        required=True,
        help="Output format",
    )
    convert.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for the converted file (default: next to the input)",
    )

    compare = subparsers.add_parser("compare", help="Compare records of two files")
    compare.add_argument("--file1", type=Path, required=True, help="First file path")
    compare.add_argument("--file2", type=Path, required=True, help="Second file path")

    generate = subparsers.add_parser("generate", help="Write sample files in every format")
    generate.add_argument("--count", type=int, default=None, help="Number of records (default: 5)")
    generate.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    generate.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Directory for sample.bin, sample.csv and sample.txt",
    )

    return parser


def run_convert(args: argparse.Namespace, config: YPBankConfig) -> int:
    output_dir = args.output_dir or config.output.output_dir
    output_path = convert_file(args.input, Format(args.output_format), output_dir)
    print(f"Conversion complete: {output_path}")
    return 0


def run_compare(args: argparse.Namespace, config: YPBankConfig) -> int:
    result = compare_files(args.file1, args.file2)
    for line in format_report(result):
        print(line)
    return 0 if result.identical else 1


def run_generate(args: argparse.Namespace, config: YPBankConfig) -> int:
    count = args.count if args.count is not None else config.sample.count
    seed = args.seed if args.seed is not None else config.sample.seed

    generator = RecordGenerator(seed=seed, locale=config.sample.locale)
    paths = write_sample_files(args.output_dir, generator.generate_batch(count))
    for path in paths.values():
        print(f"Wrote {path}")
    return 0


COMMANDS = {
    "convert": run_convert,
    "compare": run_compare,
    "generate": run_generate,
}


def main(argv: list[str] | None = None) -> int:
    """Run the command line and return the process exit status."""
    args = build_parser().parse_args(argv)

    try:
        config = YPBankConfig.from_env()
    except YPBankError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    setup_logging(
        level=args.log_level or config.log_level,
        format_type=args.log_format or config.log_format,
    )

    try:
        return COMMANDS[args.command](args, config)
    except YPBankError as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
