#!/usr/bin/env python3
"""Generate sample transaction files for validation.

This script writes the same generated records as sample.bin, sample.csv and
sample.txt in the local/ folder, then reads each file back and checks that
all three formats decode to identical record sets.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ypbank.compare import compare_records, format_report
from ypbank.convert import read_records
from ypbank.generators import RecordGenerator, write_sample_files
from ypbank.models import Format


def main() -> int:
    """Generate sample files and cross-check them."""
    output_dir = project_root / "local"
    seed = 42
    num_records = 10

    print("=" * 60)
    print("Generating Sample Transaction Files")
    print("=" * 60)

    generator = RecordGenerator(seed=seed)
    records = list(generator.generate_batch(num_records))
    paths = write_sample_files(output_dir, records)

    exit_code = 0
    for fmt, path in paths.items():
        decoded = read_records(path)
        result = compare_records(records, decoded)
        status = "OK" if result.identical else "MISMATCH"
        print(f"{fmt.value + ':':6}{len(decoded):4} records  {status}  {path}")
        if not result.identical:
            for line in format_report(result):
                print(f"    {line}")
            exit_code = 1

    bin_records = read_records(paths[Format.BIN])
    for fmt in (Format.CSV, Format.TXT):
        if compare_records(bin_records, read_records(paths[fmt])).identical:
            print(f"bin == {fmt.value}")
        else:
            print(f"bin != {fmt.value}")
            exit_code = 1

    print("=" * 60)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
