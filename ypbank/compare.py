"""Field-by-field comparison of record sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Sequence

from ypbank.convert import read_records
from ypbank.models import Record

# Order in which differences are reported
COMPARED_FIELDS: tuple[str, ...] = (
    "tx_type",
    "tx_status",
    "to_user_id",
    "from_user_id",
    "timestamp",
    "description",
    "tx_id",
    "amount",
)


@dataclass
class FieldDifference:
    """A single differing field between two paired records."""

    index: int  # 1-based record number
    field: str
    first: Any
    second: Any


@dataclass
class ComparisonResult:
    """Outcome of comparing two record sets."""

    first_count: int
    second_count: int
    differences: list[FieldDifference] = field(default_factory=list)

    @property
    def count_mismatch(self) -> bool:
        return self.first_count != self.second_count

    @property
    def identical(self) -> bool:
        return not self.count_mismatch and not self.differences


def compare_records(first: Sequence[Record], second: Sequence[Record]) -> ComparisonResult:
    """Compare two record sets pairwise by position.

    Records beyond the length of the shorter set are only reflected in the
    count mismatch.
    """
    result = ComparisonResult(first_count=len(first), second_count=len(second))
    for index, (left, right) in enumerate(zip(first, second), start=1):
        for name in COMPARED_FIELDS:
            left_value = getattr(left, name)
            right_value = getattr(right, name)
            if left_value != right_value:
                result.differences.append(FieldDifference(index, name, left_value, right_value))
    return result


def compare_files(first_path: str | Path, second_path: str | Path) -> ComparisonResult:
    """Decode two files, each in its own format, and compare them."""
    return compare_records(read_records(first_path), read_records(second_path))


def format_report(result: ComparisonResult) -> list[str]:
    """Render a comparison result as human-readable lines."""
    if result.identical:
        return ["Files are identical"]

    lines = []
    if result.count_mismatch:
        lines.append(
            f"The count of transactions isn't equal: {result.first_count} vs {result.second_count}"
        )
    for diff in result.differences:
        lines.append(
            f"Not equal: {diff.field} differs: {_render(diff.first)} vs {_render(diff.second)} "
            f"for record number {diff.index}"
        )
    return lines


def _render(value: Any) -> str:
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, str):
        return repr(value)
    return str(value)
