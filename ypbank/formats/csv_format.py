"""Comma-separated format (``.csv``) with a fixed eight column header."""

from __future__ import annotations

import csv
import io
import logging
from typing import BinaryIO, Iterable, Iterator

from ypbank.exceptions import ColumnCountMismatchError, EmptyInputError, ParsingError
from ypbank.formats.base import TEXT_ENCODING, Converter, read_text, write_bytes
from ypbank.formats.fields import check_record, record_from_mapping
from ypbank.models import FIELD_NAMES, Format, Record

logger = logging.getLogger(__name__)

HEADER = ",".join(FIELD_NAMES)


class CsvRecords(Converter):
    """Records stored in the CSV format.

    Descriptions are written quoted, with embedded quotes doubled
    (RFC 4180), so commas, quotes and line breaks survive a round trip.
    On input, surrounding whitespace is stripped from every field; text
    inside quotes is kept as written. Enum columns are matched
    case-insensitively.
    """

    format = Format.CSV

    @classmethod
    def decode(cls, stream: BinaryIO) -> "CsvRecords":
        text = read_text(stream)
        if not text:
            raise EmptyInputError()

        lines = _RawLines(text)
        reader = csv.reader(lines, skipinitialspace=True)
        rows = _rows(reader)
        first = next(rows, None)
        if first is None:
            raise EmptyInputError()
        header = [name.strip() for name in first]
        lines.take()

        records: list[Record] = []
        last_line = reader.line_num
        for row in rows:
            start_line = last_line + 1
            last_line = reader.line_num
            raw = lines.take()

            if len(row) <= 1 and not "".join(row).strip():
                continue

            if len(row) != len(header):
                raise ColumnCountMismatchError(start_line, len(header), len(row))

            mapping = {
                name: _field_value(name, value, tail)
                for name, value, tail in zip(header, row, _quote_tails(raw, len(row)))
            }
            records.append(record_from_mapping(mapping, case_insensitive=True))

        logger.debug("Decoded %d CSV records", len(records))
        return cls(records)

    @classmethod
    def encode(cls, records: Iterable[Record], stream: BinaryIO) -> None:
        lines = [HEADER]
        for record in records:
            tx_type, tx_status = check_record(record)
            lines.append(
                ",".join(
                    (
                        tx_type.name,
                        tx_status.name,
                        str(record.to_user_id),
                        str(record.from_user_id),
                        str(record.timestamp),
                        _quote(record.description),
                        str(record.tx_id),
                        str(record.amount),
                    )
                )
            )
        write_bytes(stream, ("\n".join(lines) + "\n").encode(TEXT_ENCODING))
        logger.debug("Encoded %d CSV records", len(lines) - 1)


class _RawLines:
    """Line source for ``csv.reader`` that remembers the text of the current row."""

    def __init__(self, text: str) -> None:
        self._lines = io.StringIO(text, newline="")
        self._consumed: list[str] = []

    def __iter__(self) -> Iterator[str]:
        for line in self._lines:
            self._consumed.append(line)
            yield line

    def take(self) -> str:
        """Return the raw text read since the previous call."""
        raw = "".join(self._consumed)
        self._consumed.clear()
        return raw


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def _field_value(name: str, value: str, tail: int | None) -> str:
    if tail is None:
        return value.strip()
    # csv.reader appends whatever follows the closing quote
    if tail:
        value = value[:-tail]
    return value if name == "DESCRIPTION" else value.strip()


def _quote_tails(raw: str, count: int) -> list[int | None]:
    """Scan one raw row the way ``csv.reader`` splits it.

    For each field, returns None when the field is not quoted, otherwise
    the number of characters after its closing quote.
    """
    tails: list[int | None] = []
    state = "start"
    for char in raw:
        if state == "start":
            if char == " ":
                continue
            if char == '"':
                tails.append(0)
                state = "quoted"
            else:
                tails.append(None)
                state = "start" if char == "," else "plain"
        elif state == "quoted":
            if char == '"':
                state = "closed"
        elif state == "closed":
            if char == '"':
                # doubled quote inside the field
                state = "quoted"
            elif char == ",":
                state = "start"
            elif char not in "\r\n":
                tails[-1] += 1
                state = "tail"
        elif char == ",":
            state = "start"
        elif state == "tail" and char not in "\r\n":
            tails[-1] += 1
    if state == "start":
        tails.append(None)

    if len(tails) != count:
        return [None] * count
    return tails


def _rows(reader) -> Iterator[list[str]]:
    try:
        yield from reader
    except csv.Error as exc:
        raise ParsingError(f"Malformed CSV near line {reader.line_num}: {exc}") from exc
