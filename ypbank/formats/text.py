"""Human-readable key/value format (``.txt``).

Records are written as blocks::

    # Record 1 (DEPOSIT)
    TX_TYPE: DEPOSIT
    TO_USER_ID: 1000
    FROM_USER_ID: 0
    TIMESTAMP: 1634000000000
    DESCRIPTION: "Single record"
    TX_ID: 42
    AMOUNT: 500
    STATUS: SUCCESS

followed by a blank line. Enum values are case sensitive on input.
"""

from __future__ import annotations

import logging
import re
from typing import BinaryIO, Iterable

from ypbank.formats.base import TEXT_ENCODING, Converter, read_text, write_bytes
from ypbank.formats.fields import check_record, record_from_mapping, strip_quotes
from ypbank.models import Format, Record

logger = logging.getLogger(__name__)

RECORD_MARKER = "# Record"

_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}
_UNESCAPES = {"n": "\n", "r": "\r", "t": "\t"}
_ESCAPE_SEQUENCE = re.compile(r"\\(.)", re.DOTALL)


class TxtRecords(Converter):
    """Records stored in the text format."""

    format = Format.TXT

    @classmethod
    def decode(cls, stream: BinaryIO) -> "TxtRecords":
        text = read_text(stream)

        records: list[Record] = []
        current: dict[str, str] = {}

        for raw_line in text.split("\n"):
            line = raw_line.strip()
            if not line:
                continue

            if line.startswith(RECORD_MARKER):
                if current:
                    records.append(record_from_mapping(current))
                    current = {}
                continue

            key, sep, value = line.partition(":")
            if not sep:
                # no colon: comment or stray text
                continue
            current[key.strip()] = _parse_value(value.strip())

        if current:
            records.append(record_from_mapping(current))

        logger.debug("Decoded %d text records", len(records))
        return cls(records)

    @classmethod
    def encode(cls, records: Iterable[Record], stream: BinaryIO) -> None:
        blocks = []
        for number, record in enumerate(records, start=1):
            tx_type, tx_status = check_record(record)
            blocks.append(
                f"{RECORD_MARKER} {number} ({tx_type.name})\n"
                f"TX_TYPE: {tx_type.name}\n"
                f"TO_USER_ID: {record.to_user_id}\n"
                f"FROM_USER_ID: {record.from_user_id}\n"
                f"TIMESTAMP: {record.timestamp}\n"
                f"DESCRIPTION: {quote(record.description)}\n"
                f"TX_ID: {record.tx_id}\n"
                f"AMOUNT: {record.amount}\n"
                f"STATUS: {tx_status.name}\n"
                "\n"
            )
        write_bytes(stream, "".join(blocks).encode(TEXT_ENCODING))
        logger.debug("Encoded %d text records", len(blocks))


def quote(value: str) -> str:
    """Render ``value`` as a double-quoted string with backslash escapes."""
    return '"' + "".join(_ESCAPES.get(char, char) for char in value) + '"'


def _parse_value(value: str) -> str:
    unquoted = strip_quotes(value)
    if unquoted == value:
        return value
    return _ESCAPE_SEQUENCE.sub(lambda m: _UNESCAPES.get(m.group(1), m.group(1)), unquoted)
