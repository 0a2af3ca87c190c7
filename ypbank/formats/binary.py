"""Length-framed binary format (``.bin``).

Each record is a frame::

    b"YPBN" | body_len:u32 | body

with a big-endian body laid out as::

    tx_id:u64 | tx_type:u8 | from_user_id:u64 | to_user_id:u64 |
    amount:i64 | timestamp:u64 | tx_status:u8 | desc_len:u32 | desc

``body_len`` counts only the body bytes.
"""

from __future__ import annotations

import logging
import struct
from typing import BinaryIO, Iterable

from ypbank.exceptions import (
    CorruptRecordError,
    InvalidMagicHeaderError,
    InvalidTxStatusError,
    InvalidTxTypeError,
    StreamIOError,
    TextDecodeError,
    ValueOutOfRangeError,
)
from ypbank.formats.base import Converter, write_bytes
from ypbank.formats.fields import check_record
from ypbank.models import (
    I64_MAX,
    TX_STATUS_CODES,
    TX_TYPE_CODES,
    U32_MAX,
    U64_MAX,
    Format,
    Record,
    TxStatus,
    TxType,
)

logger = logging.getLogger(__name__)

MAGIC = b"YPBN"

_LENGTH = struct.Struct(">I")
_FIXED = struct.Struct(">QBQQqQBI")

# Size of the body without the description
MIN_FIXED_SIZE = _FIXED.size  # 46 bytes

_TX_TYPE_BY_CODE: dict[int, TxType] = {code: tx_type for tx_type, code in TX_TYPE_CODES.items()}
_TX_STATUS_BY_CODE: dict[int, TxStatus] = {code: status for status, code in TX_STATUS_CODES.items()}


class BinRecords(Converter):
    """Records stored in the binary format."""

    format = Format.BIN

    @classmethod
    def decode(cls, stream: BinaryIO) -> "BinRecords":
        records: list[Record] = []

        while True:
            magic = _read_exact(stream, len(MAGIC))
            if len(magic) < len(MAGIC):
                if magic:
                    logger.warning("Ignoring %d trailing bytes after record %d", len(magic), len(records))
                break

            if magic != MAGIC:
                raise InvalidMagicHeaderError()

            length_bytes = _read_exact(stream, _LENGTH.size)
            if len(length_bytes) < _LENGTH.size:
                raise CorruptRecordError()
            (record_size,) = _LENGTH.unpack(length_bytes)

            if record_size < MIN_FIXED_SIZE:
                raise CorruptRecordError()

            body = _read_exact(stream, record_size)
            if len(body) < record_size:
                raise CorruptRecordError()

            records.append(_parse_body(body))

        logger.debug("Decoded %d binary records", len(records))
        return cls(records)

    @classmethod
    def encode(cls, records: Iterable[Record], stream: BinaryIO) -> None:
        frames = []
        for record in records:
            body = _build_body(record)
            if len(body) > U32_MAX:
                raise ValueOutOfRangeError("description", len(body))
            frames.append(MAGIC + _LENGTH.pack(len(body)) + body)
        write_bytes(stream, b"".join(frames))
        logger.debug("Encoded %d binary records", len(frames))


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    """Read up to ``size`` bytes, stopping early only at end of stream."""
    chunks = []
    remaining = size
    try:
        while remaining > 0:
            chunk = stream.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
    except OSError as exc:
        raise StreamIOError(f"Failed to read input stream: {exc}") from exc
    return b"".join(chunks)


def _parse_body(body: bytes) -> Record:
    (
        tx_id,
        type_code,
        from_user_id,
        to_user_id,
        amount,
        timestamp,
        status_code,
        desc_len,
    ) = _FIXED.unpack_from(body)

    tx_type = _TX_TYPE_BY_CODE.get(type_code)
    if tx_type is None:
        raise InvalidTxTypeError(f"Invalid transaction type code: {type_code}")

    tx_status = _TX_STATUS_BY_CODE.get(status_code)
    if tx_status is None:
        raise InvalidTxStatusError(f"Invalid transaction status code: {status_code}")

    # The description must fit inside the declared frame
    if MIN_FIXED_SIZE + desc_len > len(body):
        raise CorruptRecordError()

    desc_bytes = body[MIN_FIXED_SIZE : MIN_FIXED_SIZE + desc_len]
    try:
        description = desc_bytes.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise TextDecodeError(f"Description of record {tx_id} is not valid UTF-8") from exc

    return Record(
        tx_id=tx_id,
        tx_type=tx_type,
        tx_status=tx_status,
        from_user_id=from_user_id,
        to_user_id=to_user_id,
        amount=amount & U64_MAX,
        timestamp=timestamp,
        description=description.replace('"', ""),
    )


def _build_body(record: Record) -> bytes:
    tx_type, tx_status = check_record(record)

    # Two's-complement narrowing: amounts above I64_MAX wrap on the wire
    amount = record.amount - (U64_MAX + 1) if record.amount > I64_MAX else record.amount

    desc_bytes = record.description.encode("utf-8")
    if len(desc_bytes) > U32_MAX:
        raise ValueOutOfRangeError("description", len(desc_bytes))

    fixed = _FIXED.pack(
        record.tx_id,
        TX_TYPE_CODES[tx_type],
        record.from_user_id,
        record.to_user_id,
        amount,
        record.timestamp,
        TX_STATUS_CODES[tx_status],
        len(desc_bytes),
    )
    return fixed + desc_bytes
