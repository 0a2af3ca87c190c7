"""Field helpers shared by the formats: parsing on decode, validation on encode."""

import re
from enum import Enum
from typing import Mapping, TypeVar

from ypbank.exceptions import (
    ConvertingError,
    InvalidTxStatusError,
    InvalidTxTypeError,
    MissingKeyError,
    ValueOutOfRangeError,
    WrongKeyError,
)
from ypbank.formats.base import TEXT_ENCODING
from ypbank.models import U64_MAX, Record, TxStatus, TxType

E = TypeVar("E", bound=Enum)

INTEGER_FIELDS = ("tx_id", "from_user_id", "to_user_id", "amount", "timestamp")

_UNSIGNED = re.compile(r"\+?[0-9]+")


def strip_quotes(value: str) -> str:
    """Remove one pair of enclosing double quotes, if present."""
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value


def parse_enum(enum_cls: type[E], value: str | None, case_insensitive: bool = False) -> E | None:
    """Match ``value`` against the member names of ``enum_cls``.

    Returns None when there is no match.
    """
    if value is None:
        return None
    member = enum_cls.__members__.get(value)
    if member is None and case_insensitive and value.isascii():
        member = enum_cls.__members__.get(value.upper())
    return member


def parse_u64(mapping: Mapping[str, str], key: str) -> int:
    """Parse a required unsigned 64-bit decimal field."""
    if key not in mapping:
        raise MissingKeyError(key)
    value = mapping[key]
    if not _UNSIGNED.fullmatch(value):
        raise WrongKeyError(key)
    number = int(value)
    if number > U64_MAX:
        raise WrongKeyError(key)
    return number


def check_u64(field: str, value: int) -> None:
    """Ensure ``value`` is representable as an unsigned 64-bit integer."""
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= U64_MAX:
        raise ValueOutOfRangeError(field, value)


def check_record(record: Record) -> tuple[TxType, TxStatus]:
    """Validate a record before it is encoded into any format.

    Returns
    -------
    tuple[TxType, TxStatus]
        The record's type and status as enum members.

    Raises
    ------
    ValueOutOfRangeError
        An integer field is outside the u64 range or an enum value is unknown.
    ConvertingError
        The description cannot be encoded as UTF-8.
    """
    for name in INTEGER_FIELDS:
        check_u64(name, getattr(record, name))

    try:
        tx_type = TxType(record.tx_type)
    except ValueError as exc:
        raise ValueOutOfRangeError("tx_type", record.tx_type) from exc
    try:
        tx_status = TxStatus(record.tx_status)
    except ValueError as exc:
        raise ValueOutOfRangeError("tx_status", record.tx_status) from exc

    try:
        record.description.encode(TEXT_ENCODING)
    except UnicodeEncodeError as exc:
        raise ConvertingError(
            f"Description of record {record.tx_id} is not encodable as {TEXT_ENCODING}"
        ) from exc

    return tx_type, tx_status


def record_from_mapping(mapping: Mapping[str, str], case_insensitive: bool = False) -> Record:
    """Build a record from upper-case keys such as ``TX_TYPE`` and ``AMOUNT``."""
    tx_type = parse_enum(TxType, mapping.get("TX_TYPE"), case_insensitive)
    if tx_type is None:
        raise InvalidTxTypeError()

    tx_status = parse_enum(TxStatus, mapping.get("STATUS"), case_insensitive)
    if tx_status is None:
        raise InvalidTxStatusError()

    return Record(
        tx_type=tx_type,
        tx_status=tx_status,
        to_user_id=parse_u64(mapping, "TO_USER_ID"),
        from_user_id=parse_u64(mapping, "FROM_USER_ID"),
        timestamp=parse_u64(mapping, "TIMESTAMP"),
        description=mapping.get("DESCRIPTION", ""),
        tx_id=parse_u64(mapping, "TX_ID"),
        amount=parse_u64(mapping, "AMOUNT"),
    )
