"""Domain models for transaction records."""

from ypbank.models.enums import TX_STATUS_CODES, TX_TYPE_CODES, Format, TxStatus, TxType
from ypbank.models.record import (
    FIELD_ATTRIBUTES,
    FIELD_NAMES,
    I64_MAX,
    U32_MAX,
    U64_MAX,
    Record,
)

__all__ = [
    "FIELD_ATTRIBUTES",
    "FIELD_NAMES",
    "Format",
    "I64_MAX",
    "Record",
    "TX_STATUS_CODES",
    "TX_TYPE_CODES",
    "TxStatus",
    "TxType",
    "U32_MAX",
    "U64_MAX",
]
