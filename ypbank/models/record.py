"""Transaction record model shared by all formats."""

from dataclasses import dataclass

from ypbank.models.enums import TxStatus, TxType

U32_MAX = 2**32 - 1
I64_MAX = 2**63 - 1
U64_MAX = 2**64 - 1

# External key names in CSV column order
FIELD_NAMES: tuple[str, ...] = (
    "TX_TYPE",
    "STATUS",
    "TO_USER_ID",
    "FROM_USER_ID",
    "TIMESTAMP",
    "DESCRIPTION",
    "TX_ID",
    "AMOUNT",
)

# External key -> Record attribute
FIELD_ATTRIBUTES: dict[str, str] = {
    "TX_TYPE": "tx_type",
    "STATUS": "tx_status",
    "TO_USER_ID": "to_user_id",
    "FROM_USER_ID": "from_user_id",
    "TIMESTAMP": "timestamp",
    "DESCRIPTION": "description",
    "TX_ID": "tx_id",
    "AMOUNT": "amount",
}


@dataclass(frozen=True)
class Record:
    """A single bank transaction.

    Integer fields hold unsigned 64-bit values. ``amount`` is carried on the
    binary wire as a signed 64-bit integer, so values above ``I64_MAX`` wrap
    there (they still decode back to the same unsigned value).
    ``timestamp`` is in milliseconds.
    """

    tx_id: int
    tx_type: TxType
    tx_status: TxStatus
    from_user_id: int
    to_user_id: int
    amount: int
    timestamp: int
    description: str = ""
