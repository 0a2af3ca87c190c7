"""Enumeration types for transaction records and file formats."""

from enum import Enum
from pathlib import Path

from ypbank.exceptions import UnsupportedFormatError


class TxType(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"
    TRANSFER = "TRANSFER"


class TxStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    PENDING = "PENDING"


# Binary wire codes
TX_TYPE_CODES: dict[TxType, int] = {
    TxType.DEPOSIT: 0,
    TxType.TRANSFER: 1,
    TxType.WITHDRAWAL: 2,
}

TX_STATUS_CODES: dict[TxStatus, int] = {
    TxStatus.SUCCESS: 0,
    TxStatus.FAILURE: 1,
    TxStatus.PENDING: 2,
}


class Format(str, Enum):
    """Supported file formats, valued by their file extension."""

    BIN = "bin"
    CSV = "csv"
    TXT = "txt"

    @classmethod
    def parse(cls, name: str) -> "Format":
        """Resolve a format name such as ``"CSV"`` or ``".txt"``."""
        normalized = name.strip().lower().lstrip(".")
        for member in cls:
            if member.value == normalized:
                return member
        raise UnsupportedFormatError(f"Unsupported format: {name!r}")

    @classmethod
    def from_path(cls, path: str | Path) -> "Format":
        """Detect the format of a file from its extension."""
        suffix = Path(path).suffix
        if not suffix:
            raise UnsupportedFormatError(f"Cannot detect format of {path}: no file extension")
        return cls.parse(suffix)
