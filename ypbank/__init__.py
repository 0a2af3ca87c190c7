"""Lossless conversion of YPBank transaction records between binary, CSV and text formats."""

from ypbank.formats import BinRecords, Converter, CsvRecords, TxtRecords, get_converter
from ypbank.models import Format, Record, TxStatus, TxType

__version__ = "0.1.0"

__all__ = [
    "BinRecords",
    "Converter",
    "CsvRecords",
    "Format",
    "Record",
    "TxStatus",
    "TxType",
    "TxtRecords",
    "get_converter",
]
