"""Record formats and the registry used to select them."""

from ypbank.exceptions import UnsupportedFormatError
from ypbank.formats.base import Converter
from ypbank.formats.binary import BinRecords
from ypbank.formats.csv_format import CsvRecords
from ypbank.formats.text import TxtRecords
from ypbank.models import Format

CONVERTERS: dict[Format, type[Converter]] = {
    Format.BIN: BinRecords,
    Format.CSV: CsvRecords,
    Format.TXT: TxtRecords,
}


def get_converter(fmt: Format | str) -> type[Converter]:
    """Return the converter class registered for ``fmt``."""
    if not isinstance(fmt, Format):
        fmt = Format.parse(fmt)
    try:
        return CONVERTERS[fmt]
    except KeyError as exc:
        raise UnsupportedFormatError(f"No converter registered for {fmt.value}") from exc


__all__ = ["BinRecords", "CONVERTERS", "Converter", "CsvRecords", "TxtRecords", "get_converter"]
