"""File-level conversion between record formats."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Iterable

from ypbank.exceptions import ConfigurationError, StreamIOError
from ypbank.formats import get_converter
from ypbank.models import Format, Record

logger = logging.getLogger(__name__)


def read_records(path: str | Path, fmt: Format | None = None) -> list[Record]:
    """Decode every record from a file.

    Parameters
    ----------
    path : str | Path
        File to read.
    fmt : Format | None
        Format of the file; detected from the extension when omitted.

    Returns
    -------
    list[Record]
        Decoded records, in file order.
    """
    path = Path(path)
    converter = get_converter(fmt or Format.from_path(path))
    try:
        with open(path, "rb") as f:
            decoded = converter.decode(f)
    except OSError as exc:
        raise StreamIOError(f"Cannot read {path}: {exc}") from exc
    logger.debug("Read %d records from %s", len(decoded), path)
    return list(decoded.records)


def write_records(records: Iterable[Record], path: str | Path, fmt: Format | None = None) -> None:
    """Encode records into a file, replacing it if it exists.

    Records are encoded in memory first; an encoding error leaves an
    existing file untouched.
    """
    path = Path(path)
    converter = get_converter(fmt or Format.from_path(path))
    buffer = io.BytesIO()
    converter.encode(records, buffer)
    try:
        path.write_bytes(buffer.getvalue())
    except OSError as exc:
        raise StreamIOError(f"Cannot write {path}: {exc}") from exc


def derive_output_path(
    input_path: str | Path,
    output_format: Format,
    output_dir: str | Path | None = None,
) -> Path:
    """Replace the extension of ``input_path`` with the one of ``output_format``."""
    output_path = Path(input_path).with_suffix(f".{output_format.value}")
    if output_dir is not None:
        output_path = Path(output_dir) / output_path.name
    return output_path


def convert_file(
    input_path: str | Path,
    output_format: Format | str,
    output_dir: str | Path | None = None,
) -> Path:
    """Convert a file into another format.

    The output is written next to the input (or into ``output_dir``)
    with the extension of the target format.

    Returns
    -------
    Path
        Path of the written file.
    """
    if not isinstance(output_format, Format):
        output_format = Format.parse(output_format)
    input_format = Format.from_path(input_path)

    if input_format == output_format:
        raise ConfigurationError(
            f"Input and output formats are the same ({input_format.value}), nothing to convert"
        )

    records = read_records(input_path, input_format)
    output_path = derive_output_path(input_path, output_format, output_dir)
    if output_dir is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    write_records(records, output_path, output_format)

    logger.info(
        "Converted %d records: %s -> %s",
        len(records),
        input_path,
        output_path,
    )
    return output_path
