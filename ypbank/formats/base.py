"""Converter contract shared by every record format."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO, ClassVar, Iterable, TypeVar

from ypbank.exceptions import StreamIOError, TextDecodeError
from ypbank.models import Format, Record

C = TypeVar("C", bound="Converter")

TEXT_ENCODING = "utf-8"


class Converter(ABC):
    """Uniform decode/encode interface implemented by each format.

    Instances own the records produced by a single :meth:`decode` call.
    Decoding either returns every record of the stream or raises; no
    partially decoded set is ever exposed.
    """

    format: ClassVar[Format]

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._records: tuple[Record, ...] = tuple(records)

    @property
    def records(self) -> tuple[Record, ...]:
        """Read-only view of the decoded records."""
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._records)} records)"

    @classmethod
    @abstractmethod
    def decode(cls: type[C], stream: BinaryIO) -> C:
        """Read and parse all records from a binary stream."""

    @classmethod
    @abstractmethod
    def encode(cls, records: Iterable[Record], stream: BinaryIO) -> None:
        """Write records, in order, to a binary stream.

        The stream is neither flushed nor closed.
        """


def read_all(stream: BinaryIO) -> bytes:
    """Read a stream to its end, wrapping I/O failures."""
    try:
        return stream.read()
    except OSError as exc:
        raise StreamIOError(f"Failed to read input stream: {exc}") from exc


def read_text(stream: BinaryIO) -> str:
    """Read a stream to its end and decode it as UTF-8."""
    data = read_all(stream)
    try:
        return data.decode(TEXT_ENCODING)
    except UnicodeDecodeError as exc:
        raise TextDecodeError(f"Input is not valid {TEXT_ENCODING}: {exc}") from exc


def write_bytes(stream: BinaryIO, data: bytes) -> None:
    """Write bytes to a stream, wrapping I/O failures."""
    try:
        stream.write(data)
    except OSError as exc:
        raise StreamIOError(f"Failed to write output stream: {exc}") from exc
