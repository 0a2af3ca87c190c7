"""Custom exception hierarchy for ypbank."""


class YPBankError(Exception):
    """Base exception for all ypbank errors."""


class ParsingError(YPBankError):
    """Raised when input data cannot be decoded into records."""


class InvalidMagicHeaderError(ParsingError):
    """Raised when a binary frame does not start with the magic header."""

    def __init__(self, message: str = "Invalid magic header") -> None:
        super().__init__(message)


class CorruptRecordError(ParsingError):
    """Raised when a binary frame is truncated or its lengths are inconsistent."""

    def __init__(self, message: str = "Corrupted record data") -> None:
        super().__init__(message)


class InvalidEnumValueError(ParsingError):
    """Raised when a transaction type or status value is not recognized."""


class InvalidTxTypeError(InvalidEnumValueError):
    """Raised for an unknown or missing transaction type."""

    def __init__(self, message: str = "Invalid transaction type") -> None:
        super().__init__(message)


class InvalidTxStatusError(InvalidEnumValueError):
    """Raised for an unknown or missing transaction status."""

    def __init__(self, message: str = "Invalid transaction status") -> None:
        super().__init__(message)


class EmptyInputError(ParsingError):
    """Raised when a format that requires a header receives no data."""

    def __init__(self, message: str = "File is empty") -> None:
        super().__init__(message)


class ColumnCountMismatchError(ParsingError):
    """Raised when a CSV row has a different number of fields than the header."""

    def __init__(self, line: int, expected: int, found: int) -> None:
        self.line = line
        self.expected = expected
        self.found = found
        super().__init__(f"Error in row {line}: expected {expected} columns, found {found}")


class MissingKeyError(ParsingError):
    """Raised when a required field is absent."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Missing key {key}")


class WrongKeyError(ParsingError):
    """Raised when a field is present but cannot be parsed."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Error parsing key {key}")


class TextDecodeError(ParsingError):
    """Raised when input bytes are not valid in the expected text encoding."""


class ConvertingError(YPBankError):
    """Raised when records cannot be encoded into a format."""


class ValueOutOfRangeError(ConvertingError):
    """Raised when a record field does not fit its wire representation."""

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Value {value!r} out of range for field {field}")


class StreamIOError(YPBankError):
    """Raised when the underlying stream fails to read or write."""


class ConfigurationError(YPBankError):
    """Raised when configuration is invalid or missing."""


class UnsupportedFormatError(ConfigurationError):
    """Raised when a file format cannot be determined or is not supported."""
