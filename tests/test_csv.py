"""Tests for the CSV format."""

import io
from dataclasses import replace

import pytest

from ypbank.exceptions import (
    ColumnCountMismatchError,
    ConvertingError,
    EmptyInputError,
    InvalidTxStatusError,
    InvalidTxTypeError,
    MissingKeyError,
    TextDecodeError,
    ValueOutOfRangeError,
    WrongKeyError,
)
from ypbank.formats.csv_format import HEADER, CsvRecords
from ypbank.models import U64_MAX, Record, TxStatus, TxType

ROW = "DEPOSIT,SUCCESS,1000,0,1634000000000,\"Single record\",42,500"


def _encode(records: list[Record]) -> str:
    buf = io.BytesIO()
    CsvRecords.encode(records, buf)
    return buf.getvalue().decode("utf-8")


def _decode(text: str | bytes) -> list[Record]:
    data = text.encode("utf-8") if isinstance(text, str) else text
    return list(CsvRecords.decode(io.BytesIO(data)).records)


class TestCsvEncode:
    """Tests for CSV output."""

    def test_header_and_row(self, single_record: Record) -> None:
        assert _encode([single_record]) == f"{HEADER}\n{ROW}\n"

    def test_header_columns(self) -> None:
        assert HEADER == "TX_TYPE,STATUS,TO_USER_ID,FROM_USER_ID,TIMESTAMP,DESCRIPTION,TX_ID,AMOUNT"

    def test_empty_record_set_writes_header(self) -> None:
        assert _encode([]) == f"{HEADER}\n"

    def test_description_quotes_are_doubled(self, single_record: Record) -> None:
        text = _encode([replace(single_record, description='a "b", c')])
        assert '"a ""b"", c"' in text


class TestCsvRoundTrip:
    """Tests for encode/decode round trips."""

    def test_sample_records(self, sample_records: list[Record]) -> None:
        assert _decode(_encode(sample_records)) == sample_records

    def test_unicode_descriptions(self, single_record: Record) -> None:
        records = [
            replace(single_record, description="Пополнение счёта"),
            replace(single_record, tx_id=2, description="Перевод другу"),
        ]
        assert _decode(_encode(records)) == records

    @pytest.mark.parametrize(
        "description",
        ["with, comma", 'with "quotes"', '"fully quoted"', "multi\nline", "  padded  ", ""],
    )
    def test_awkward_descriptions(self, single_record: Record, description: str) -> None:
        """Test descriptions that need quoting."""
        record = replace(single_record, description=description)
        assert _decode(_encode([record])) == [record]

    def test_u64_extremes(self, single_record: Record) -> None:
        record = replace(single_record, tx_id=U64_MAX, amount=U64_MAX, timestamp=0)
        assert _decode(_encode([record])) == [record]


class TestCsvDecode:
    """Tests for CSV input parsing."""

    def test_empty_stream(self) -> None:
        """Test that an empty file is an error."""
        with pytest.raises(EmptyInputError):
            _decode("")

    def test_header_only(self) -> None:
        assert _decode(f"{HEADER}\n") == []

    def test_blank_lines_skipped(self, single_record: Record) -> None:
        assert _decode(f"{HEADER}\n\n{ROW}\n\n   \n") == [single_record]

    def test_crlf_line_endings(self, single_record: Record) -> None:
        assert _decode(f"{HEADER}\r\n{ROW}\r\n") == [single_record]

    def test_whitespace_and_quotes_stripped(self, single_record: Record) -> None:
        row = ' DEPOSIT , "SUCCESS" , 1000 ,0, 1634000000000 ,"Single record", "42" ,500 '
        assert _decode(f"{HEADER}\n{row}\n") == [single_record]

    @pytest.mark.parametrize("token", ["DEPOSIT", "deposit", "Deposit", "dEpOsIt"])
    def test_tx_type_case_insensitive(self, token: str) -> None:
        row = ROW.replace("DEPOSIT", token)
        assert _decode(f"{HEADER}\n{row}\n")[0].tx_type == TxType.DEPOSIT

    @pytest.mark.parametrize("token", ["PENDING", "pending", "Pending"])
    def test_status_case_insensitive(self, token: str) -> None:
        row = ROW.replace("SUCCESS", token)
        assert _decode(f"{HEADER}\n{row}\n")[0].tx_status == TxStatus.PENDING

    def test_columns_matched_by_name(self, single_record: Record) -> None:
        header = "TX_ID,AMOUNT,TX_TYPE,STATUS,TO_USER_ID,FROM_USER_ID,TIMESTAMP,DESCRIPTION"
        row = '42,500,DEPOSIT,SUCCESS,1000,0,1634000000000,"Single record"'
        assert _decode(f"{header}\n{row}\n") == [single_record]

    def test_missing_description_column_defaults_to_empty(self) -> None:
        header = "TX_TYPE,STATUS,TO_USER_ID,FROM_USER_ID,TIMESTAMP,TX_ID,AMOUNT"
        row = "DEPOSIT,SUCCESS,1000,0,1634000000000,42,500"
        assert _decode(f"{header}\n{row}\n")[0].description == ""

    def test_invalid_utf8(self) -> None:
        with pytest.raises(TextDecodeError):
            _decode(HEADER.encode() + b"\n\xff\xfe\n")

    def test_unquoted_description_is_trimmed(self, single_record: Record) -> None:
        row = "DEPOSIT,SUCCESS,1000,0,1634000000000, Single record  ,42,500"
        assert _decode(f"{HEADER}\n{row}\n") == [single_record]

    def test_quoted_description_keeps_whitespace(self) -> None:
        row = 'DEPOSIT,SUCCESS,1000,0,1634000000000, "  Single record  "  ,42,500'
        assert _decode(f"{HEADER}\n{row}\n")[0].description == "  Single record  "


class TestCsvDecodeErrors:
    """Tests for malformed CSV input."""

    def test_invalid_header(self) -> None:
        """Test that a wrong header surfaces as a column mismatch."""
        with pytest.raises(ColumnCountMismatchError) as exc_info:
            _decode("WRONG_HEADER\nsomething,else\n")

        err = exc_info.value
        assert (err.line, err.expected, err.found) == (2, 1, 2)

    def test_too_few_columns_reports_line(self) -> None:
        """Test 1-based line numbers, counting blank lines."""
        bad_row = "DEPOSIT,SUCCESS,1000,0,1634000000000,42,500"
        text = f"{HEADER}\n\n{ROW}\n{bad_row}\n"

        with pytest.raises(ColumnCountMismatchError) as exc_info:
            _decode(text)

        err = exc_info.value
        assert err.line == 4
        assert err.expected == 8
        assert err.found == 7
        assert str(err) == "Error in row 4: expected 8 columns, found 7"

    def test_too_many_columns(self) -> None:
        with pytest.raises(ColumnCountMismatchError) as exc_info:
            _decode(f"{HEADER}\n{ROW},extra\n")
        assert (exc_info.value.line, exc_info.value.found) == (2, 9)

    def test_line_number_after_multiline_description(self) -> None:
        first = 'DEPOSIT,SUCCESS,1,0,1,"two\nlines",1,1'
        with pytest.raises(ColumnCountMismatchError) as exc_info:
            _decode(f"{HEADER}\n{first}\nDEPOSIT,SUCCESS\n")
        assert exc_info.value.line == 4

    def test_invalid_tx_type(self) -> None:
        with pytest.raises(InvalidTxTypeError):
            _decode(f"{HEADER}\n{ROW.replace('DEPOSIT', 'BONUS')}\n")

    def test_invalid_status(self) -> None:
        with pytest.raises(InvalidTxStatusError):
            _decode(f"{HEADER}\n{ROW.replace('SUCCESS', 'DONE')}\n")

    def test_missing_numeric_column(self) -> None:
        header = "TX_TYPE,STATUS,TO_USER_ID,FROM_USER_ID,TIMESTAMP,DESCRIPTION,TX_ID"
        row = 'DEPOSIT,SUCCESS,1000,0,1634000000000,"x",42'
        with pytest.raises(MissingKeyError) as exc_info:
            _decode(f"{header}\n{row}\n")
        assert exc_info.value.key == "AMOUNT"

    @pytest.mark.parametrize("value", ["abc", "-5", "1.5", "", str(U64_MAX + 1)])
    def test_unparseable_tx_id(self, value: str) -> None:
        row = ROW.replace(",42,", f",{value},")
        with pytest.raises(WrongKeyError) as exc_info:
            _decode(f"{HEADER}\n{row}\n")
        assert exc_info.value.key == "TX_ID"
        assert str(exc_info.value) == "Error parsing key TX_ID"


class TestCsvEncodeErrors:
    """Tests for values that cannot be encoded."""

    @pytest.mark.parametrize("field", ["tx_id", "from_user_id", "to_user_id", "amount", "timestamp"])
    def test_negative_integer(self, single_record: Record, field: str) -> None:
        with pytest.raises(ValueOutOfRangeError) as exc_info:
            _encode([replace(single_record, **{field: -1})])
        assert exc_info.value.field == field

    def test_amount_above_u64(self, single_record: Record) -> None:
        with pytest.raises(ValueOutOfRangeError):
            _encode([replace(single_record, amount=U64_MAX + 1)])

    def test_failed_encode_writes_nothing(self, sample_records: list[Record]) -> None:
        buf = io.BytesIO()
        with pytest.raises(ValueOutOfRangeError):
            CsvRecords.encode(sample_records + [replace(sample_records[0], tx_id=-1)], buf)
        assert buf.getvalue() == b""

    def test_unencodable_description(self, single_record: Record) -> None:
        with pytest.raises(ConvertingError):
            _encode([replace(single_record, description="lone \udc80 surrogate")])

    def test_enum_values_given_as_strings(self, single_record: Record) -> None:
        record = replace(single_record, tx_type="DEPOSIT", tx_status="SUCCESS")
        assert _encode([record]) == f"{HEADER}\n{ROW}\n"

    def test_unknown_status_value(self, single_record: Record) -> None:
        with pytest.raises(ValueOutOfRangeError) as exc_info:
            _encode([replace(single_record, tx_status="DONE")])
        assert exc_info.value.field == "tx_status"
