"""Pytest configuration and fixtures."""

import pytest

from ypbank.models import Record, TxStatus, TxType


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def single_record() -> Record:
    """A single deposit record."""
    return Record(
        tx_id=42,
        tx_type=TxType.DEPOSIT,
        tx_status=TxStatus.SUCCESS,
        from_user_id=0,
        to_user_id=1000,
        amount=500,
        timestamp=1_634_000_000_000,
        description="Single record",
    )


@pytest.fixture
def sample_records() -> list[Record]:
    """Records covering every transaction type and status."""
    return [
        Record(
            tx_id=1,
            tx_type=TxType.DEPOSIT,
            tx_status=TxStatus.SUCCESS,
            from_user_id=2,
            to_user_id=1,
            amount=500,
            timestamp=999_999,
            description="Sample 1",
        ),
        Record(
            tx_id=2,
            tx_type=TxType.TRANSFER,
            tx_status=TxStatus.FAILURE,
            from_user_id=3,
            to_user_id=2,
            amount=123_500,
            timestamp=1_204_598,
            description="Sample 2",
        ),
        Record(
            tx_id=3,
            tx_type=TxType.WITHDRAWAL,
            tx_status=TxStatus.SUCCESS,
            from_user_id=2235,
            to_user_id=10,
            amount=546_400,
            timestamp=56_858,
            description="Sample 3",
        ),
        Record(
            tx_id=4,
            tx_type=TxType.DEPOSIT,
            tx_status=TxStatus.PENDING,
            from_user_id=2,
            to_user_id=1,
            amount=5001,
            timestamp=34_564_356,
            description="Sample 4",
        ),
        Record(
            tx_id=5,
            tx_type=TxType.DEPOSIT,
            tx_status=TxStatus.PENDING,
            from_user_id=2,
            to_user_id=1,
            amount=5500,
            timestamp=54_670_234,
            description="Sample 5",
        ),
    ]
