"""Transaction record generator for sample files and tests."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from ypbank.convert import write_records
from ypbank.generators.base import BaseGenerator
from ypbank.models import U64_MAX, Format, Record, TxStatus, TxType

logger = logging.getLogger(__name__)


class RecordGenerator(BaseGenerator):
    """Generate synthetic transaction records."""

    TX_TYPES = list(TxType)
    TX_TYPE_WEIGHTS = [0.45, 0.20, 0.35]

    TX_STATUSES = list(TxStatus)
    TX_STATUS_WEIGHTS = [0.85, 0.05, 0.10]

    # 2021-01-01 .. 2024-01-01, milliseconds
    TIMESTAMP_RANGE = (1_609_459_200_000, 1_704_067_200_000)

    def __init__(self, seed: int | None = None, locale: str = "en_US", start_id: int = 1) -> None:
        super().__init__(seed, locale)
        self._next_id = start_id

    def generate(self) -> Record:
        """Generate a single record.

        Deposits come from user 0 and withdrawals go to user 0, the
        bank itself. Descriptions never contain double quotes, so every
        generated record survives a round trip through all formats.
        """
        tx_type = self.random.choices(self.TX_TYPES, weights=self.TX_TYPE_WEIGHTS, k=1)[0]
        tx_status = self.random.choices(self.TX_STATUSES, weights=self.TX_STATUS_WEIGHTS, k=1)[0]

        user_id = self.fake.random_int(1, 1_000_000)
        counterparty_id = self.fake.random_int(1, 1_000_000)
        if tx_type == TxType.DEPOSIT:
            from_user_id, to_user_id = 0, user_id
        elif tx_type == TxType.WITHDRAWAL:
            from_user_id, to_user_id = user_id, 0
        else:
            from_user_id, to_user_id = user_id, counterparty_id

        # Amount in cents, Pareto distributed (many small, few large)
        amount = int(min(self.random.paretovariate(1.5) * 5000, 50_000_000))

        record = Record(
            tx_id=self._next_id,
            tx_type=tx_type,
            tx_status=tx_status,
            from_user_id=from_user_id,
            to_user_id=to_user_id,
            amount=amount,
            timestamp=self.fake.random_int(*self.TIMESTAMP_RANGE),
            description=self._generate_description(tx_type),
        )
        self._next_id = self._next_id + 1 if self._next_id < U64_MAX else 0
        return record

    def generate_batch(self, count: int) -> Iterator[Record]:
        """Generate ``count`` records with consecutive transaction ids."""
        for _ in range(count):
            yield self.generate()

    def _generate_description(self, tx_type: TxType) -> str:
        if tx_type == TxType.DEPOSIT:
            text = f"Deposit via {self.fake.company()}"
        elif tx_type == TxType.WITHDRAWAL:
            text = f"ATM withdrawal in {self.fake.city()}"
        else:
            text = f"Transfer to {self.fake.name()}"
        return text.replace('"', "")


def write_sample_files(directory: str | Path, records: Iterable[Record]) -> dict[Format, Path]:
    """Write the same records as ``sample.bin``, ``sample.csv`` and ``sample.txt``.

    Returns
    -------
    dict[Format, Path]
        Written file per format.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    records = list(records)

    paths = {}
    for fmt in Format:
        path = directory / f"sample.{fmt.value}"
        write_records(records, path, fmt)
        paths[fmt] = path

    logger.info("Wrote %d sample records to %s", len(records), directory)
    return paths
