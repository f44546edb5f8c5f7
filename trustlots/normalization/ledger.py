"""Validated, date-ordered ledgers built from raw input rows."""

from collections.abc import Iterable, Iterator, Sequence
from datetime import date, timedelta
from decimal import Decimal, InvalidOperation
from itertools import pairwise

from trustlots.exceptions import DataError
from trustlots.models.enums import TransactionType
from trustlots.models.trust import BuyTransaction, ProceedRecord, SellTransaction, Transaction

ONE_DAY = timedelta(days=1)

NumberedRow = tuple[int, Sequence[str]]


def _parse_date(value: str, line: int) -> date:
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        raise DataError(f"invalid date {value.strip()!r}", line) from None


def _parse_decimal(value: str, field: str, line: int) -> Decimal:
    stripped = value.strip()
    try:
        parsed = Decimal(stripped)
    except InvalidOperation:
        raise DataError(f"invalid {field} {stripped!r}", line) from None
    if not parsed.is_finite():
        raise DataError(f"invalid {field} {stripped!r}", line)
    return parsed


def _check_transaction_order(previous: date, current: date, line: int | None = None) -> None:
    if previous > current:
        raise DataError(
            f"dates out of order in transactions, starting at {current.isoformat()}", line
        )


def _check_next_day(previous: date, current: date, line: int | None = None) -> None:
    if current != previous + ONE_DAY:
        raise DataError(
            f"unexpected proceeds date: {previous.isoformat()} "
            f"followed by {current.isoformat()}",
            line,
        )


class TransactionLedger:
    """Buy and sell transactions in chronological order.

    Raises:
        DataError: If the transactions are not in non-decreasing date order.
    """

    def __init__(self, transactions: Iterable[Transaction] = ()):
        self._transactions: tuple[Transaction, ...] = tuple(transactions)
        for previous, current in pairwise(self._transactions):
            _check_transaction_order(previous.date, current.date)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[str]]) -> "TransactionLedger":
        """Validate ``date,type,quantity,unit_price`` rows, numbered from 1."""
        return cls.from_numbered_rows(enumerate(rows, start=1))

    @classmethod
    def from_numbered_rows(cls, rows: Iterable[NumberedRow]) -> "TransactionLedger":
        """Validate ``(line, row)`` pairs.

        Raises:
            DataError: On the first row that breaks a rule, citing its line.
                Nothing is returned for the rows that did parse.
        """
        transactions: list[Transaction] = []
        last_date: date | None = None

        for line, row in rows:
            if len(row) != 4:
                raise DataError(
                    f"wrong number of entries on transaction row: {','.join(row)}", line
                )

            tx_date = _parse_date(row[0], line)
            if last_date is not None:
                _check_transaction_order(last_date, tx_date, line)
            last_date = tx_date

            raw_type = row[1].strip()
            if raw_type not in (TransactionType.BUY, TransactionType.SELL):
                raise DataError(f"invalid transaction type {raw_type!r}", line)

            quantity = _parse_decimal(row[2], "share quantity", line)
            if quantity <= 0:
                raise DataError(f"non-positive share quantity {quantity}", line)

            unit_price = _parse_decimal(row[3], "price per share", line)
            if unit_price <= 0:
                raise DataError(f"non-positive price per share {unit_price}", line)

            variant = BuyTransaction if raw_type == TransactionType.BUY else SellTransaction
            transactions.append(variant(date=tx_date, quantity=quantity, unit_price=unit_price))

        return cls(transactions)

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return self._transactions

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    def __getitem__(self, index: int) -> Transaction:
        return self._transactions[index]


class ProceedsLedger:
    """Daily gold-per-share records with no gaps between consecutive days.

    Raises:
        DataError: If a record is not dated exactly one day after the one
            before it.
    """

    def __init__(self, records: Iterable[ProceedRecord] = ()):
        self._records: tuple[ProceedRecord, ...] = tuple(records)
        # Lookups index by day offset, which only holds for a gap-free run.
        for previous, current in pairwise(self._records):
            _check_next_day(previous.date, current.date)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[str]]) -> "ProceedsLedger":
        """Validate ``date,gold_ounces[,gold_ounces_sold,proceeds]`` rows, numbered from 1."""
        return cls.from_numbered_rows(enumerate(rows, start=1))

    @classmethod
    def from_numbered_rows(cls, rows: Iterable[NumberedRow]) -> "ProceedsLedger":
        records: list[ProceedRecord] = []
        last_date: date | None = None

        for line, row in rows:
            if len(row) not in (2, 4):
                raise DataError(f"wrong number of entries on proceeds row: {','.join(row)}", line)

            record_date = _parse_date(row[0], line)
            if last_date is not None:
                _check_next_day(last_date, record_date, line)
            last_date = record_date

            gold_ounces = _parse_decimal(row[1], "gold ounces per share", line)
            if gold_ounces <= 0:
                raise DataError(f"non-positive gold ounces per share {gold_ounces}", line)

            gold_ounces_sold = Decimal("0")
            proceeds = Decimal("0")
            if len(row) == 4:
                gold_ounces_sold = _parse_decimal(row[2], "gold ounces sold", line)
                if gold_ounces_sold < 0:
                    raise DataError(f"negative gold ounces sold {gold_ounces_sold}", line)
                proceeds = _parse_decimal(row[3], "proceeds per share", line)
                if proceeds < 0:
                    raise DataError(f"negative proceeds per share {proceeds}", line)

            records.append(
                ProceedRecord(
                    date=record_date,
                    gold_ounces=gold_ounces,
                    gold_ounces_sold=gold_ounces_sold,
                    proceeds=proceeds,
                )
            )

        return cls(records)

    @property
    def records(self) -> tuple[ProceedRecord, ...]:
        return self._records

    @property
    def first_date(self) -> date | None:
        return self._records[0].date if self._records else None

    @property
    def last_date(self) -> date | None:
        return self._records[-1].date if self._records else None

    def _index_of(self, day: date) -> int:
        return (day - self._records[0].date).days

    def record_for(self, day: date) -> ProceedRecord | None:
        """Return the record dated exactly ``day``, or None if outside the data."""
        if not self._records:
            return None
        index = self._index_of(day)
        if 0 <= index < len(self._records):
            return self._records[index]
        return None

    def records_between(self, start: date, end: date | None = None) -> list[ProceedRecord]:
        """Return records dated ``start`` through ``end`` inclusive.

        ``end=None`` runs to the last record.
        """
        if not self._records:
            return []
        first = max(self._index_of(start), 0)
        if end is None:
            return list(self._records[first:])
        last = self._index_of(end)
        if last < first:
            return []
        return list(self._records[first : last + 1])

    def __iter__(self) -> Iterator[ProceedRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index: int) -> ProceedRecord:
        return self._records[index]
