"""Tests for transaction and proceeds ledger validation."""

from datetime import date
from decimal import Decimal

import pytest

from trustlots.exceptions import DataError
from trustlots.models.enums import TransactionType
from trustlots.models.trust import BuyTransaction, ProceedRecord, SellTransaction
from trustlots.normalization.ledger import ProceedsLedger, TransactionLedger


class TestTransactionLedger:
    def test_parses_buys_and_sells(self):
        ledger = TransactionLedger.from_rows(
            [
                ["2024-01-02", "buy", "10", "180.25"],
                ["2024-01-02", "buy", "0.5", "180.30"],
                ["2024-02-01", "sell", "3.25", "190\n"],
            ]
        )
        assert len(ledger) == 3
        assert isinstance(ledger[0], BuyTransaction)
        assert isinstance(ledger[2], SellTransaction)
        assert ledger[2].type == TransactionType.SELL
        assert ledger[0].extended_price == Decimal("1802.50")
        assert ledger[2].unit_price == Decimal("190")
        assert [tx.date for tx in ledger] == [
            date(2024, 1, 2),
            date(2024, 1, 2),
            date(2024, 2, 1),
        ]

    @pytest.mark.parametrize(
        "row, message",
        [
            (["2024-01-02", "buy", "10"], "wrong number of entries"),
            (["2024-01-02", "buy", "10", "1", "x"], "wrong number of entries"),
            (["2024-13-02", "buy", "10", "1"], "invalid date"),
            (["2024-01-02", "transfer", "10", "1"], "invalid transaction type"),
            (["2024-01-02", "BUY", "10", "1"], "invalid transaction type"),
            (["2024-01-02", "buy", "0", "1"], "non-positive share quantity"),
            (["2024-01-02", "buy", "-1", "1"], "non-positive share quantity"),
            (["2024-01-02", "buy", "ten", "1"], "invalid share quantity"),
            (["2024-01-02", "buy", "NaN", "1"], "invalid share quantity"),
            (["2024-01-02", "sell", "1", "0"], "non-positive price per share"),
        ],
    )
    def test_invalid_rows(self, row: list[str], message: str):
        with pytest.raises(DataError, match=message):
            TransactionLedger.from_rows([row])

    def test_dates_out_of_order(self):
        rows = [
            ["2024-01-05", "buy", "1", "10"],
            ["2024-01-04", "sell", "1", "10"],
        ]
        with pytest.raises(DataError, match="dates out of order") as exc_info:
            TransactionLedger.from_rows(rows)
        assert exc_info.value.line == 2

    def test_error_reports_line_number(self):
        rows = [
            ["2024-01-05", "buy", "1", "10"],
            ["2024-01-06", "buy", "1", "10"],
            ["2024-01-07", "hold", "1", "10"],
        ]
        with pytest.raises(DataError, match="^line 3: "):
            TransactionLedger.from_rows(rows)

    def test_numbered_rows_keep_their_line(self):
        rows = [
            (1, ["2024-01-05", "buy", "1", "10"]),
            (4, ["2024-01-06", "buy", "1", "-10"]),
        ]
        with pytest.raises(DataError, match="^line 4: non-positive price") as exc_info:
            TransactionLedger.from_numbered_rows(rows)
        assert exc_info.value.line == 4

    def test_constructor_accepts_same_day_transactions(self):
        day = date(2024, 1, 2)
        ledger = TransactionLedger(
            [
                BuyTransaction(date=day, quantity=Decimal("1"), unit_price=Decimal("10")),
                SellTransaction(date=day, quantity=Decimal("1"), unit_price=Decimal("11")),
            ]
        )
        assert len(ledger) == 2

    def test_constructor_rejects_unordered_transactions(self):
        later = BuyTransaction(
            date=date(2024, 1, 5), quantity=Decimal("1"), unit_price=Decimal("10")
        )
        earlier = SellTransaction(
            date=date(2024, 1, 4), quantity=Decimal("1"), unit_price=Decimal("10")
        )
        with pytest.raises(DataError, match="dates out of order") as exc_info:
            TransactionLedger([later, earlier])
        assert exc_info.value.line is None


class TestProceedsLedger:
    def test_two_and_four_field_rows(self):
        ledger = ProceedsLedger.from_rows(
            [
                ["2024-01-01", "0.0951"],
                ["2024-01-02", "0.0951", "0.0001", "0.2012"],
                ["2024-01-03", "0.0950"],
            ]
        )
        assert len(ledger) == 3
        assert ledger[0].gold_ounces_sold == Decimal("0")
        assert ledger[0].proceeds == Decimal("0")
        assert ledger[1].gold_ounces_sold == Decimal("0.0001")
        assert ledger[1].proceeds == Decimal("0.2012")
        assert ledger[1].has_sale
        assert ledger.first_date == date(2024, 1, 1)
        assert ledger.last_date == date(2024, 1, 3)

    @pytest.mark.parametrize(
        "rows, message",
        [
            ([["2024-01-01", "0.09", "0.1"]], "wrong number of entries"),
            ([["2024-01-01"]], "wrong number of entries"),
            ([["2024-01-01", "0"]], "non-positive gold ounces"),
            ([["2024-01-01", "0.09", "-0.1", "1"]], "negative gold ounces sold"),
            ([["2024-01-01", "0.09", "0.1", "-1"]], "negative proceeds"),
            ([["2024-01-01", "0.09"], ["2024-01-03", "0.09"]], "unexpected proceeds date"),
            ([["2024-01-01", "0.09"], ["2024-01-01", "0.09"]], "unexpected proceeds date"),
            ([["2024-01-02", "0.09"], ["2024-01-01", "0.09"]], "unexpected proceeds date"),
        ],
    )
    def test_invalid_rows(self, rows: list[list[str]], message: str):
        with pytest.raises(DataError, match=message):
            ProceedsLedger.from_rows(rows)

    def test_crosses_month_and_leap_day(self):
        ledger = ProceedsLedger.from_rows(
            [["2024-02-28", "0.09"], ["2024-02-29", "0.09"], ["2024-03-01", "0.09"]]
        )
        assert len(ledger) == 3

    @pytest.mark.parametrize(
        "days",
        [
            [date(2024, 1, 1), date(2024, 1, 5)],
            [date(2024, 1, 2), date(2024, 1, 1)],
            [date(2024, 1, 1), date(2024, 1, 1)],
        ],
    )
    def test_constructor_rejects_gaps_and_repeats(self, days: list[date]):
        records = [ProceedRecord(date=day, gold_ounces=Decimal("0.09")) for day in days]
        with pytest.raises(DataError, match="unexpected proceeds date"):
            ProceedsLedger(records)

    def test_constructor_accepts_contiguous_records(self):
        records = [
            ProceedRecord(date=date(2024, 1, day), gold_ounces=Decimal("0.09")) for day in (1, 2, 3)
        ]
        ledger = ProceedsLedger(records)
        assert ledger.record_for(date(2024, 1, 2)) is records[1]


class TestProceedsLookup:
    def setup_method(self):
        self.ledger = ProceedsLedger.from_rows(
            [[f"2024-01-{day:02d}", "0.09"] for day in range(1, 11)]
        )

    def test_record_for(self):
        assert self.ledger.record_for(date(2024, 1, 4)).date == date(2024, 1, 4)
        assert self.ledger.record_for(date(2023, 12, 31)) is None
        assert self.ledger.record_for(date(2024, 1, 11)) is None

    def test_records_between(self):
        dates = [r.date.day for r in self.ledger.records_between(date(2024, 1, 3), date(2024, 1, 5))]
        assert dates == [3, 4, 5]

    def test_records_between_open_ended(self):
        dates = [r.date.day for r in self.ledger.records_between(date(2024, 1, 8))]
        assert dates == [8, 9, 10]

    def test_records_between_clamps_to_data(self):
        records = self.ledger.records_between(date(2023, 12, 1), date(2024, 2, 1))
        assert len(records) == 10

    def test_empty_window(self):
        assert self.ledger.records_between(date(2024, 1, 5), date(2024, 1, 4)) == []
        assert self.ledger.records_between(date(2024, 2, 1)) == []

    def test_empty_ledger(self):
        empty = ProceedsLedger()
        assert empty.record_for(date(2024, 1, 1)) is None
        assert empty.records_between(date(2024, 1, 1)) == []
        assert empty.first_date is None
