"""Shared test fixtures for trustlots."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from trustlots.models.trust import BuyTransaction, ProceedRecord, SellTransaction
from trustlots.normalization.ledger import ProceedsLedger


def _buy(day: date, quantity: str, unit_price: str) -> BuyTransaction:
    return BuyTransaction(date=day, quantity=Decimal(quantity), unit_price=Decimal(unit_price))


def _sell(day: date, quantity: str, unit_price: str) -> SellTransaction:
    return SellTransaction(date=day, quantity=Decimal(quantity), unit_price=Decimal(unit_price))


def _make_proceeds(
    start: date,
    end: date,
    gold_ounces: str = "0.1",
    sales: dict[date, tuple[str, str]] | None = None,
) -> ProceedsLedger:
    """Build a gap-free proceeds ledger; ``sales`` maps day -> (ounces sold, proceeds)."""
    sales = sales or {}
    records = []
    day = start
    while day <= end:
        sold, proceeds = sales.get(day, ("0", "0"))
        records.append(
            ProceedRecord(
                date=day,
                gold_ounces=Decimal(gold_ounces),
                gold_ounces_sold=Decimal(sold),
                proceeds=Decimal(proceeds),
            )
        )
        day += timedelta(days=1)
    return ProceedsLedger(records)


@pytest.fixture
def buy():
    """Build a buy transaction from string quantity and price."""
    return _buy


@pytest.fixture
def sell():
    """Build a sell transaction from string quantity and price."""
    return _sell


@pytest.fixture
def make_proceeds():
    return _make_proceeds


@pytest.fixture
def day1() -> date:
    return date(2024, 1, 1)


@pytest.fixture
def year_of_proceeds() -> ProceedsLedger:
    """2024 through mid-2025 with no gold sales."""
    return _make_proceeds(date(2024, 1, 1), date(2025, 6, 30))


@pytest.fixture
def transactions_csv() -> str:
    return (
        "2024-01-02,buy,10,20.00\n"
        "2024-01-03,buy,5,21.00\n"
        "2024-03-01,sell,12,25.00\n"
    )


@pytest.fixture
def proceeds_csv() -> str:
    lines = []
    day = date(2024, 1, 1)
    while day <= date(2024, 4, 30):
        if day == date(2024, 2, 1):
            lines.append(f"{day.isoformat()},0.0950,0.0001,0.20")
        else:
            lines.append(f"{day.isoformat()},0.0950")
        day += timedelta(days=1)
    return "\n".join(lines) + "\n"
