"""Core transaction, proceeds, lot, and capital change models."""

from datetime import date
from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from trustlots.arithmetic import exact_context
from trustlots.models.enums import HoldingPeriod, TransactionType

LONG_TERM_DAYS = 365


class _TransactionBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: date
    quantity: Decimal = Field(gt=0)
    unit_price: Decimal = Field(gt=0)

    @property
    def extended_price(self) -> Decimal:
        with exact_context():
            return self.quantity * self.unit_price


class BuyTransaction(_TransactionBase):
    type: Literal[TransactionType.BUY] = TransactionType.BUY


class SellTransaction(_TransactionBase):
    type: Literal[TransactionType.SELL] = TransactionType.SELL


Transaction = Annotated[BuyTransaction | SellTransaction, Field(discriminator="type")]


class ProceedRecord(BaseModel):
    """Trust-level holdings and bullion sales for one calendar day, per share."""

    model_config = ConfigDict(frozen=True)

    date: date
    gold_ounces: Decimal = Field(gt=0)
    gold_ounces_sold: Decimal = Field(default=Decimal("0"), ge=0)
    proceeds: Decimal = Field(default=Decimal("0"), ge=0)

    @property
    def has_sale(self) -> bool:
        return self.gold_ounces_sold > 0


class Lot(BaseModel):
    """Shares with one buy origin and at most one sell origin."""

    model_config = ConfigDict(frozen=True)

    quantity: Decimal = Field(gt=0)
    buy_transaction: BuyTransaction
    sell_transaction: SellTransaction | None = None

    @property
    def buy_date(self) -> date:
        return self.buy_transaction.date

    @property
    def sell_date(self) -> date | None:
        if self.sell_transaction is None:
            return None
        return self.sell_transaction.date

    @property
    def is_open(self) -> bool:
        return self.sell_transaction is None

    @property
    def buy_price(self) -> Decimal:
        # Full extended price of the originating buy, not scaled to this lot.
        return self.buy_transaction.extended_price

    @property
    def sell_price(self) -> Decimal | None:
        if self.sell_transaction is None:
            return None
        return self.sell_transaction.extended_price

    @property
    def prorated_buy_price(self) -> Decimal:
        with exact_context():
            return self.buy_transaction.unit_price * self.quantity

    @property
    def prorated_sell_price(self) -> Decimal | None:
        if self.sell_transaction is None:
            return None
        with exact_context():
            return self.sell_transaction.unit_price * self.quantity


class CapitalChange(BaseModel):
    """A single taxable event: shares sold, or gold sold by the trust."""

    model_config = ConfigDict(frozen=True)

    buy_price: Decimal
    sell_price: Decimal
    buy_date: date
    sell_date: date
    source: Lot | None = None

    @property
    def amount(self) -> Decimal:
        with exact_context():
            return self.sell_price - self.buy_price

    @property
    def cost(self) -> Decimal:
        return self.buy_price

    @property
    def proceeds(self) -> Decimal:
        return self.sell_price

    @property
    def is_gain(self) -> bool:
        return self.amount > 0

    @property
    def is_loss(self) -> bool:
        return self.amount < 0

    @property
    def holding_days(self) -> int:
        return (self.sell_date - self.buy_date).days

    @property
    def short_term(self) -> bool:
        return self.holding_days < LONG_TERM_DAYS

    @property
    def long_term(self) -> bool:
        return not self.short_term

    @property
    def holding_period(self) -> HoldingPeriod:
        return HoldingPeriod.SHORT_TERM if self.short_term else HoldingPeriod.LONG_TERM
