"""Aggregated output models."""

from decimal import Decimal

from pydantic import BaseModel, Field

from trustlots.arithmetic import exact_context
from trustlots.models.enums import HoldingPeriod
from trustlots.models.trust import CapitalChange, Lot


class TermTotals(BaseModel):
    proceeds: Decimal = Decimal("0")
    cost: Decimal = Decimal("0")

    @property
    def net(self) -> Decimal:
        with exact_context():
            return self.proceeds - self.cost


class TaxYearRecord(BaseModel):
    year: int
    short: TermTotals = Field(default_factory=TermTotals)
    long: TermTotals = Field(default_factory=TermTotals)

    def term(self, holding_period: HoldingPeriod) -> TermTotals:
        if holding_period == HoldingPeriod.SHORT_TERM:
            return self.short
        return self.long


class ReconciliationResult(BaseModel):
    """Everything one run produces, in pipeline order."""

    lots: list[Lot]
    changes: list[CapitalChange]
    tax_years: dict[int, TaxYearRecord]
