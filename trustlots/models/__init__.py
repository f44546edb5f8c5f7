"""Data models for trustlots."""

from trustlots.models.enums import HoldingPeriod, TransactionType
from trustlots.models.reports import ReconciliationResult, TaxYearRecord, TermTotals
from trustlots.models.trust import (
    BuyTransaction,
    CapitalChange,
    Lot,
    ProceedRecord,
    SellTransaction,
    Transaction,
)

__all__ = [
    "BuyTransaction",
    "CapitalChange",
    "HoldingPeriod",
    "Lot",
    "ProceedRecord",
    "ReconciliationResult",
    "SellTransaction",
    "TaxYearRecord",
    "TermTotals",
    "Transaction",
    "TransactionType",
]
