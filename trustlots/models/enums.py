"""Enumerations for trustlots."""

from enum import StrEnum


class TransactionType(StrEnum):
    BUY = "buy"
    SELL = "sell"


class HoldingPeriod(StrEnum):
    SHORT_TERM = "short"
    LONG_TERM = "long"
