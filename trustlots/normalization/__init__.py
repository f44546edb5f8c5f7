"""Validated transaction and proceeds ledgers."""

from trustlots.normalization.ledger import ProceedsLedger, TransactionLedger

__all__ = ["ProceedsLedger", "TransactionLedger"]
