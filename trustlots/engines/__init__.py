"""Lot matching and cost-basis engines."""

from trustlots.engines.basis import CostBasisEngine
from trustlots.engines.lot_matcher import LotMatcher
from trustlots.engines.lot_validator import LotValidator
from trustlots.engines.reconciliation import GoldTrustReconciler
from trustlots.engines.tax_year import TaxYearAggregator

__all__ = [
    "CostBasisEngine",
    "GoldTrustReconciler",
    "LotMatcher",
    "LotValidator",
    "TaxYearAggregator",
]
