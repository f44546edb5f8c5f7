"""Report generation for trustlots."""

from trustlots.reports.capital_changes import CapitalChangeReportGenerator
from trustlots.reports.full_report import FullReportGenerator
from trustlots.reports.lot_listing import LotReportGenerator
from trustlots.reports.tax_summary import TaxYearReportGenerator

__all__ = [
    "CapitalChangeReportGenerator",
    "FullReportGenerator",
    "LotReportGenerator",
    "TaxYearReportGenerator",
]
