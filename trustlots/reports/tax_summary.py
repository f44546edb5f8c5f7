"""Per-tax-year summary report generator."""

from trustlots.models.reports import TaxYearRecord
from trustlots.reports.formatting import build_environment


class TaxYearReportGenerator:
    """Generates short/long-term proceeds and cost totals for each year."""

    def __init__(self) -> None:
        self.env = build_environment()

    def render(self, tax_years: dict[int, TaxYearRecord]) -> str:
        """Render tax year summary report."""
        template = self.env.get_template("tax_years.txt")
        return template.render(tax_years=tax_years)
