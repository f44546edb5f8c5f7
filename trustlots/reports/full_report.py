"""Combined report: lots, capital changes, and tax year totals."""

from trustlots.models.reports import ReconciliationResult
from trustlots.reports.formatting import build_environment


class FullReportGenerator:
    """Renders every section of a reconciliation run, in pipeline order."""

    def __init__(self) -> None:
        self.env = build_environment()

    def render(self, result: ReconciliationResult) -> str:
        template = self.env.get_template("full_report.txt")
        return template.render(
            lots=result.lots,
            changes=result.changes,
            tax_years=result.tax_years,
        )
