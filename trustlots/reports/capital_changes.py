"""Capital change listing report generator."""

from trustlots.models.trust import CapitalChange
from trustlots.reports.formatting import build_environment


class CapitalChangeReportGenerator:
    """Lists cost, proceeds, dates, and term for every taxable event."""

    def __init__(self) -> None:
        self.env = build_environment()

    def render(self, changes: list[CapitalChange]) -> str:
        """Render capital change listing."""
        template = self.env.get_template("capital_changes.txt")
        return template.render(changes=changes)
