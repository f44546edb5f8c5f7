"""FIFO lot listing report generator."""

from trustlots.models.trust import Lot
from trustlots.reports.formatting import build_environment


class LotReportGenerator:
    """Lists each lot's quantity, buy date, and sell date ("-" when still held)."""

    def __init__(self) -> None:
        self.env = build_environment()

    def render(self, lots: list[Lot]) -> str:
        template = self.env.get_template("lots.txt")
        return template.render(lots=lots)
