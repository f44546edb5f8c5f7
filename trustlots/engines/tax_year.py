"""Groups capital changes into per-year short- and long-term totals."""

from collections.abc import Iterable

from trustlots.arithmetic import exact_context
from trustlots.models.reports import TaxYearRecord
from trustlots.models.trust import CapitalChange


class TaxYearAggregator:
    """Sums proceeds and cost by sale year and holding period."""

    def categorize_changes(self, changes: Iterable[CapitalChange]) -> dict[int, TaxYearRecord]:
        """Return year -> totals, years ascending.

        Proceeds and cost are summed separately rather than netted, matching
        how they are reported on Schedule D. The sums are exact.
        """
        years: dict[int, TaxYearRecord] = {}
        with exact_context():
            for change in changes:
                bucket = self._year_record(years, change.sell_date.year).term(
                    change.holding_period
                )
                bucket.proceeds += change.proceeds
                bucket.cost += change.cost
        return dict(sorted(years.items()))

    @staticmethod
    def _year_record(years: dict[int, TaxYearRecord], year: int) -> TaxYearRecord:
        """Get the record for ``year``, creating a zeroed one on first use."""
        record = years.get(year)
        if record is None:
            record = TaxYearRecord(year=year)
            years[year] = record
        return record
