"""Reconciliation pipeline: transactions and trust proceeds to tax-year totals.

Steps:
1. Break transactions into FIFO lots
2. Verify the lots against the transactions
3. Adjust each lot's basis for the trust's gold sales, emitting capital changes
4. Total the changes by tax year and holding period
"""

import logging
from pathlib import Path

from trustlots.config import Settings
from trustlots.engines.basis import CostBasisEngine
from trustlots.engines.lot_matcher import LotMatcher
from trustlots.engines.lot_validator import LotValidator
from trustlots.engines.tax_year import TaxYearAggregator
from trustlots.ingestion.csv_files import load_proceeds, load_transactions
from trustlots.models.reports import ReconciliationResult
from trustlots.normalization.ledger import ProceedsLedger, TransactionLedger

logger = logging.getLogger(__name__)


class GoldTrustReconciler:
    """Runs the full lot and cost-basis pipeline for one shareholder."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()
        self.lot_matcher = LotMatcher()
        self.lot_validator = LotValidator()
        self.basis_engine = CostBasisEngine(
            prorate_lot_prices=self.settings.prorate_lot_prices,
            precision=self.settings.decimal_precision,
        )
        self.aggregator = TaxYearAggregator()

    def run(
        self, transactions: TransactionLedger, proceeds: ProceedsLedger
    ) -> ReconciliationResult:
        logger.info(
            "Reconciling %d transaction(s) against %d proceeds record(s)",
            len(transactions),
            len(proceeds),
        )
        lots = self.lot_matcher.break_into_lots(transactions)
        self.lot_validator.check(lots, transactions)

        changes = self.basis_engine.calculate_gold_sales(lots, proceeds)
        tax_years = self.aggregator.categorize_changes(changes)
        logger.info("Summarized %d tax year(s)", len(tax_years))

        return ReconciliationResult(lots=lots, changes=changes, tax_years=tax_years)

    def run_files(self, transactions_path: Path, proceeds_path: Path) -> ReconciliationResult:
        """Load both CSV files and run the pipeline."""
        transactions = load_transactions(transactions_path)
        proceeds = load_proceeds(proceeds_path)
        return self.run(transactions, proceeds)
