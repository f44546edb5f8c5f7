"""Cost-basis adjustment engine for grantor-trust gold shares.

The trust sells a little gold every so often to pay its expenses. Each sale is
a taxable event for every share outstanding that day, so each lot gets one
capital change per interim sale plus one for the shares themselves if sold.
The steps follow the trust sponsor's published shareholder tax worksheet:

1. Gold bought with the lot = ounces per share on the buy date x shares.
2. Gold sold for the lot = ounces sold per share x shares.
3. Cost of gold sold = gold sold x (lot cost / gold bought).
4. Gain or loss = proceeds of gold sold - cost of gold sold.
5. Adjusted cost basis = lot cost - all costs of gold sold so far.
"""

import logging
from collections.abc import Iterable
from datetime import timedelta
from decimal import Decimal

from trustlots.arithmetic import exact_context, rounded_context
from trustlots.exceptions import MissingProceedRecordError
from trustlots.models.trust import CapitalChange, Lot
from trustlots.normalization.ledger import ProceedsLedger

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)
DEFAULT_PRECISION = 28


class CostBasisEngine:
    """Turns lots into capital changes, adjusting basis for interim gold sales."""

    def __init__(self, prorate_lot_prices: bool = False, precision: int = DEFAULT_PRECISION):
        self.prorate_lot_prices = prorate_lot_prices
        self.precision = precision

    def calculate_gold_sales(
        self, lots: Iterable[Lot], proceeds: ProceedsLedger
    ) -> list[CapitalChange]:
        """Compute every capital change for the lots, sorted by sell then buy date.

        Raises:
            MissingProceedRecordError: A lot's buy date has no proceeds record.
        """
        changes: list[CapitalChange] = []
        for lot in lots:
            changes.extend(self.lot_changes(lot, proceeds))

        # list.sort is stable, so ties keep lot order.
        changes.sort(key=lambda change: (change.sell_date, change.buy_date))
        logger.info("Computed %d capital change(s)", len(changes))
        return changes

    def lot_changes(self, lot: Lot, proceeds: ProceedsLedger) -> list[CapitalChange]:
        """Capital changes for one lot, in date order.

        Only the cost per ounce is rounded, to ``precision`` digits. Everything
        after it is exact, so the final basis equals the buy price less the sum
        of every cost of gold sold.
        """
        with exact_context():
            return self._lot_changes(lot, proceeds)

    def _lot_changes(self, lot: Lot, proceeds: ProceedsLedger) -> list[CapitalChange]:
        buy_price = self._buy_price(lot)

        record = proceeds.record_for(lot.buy_date)
        if record is None:
            raise MissingProceedRecordError(lot.buy_date)
        gold_ounces = record.gold_ounces * lot.quantity
        with rounded_context(self.precision):
            cost_per_ounce = buy_price / gold_ounces

        adjusted_cost_basis = buy_price
        changes: list[CapitalChange] = []

        window_end = lot.sell_date - ONE_DAY if lot.sell_date is not None else None
        for interim in proceeds.records_between(lot.buy_date + ONE_DAY, window_end):
            if not interim.has_sale:
                continue
            gold_ounces_sold = interim.gold_ounces_sold * lot.quantity
            cost_of_gold_sold = gold_ounces_sold * cost_per_ounce
            proceeds_of_gold_sold = lot.quantity * interim.proceeds

            changes.append(
                CapitalChange(
                    buy_price=cost_of_gold_sold,
                    sell_price=proceeds_of_gold_sold,
                    buy_date=lot.buy_date,
                    sell_date=interim.date,
                    source=lot,
                )
            )
            adjusted_cost_basis -= cost_of_gold_sold

        logger.debug(
            "Lot of %s bought %s: %d interim gold sale(s), basis %s -> %s",
            lot.quantity,
            lot.buy_date,
            len(changes),
            buy_price,
            adjusted_cost_basis,
        )
        if adjusted_cost_basis < 0:
            logger.warning(
                "Adjusted cost basis for lot bought %s went negative: %s",
                lot.buy_date,
                adjusted_cost_basis,
            )

        if lot.sell_date is not None:
            # Part of the original investment already left as gold, so the
            # shares themselves carry only the adjusted basis.
            changes.append(
                CapitalChange(
                    buy_price=adjusted_cost_basis,
                    sell_price=self._sell_price(lot),
                    buy_date=lot.buy_date,
                    sell_date=lot.sell_date,
                    source=lot,
                )
            )
        return changes

    def _buy_price(self, lot: Lot) -> Decimal:
        if self.prorate_lot_prices:
            return lot.prorated_buy_price
        return lot.buy_price

    def _sell_price(self, lot: Lot) -> Decimal | None:
        if self.prorate_lot_prices:
            return lot.prorated_sell_price
        return lot.sell_price
