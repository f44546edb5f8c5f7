"""Structural checks on matched lots."""

from collections.abc import Iterable, Sequence
from decimal import Decimal
from itertools import pairwise

from trustlots.exceptions import LotConsistencyError
from trustlots.models.trust import BuyTransaction, Lot, SellTransaction, Transaction


class LotValidator:
    """Verifies that a lot sequence is a faithful FIFO decomposition.

    Every failure raises LotConsistencyError. These indicate a bug in lot
    matching rather than bad input, so callers should not recover from them.
    """

    def check(self, lots: Sequence[Lot], transactions: Iterable[Transaction]) -> None:
        self.check_lots(lots)
        self.check_fifo_order(lots)
        self.check_quantities(lots, transactions)

    def check_lots(self, lots: Iterable[Lot]) -> None:
        """Basic sanity checks on each lot by itself."""
        for lot in lots:
            if not isinstance(lot.quantity, Decimal) or not lot.quantity.is_finite():
                raise LotConsistencyError(
                    f"invalid quantity class: {type(lot.quantity).__name__}"
                )
            if lot.quantity <= 0:
                raise LotConsistencyError(f"non-positive lot quantity: {lot.quantity}")
            if not isinstance(lot.buy_transaction, BuyTransaction):
                raise LotConsistencyError(f"invalid buy_transaction: {lot.buy_transaction!r}")
            if lot.sell_transaction is not None and not isinstance(
                lot.sell_transaction, SellTransaction
            ):
                raise LotConsistencyError(f"invalid sell_transaction: {lot.sell_transaction!r}")
            if lot.sell_date is not None and lot.sell_date < lot.buy_date:
                raise LotConsistencyError(f"lot sold before it was bought: {lot!r}")

    def check_fifo_order(self, lots: Sequence[Lot]) -> None:
        """Buy dates never go backwards, and sold lots come before open ones."""
        for lot1, lot2 in pairwise(lots):
            if lot1.buy_date > lot2.buy_date:
                raise LotConsistencyError("lots buy dates out of order")

            if lot1.sell_date is not None:
                if lot2.sell_date is not None and lot1.sell_date > lot2.sell_date:
                    raise LotConsistencyError("lot sell dates out of order")
            elif lot2.sell_date is not None:
                raise LotConsistencyError("a sold lot appears after an unsold one")

    def check_quantities(self, lots: Sequence[Lot], transactions: Iterable[Transaction]) -> None:
        """Each transaction's quantity is exactly covered by its lots."""
        # Keyed by identity: two same-day buys at the same price are still
        # separate transactions.
        buy_totals: dict[int, Decimal] = {}
        sell_totals: dict[int, Decimal] = {}
        for lot in lots:
            key = id(lot.buy_transaction)
            buy_totals[key] = buy_totals.get(key, Decimal("0")) + lot.quantity
            if lot.sell_transaction is not None:
                key = id(lot.sell_transaction)
                sell_totals[key] = sell_totals.get(key, Decimal("0")) + lot.quantity

        for tx in transactions:
            totals = buy_totals if isinstance(tx, BuyTransaction) else sell_totals
            lot_quantity = totals.get(id(tx), Decimal("0"))
            if lot_quantity != tx.quantity:
                raise LotConsistencyError(
                    "lot quantities do not add up to transaction quantity: "
                    f"expected {tx.quantity}, got {lot_quantity}"
                )
