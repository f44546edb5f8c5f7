"""Lot matching engine: FIFO decomposition of buys and sells into lots."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from trustlots.exceptions import LotConsistencyError, UnmatchableSellError
from trustlots.models.trust import BuyTransaction, Lot, SellTransaction, Transaction

logger = logging.getLogger(__name__)


@dataclass
class OpenBuy:
    """A buy transaction and how many of its shares are still unsold."""

    transaction: BuyTransaction
    remaining: Decimal


class LotMatcher:
    """Breaks a chronological transaction history into FIFO lots."""

    def break_into_lots(self, transactions: Iterable[Transaction]) -> list[Lot]:
        """Decompose buy/sell transactions into lots, oldest shares sold first.

        A sell spanning several buys yields one lot per buy it touches, and a
        buy split across several sells yields one lot per sell. Shares never
        sold come last as open lots.

        Raises:
            UnmatchableSellError: A sell needs more shares than remain unsold.
            LotConsistencyError: A transaction is neither a buy nor a sell.
        """
        queue: list[OpenBuy] = []
        head = 0
        lots: list[Lot] = []

        for tx in transactions:
            match tx:
                case BuyTransaction():
                    queue.append(OpenBuy(transaction=tx, remaining=tx.quantity))
                case SellTransaction():
                    unsold = tx.quantity
                    while unsold > 0:
                        if head >= len(queue):
                            raise UnmatchableSellError(tx.date)
                        buy = queue[head]

                        lot_quantity = min(buy.remaining, unsold)
                        buy.remaining -= lot_quantity
                        if buy.remaining == 0:
                            head += 1
                        unsold -= lot_quantity

                        lots.append(
                            Lot(
                                quantity=lot_quantity,
                                buy_transaction=buy.transaction,
                                sell_transaction=tx,
                            )
                        )
                case _:
                    raise LotConsistencyError(f"Unrecognized transaction: {tx!r}")

        open_lots = [
            Lot(quantity=buy.remaining, buy_transaction=buy.transaction)
            for buy in queue[head:]
        ]
        lots.extend(open_lots)

        logger.info(
            "Matched %d lot(s), %d still open", len(lots), len(open_lots)
        )
        return lots
