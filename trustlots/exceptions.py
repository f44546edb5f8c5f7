"""Custom exceptions for trustlots."""

from datetime import date


class TaxComputationError(Exception):
    """Base exception for tax computation errors."""


class DataError(TaxComputationError):
    """Raised when transaction or proceeds input fails validation."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class UnmatchableSellError(DataError):
    """Raised when a sell has no remaining buy quantity to consume."""

    def __init__(self, sell_date: date):
        self.date = sell_date
        super().__init__(f"unmatchable sell on {sell_date.isoformat()}")


class MissingProceedRecordError(DataError):
    """Raised when a lot's buy date has no matching proceeds record."""

    def __init__(self, missing_date: date):
        self.date = missing_date
        super().__init__(f"no proceeds record for {missing_date.isoformat()}")


class LotConsistencyError(TaxComputationError):
    """Raised when matched lots violate a structural invariant.

    This signals a defect in lot matching, not bad user data.
    """
