"""Runtime configuration loaded from the environment."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

ENV_PREFIX = "TRUSTLOTS_"
MIN_PRECISION = 28

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def _parse_precision(name: str, value: str) -> int:
    try:
        precision = int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None
    if precision < MIN_PRECISION:
        raise ValueError(f"{name} must be at least {MIN_PRECISION}, got {precision}")
    return precision


@dataclass(frozen=True)
class Settings:
    """Runtime configuration."""

    transactions_file: str = "my_transactions.csv"
    proceeds_file: str = "proceeds.csv"
    log_level: str = "WARNING"
    prorate_lot_prices: bool = False
    # Significant digits for cost per ounce; all other arithmetic is exact.
    decimal_precision: int = MIN_PRECISION

    @staticmethod
    def load(env: Mapping[str, str] | None = None) -> "Settings":
        """Load settings from ``TRUSTLOTS_*`` environment variables."""
        source = dict(os.environ if env is None else env)
        defaults = Settings()

        def get(key: str) -> str | None:
            return source.get(ENV_PREFIX + key)

        prorate = get("PRORATE_LOT_PRICES")
        precision = get("DECIMAL_PRECISION")
        return Settings(
            transactions_file=get("TRANSACTIONS_FILE") or defaults.transactions_file,
            proceeds_file=get("PROCEEDS_FILE") or defaults.proceeds_file,
            log_level=(get("LOG_LEVEL") or defaults.log_level).upper(),
            prorate_lot_prices=(
                _parse_bool(ENV_PREFIX + "PRORATE_LOT_PRICES", prorate)
                if prorate is not None
                else defaults.prorate_lot_prices
            ),
            decimal_precision=(
                _parse_precision(ENV_PREFIX + "DECIMAL_PRECISION", precision)
                if precision is not None
                else defaults.decimal_precision
            ),
        )

    def with_overrides(self, **overrides: object) -> "Settings":
        """Return a copy with any non-None overrides applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
