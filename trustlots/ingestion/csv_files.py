"""Read transaction and proceeds CSV files into validated ledgers."""

import csv
from pathlib import Path

from trustlots.normalization.ledger import ProceedsLedger, TransactionLedger


def read_rows(file_path: Path) -> list[tuple[int, list[str]]]:
    """Read a header-less CSV file into ``(line, row)`` pairs, skipping blank lines.

    ``line`` is the file line the row ends on, so errors point at the file.
    """
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    rows: list[tuple[int, list[str]]] = []
    with file_path.open(newline="") as handle:
        reader = csv.reader(handle)
        for row in reader:
            if any(field.strip() for field in row):
                rows.append((reader.line_num, row))
    return rows


def load_transactions(file_path: Path) -> TransactionLedger:
    """Parse ``date,type,quantity,unit_price`` lines."""
    return TransactionLedger.from_numbered_rows(read_rows(file_path))


def load_proceeds(file_path: Path) -> ProceedsLedger:
    """Parse ``date,gold_ounces[,gold_ounces_sold,proceeds]`` lines."""
    return ProceedsLedger.from_numbered_rows(read_rows(file_path))
