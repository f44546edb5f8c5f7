"""CSV ingestion for transactions and trust proceeds."""

from trustlots.ingestion.csv_files import load_proceeds, load_transactions, read_rows

__all__ = ["load_proceeds", "load_transactions", "read_rows"]
