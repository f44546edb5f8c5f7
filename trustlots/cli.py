"""Typer CLI interface for trustlots."""

from pathlib import Path

import typer

from trustlots.config import Settings
from trustlots.exceptions import LotConsistencyError, TaxComputationError
from trustlots.logging_utils import configure_logging

app = typer.Typer(
    name="trustlots",
    help="trustlots — FIFO lots and gold-sale cost basis for grantor trust ETF shares.",
)


def _load_settings(
    transactions: Path | None,
    proceeds: Path | None,
    prorate: bool | None,
    log_level: str | None,
) -> Settings:
    try:
        settings = Settings.load().with_overrides(
            transactions_file=str(transactions) if transactions else None,
            proceeds_file=str(proceeds) if proceeds else None,
            prorate_lot_prices=prorate,
            log_level=log_level.upper() if log_level else None,
        )
        configure_logging(settings.log_level)
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)
    return settings


def _fail(exc: Exception) -> typer.Exit:
    if isinstance(exc, LotConsistencyError):
        typer.echo(f"Internal error: {exc}", err=True)
    else:
        typer.echo(f"Error: {exc}", err=True)
    return typer.Exit(1)


_TRANSACTIONS_OPTION = typer.Option(
    None,
    "--transactions",
    "-t",
    help="Transactions CSV (date,type,quantity,unit_price). Default: my_transactions.csv",
)
_PROCEEDS_OPTION = typer.Option(
    None,
    "--proceeds",
    "-p",
    help="Trust proceeds CSV (date,gold_ounces[,gold_ounces_sold,proceeds]). Default: proceeds.csv",
)
_PRORATE_OPTION = typer.Option(
    None,
    "--prorate/--no-prorate",
    help="Price each lot at unit price x lot quantity instead of the full transaction price",
)
_LOG_LEVEL_OPTION = typer.Option(None, "--log-level", help="Logging level (DEBUG, INFO, ...)")


@app.command()
def compute(
    transactions: Path | None = _TRANSACTIONS_OPTION,
    proceeds: Path | None = _PROCEEDS_OPTION,
    prorate: bool | None = _PRORATE_OPTION,
    log_level: str | None = _LOG_LEVEL_OPTION,
    output: Path | None = typer.Option(None, "--output", "-o", help="Also write the report here"),
) -> None:
    """Print lots, capital changes, and per-year totals."""
    from trustlots.engines.reconciliation import GoldTrustReconciler
    from trustlots.reports import FullReportGenerator

    settings = _load_settings(transactions, proceeds, prorate, log_level)
    try:
        result = GoldTrustReconciler(settings).run_files(
            Path(settings.transactions_file), Path(settings.proceeds_file)
        )
    except (TaxComputationError, FileNotFoundError) as exc:
        raise _fail(exc)

    report = FullReportGenerator().render(result)
    typer.echo(report, nl=False)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(report)
        typer.echo(f"Report written to {output}", err=True)


@app.command()
def lots(
    transactions: Path | None = _TRANSACTIONS_OPTION,
    log_level: str | None = _LOG_LEVEL_OPTION,
) -> None:
    """Print the FIFO lot listing for the transactions alone."""
    from trustlots.engines.lot_matcher import LotMatcher
    from trustlots.engines.lot_validator import LotValidator
    from trustlots.ingestion.csv_files import load_transactions
    from trustlots.reports import LotReportGenerator

    settings = _load_settings(transactions, None, None, log_level)
    try:
        ledger = load_transactions(Path(settings.transactions_file))
        matched = LotMatcher().break_into_lots(ledger)
        LotValidator().check(matched, ledger)
    except (TaxComputationError, FileNotFoundError) as exc:
        raise _fail(exc)

    typer.echo(LotReportGenerator().render(matched), nl=False)


@app.command()
def summary(
    transactions: Path | None = _TRANSACTIONS_OPTION,
    proceeds: Path | None = _PROCEEDS_OPTION,
    prorate: bool | None = _PRORATE_OPTION,
    log_level: str | None = _LOG_LEVEL_OPTION,
) -> None:
    """Show per-year short/long-term proceeds and cost as a table."""
    from rich.console import Console
    from rich.table import Table

    from trustlots.engines.reconciliation import GoldTrustReconciler

    settings = _load_settings(transactions, proceeds, prorate, log_level)
    try:
        result = GoldTrustReconciler(settings).run_files(
            Path(settings.transactions_file), Path(settings.proceeds_file)
        )
    except (TaxComputationError, FileNotFoundError) as exc:
        raise _fail(exc)

    tbl = Table(title="Capital Gains by Tax Year", show_header=True)
    tbl.add_column("Year")
    tbl.add_column("Term")
    tbl.add_column("Proceeds", justify="right")
    tbl.add_column("Cost", justify="right")
    tbl.add_column("Gain/Loss", justify="right")
    for year, record in result.tax_years.items():
        for term_name, totals in (("short", record.short), ("long", record.long)):
            tbl.add_row(
                str(year),
                term_name,
                f"{totals.proceeds:,.2f}",
                f"{totals.cost:,.2f}",
                f"{totals.net:,.2f}",
            )

    Console().print(tbl)
